from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from configuquote.core.errors import GenerationError
from configuquote.schemas.quote import QUOTE_OUTPUT_SCHEMA, QuoteRequestInput, QuoteRequestOutput
from configuquote.services.llm.factory import JSONCompletionLLM
from configuquote.services.llm.gemini_chat import LLMRateLimitError
from configuquote.services.quote.prompt import render_quote_prompt

UNEXPECTED_RESPONSE = "Failed to generate quote request due to an unexpected response from the AI model."


class QuoteGenerationService:
    """
    Renders the RFQ prompt, sends it to the configured model and checks that
    the reply carries a non-empty `quoteRequest` string.
    No retries: any failure is raised as GenerationError.
    """

    def __init__(self, llm: JSONCompletionLLM):
        self.llm = llm

    async def generate(self, data: QuoteRequestInput) -> QuoteRequestOutput:
        prompt = render_quote_prompt(data)

        try:
            raw = await asyncio.to_thread(self.llm.generate_json, prompt, QUOTE_OUTPUT_SCHEMA)
        except LLMRateLimitError as e:
            logger.warning(f"LLM rate limited: {e}")
            raise GenerationError(
                "LLM quota exceeded. Try again later or switch LLM_PROVIDER to a local model."
            ) from e
        except Exception as e:
            logger.error(f"LLM call failed: {type(e).__name__}: {e}")
            raise GenerationError(f"Failed to generate quote request: {e}") from e

        return _to_output(raw)


def _to_output(raw: Any) -> QuoteRequestOutput:
    text = raw.get("quoteRequest") if isinstance(raw, dict) else None
    if not isinstance(text, str) or not text.strip():
        logger.error(f"Prompt did not return the expected output format: {raw!r}")
        raise GenerationError(UNEXPECTED_RESPONSE)
    return QuoteRequestOutput(quoteRequest=text.strip())
