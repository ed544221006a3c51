from __future__ import annotations
import json
from typing import Any, Dict, Optional
from google import genai
from google.genai import types
from google.genai.errors import ClientError

from configuquote.core.config import settings


class LLMRateLimitError(Exception):
    pass


class GeminiChatLLM:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        key = api_key or settings.GEMINI_API_KEY
        if not key:
            raise RuntimeError("GEMINI_API_KEY is not set")
        self.client = genai.Client(api_key=key)
        self.model = model or settings.GEMINI_CHAT_MODEL

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> Any:
        """Ask Gemini for a JSON document matching `schema` and decode it."""
        try:
            res = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
        except ClientError as e:
            # 429 quota/rate-limit
            if getattr(e, "code", None) == 429 or getattr(e, "status_code", None) == 429:
                raise LLMRateLimitError(str(e)) from e
            raise
        return json.loads(res.text or "null")
