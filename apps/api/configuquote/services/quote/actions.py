from __future__ import annotations

from typing import Any

from loguru import logger

from configuquote.core.errors import GenerationError, InputValidationError
from configuquote.schemas.quote import ActionResult, QuoteRequestInput
from configuquote.services.quote.flow import QuoteRequestFlow

UNKNOWN_ERROR = "An unknown error occurred while generating the quote request."


async def handle_generate_quote_request(payload: Any, flow: QuoteRequestFlow) -> ActionResult:
    try:
        data = QuoteRequestInput.parse(payload)
    except InputValidationError as e:
        logger.info(f"Rejected quote request input: {e}")
        return ActionResult(error=str(e), status_code=422)

    try:
        output = await flow.run(data)
    except GenerationError as e:
        logger.error(f"Error generating quote request: {e}")
        return ActionResult(error=str(e) or UNKNOWN_ERROR, status_code=502)
    except Exception as e:
        logger.exception(f"Unexpected error generating quote request: {e}")
        return ActionResult(error=UNKNOWN_ERROR, status_code=502)

    return ActionResult(data=output)
