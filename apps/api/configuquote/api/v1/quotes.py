from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from configuquote.api.deps import get_quote_flow
from configuquote.schemas.quote import ActionResult
from configuquote.services.quote.actions import handle_generate_quote_request
from configuquote.services.quote.flow import QuoteRequestFlow

router = APIRouter(tags=["quotes"])

NOT_JSON = "Request body must be a JSON object."

@router.post("/quote-requests")
async def generate_quote_request(request: Request, flow: QuoteRequestFlow = Depends(get_quote_flow)):
    # raw body so malformed JSON gets the same ActionResult shape as bad fields
    try:
        payload = await request.json()
    except ValueError:
        result = ActionResult(error=NOT_JSON, status_code=422)
    else:
        result = await handle_generate_quote_request(payload, flow)

    return JSONResponse(
        status_code=result.status_code,
        content=result.model_dump(mode="json", exclude_none=True),
    )
