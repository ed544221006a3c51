from fastapi import APIRouter
from fastapi.responses import FileResponse
from pathlib import Path

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
FORM_PAGE = STATIC_DIR / "index.html"

router = APIRouter(tags=["ui"])

@router.get("/", include_in_schema=False)
async def quote_form():
    return FileResponse(str(FORM_PAGE), media_type="text/html")
