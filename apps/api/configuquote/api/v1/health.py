from fastapi import APIRouter
import httpx
from loguru import logger
from configuquote.core.config import settings

async def ollama_ok() -> bool:
    try:
        async with httpx.AsyncClient(timeout=2) as client:
            r = await client.get(
                f"{settings.OLLAMA_BASE_URL}/api/tags"
            )
            return r.status_code == 200
    except Exception as e:
        logger.warning(f"ollama_ok failed: {e!r}")
        return False


async def llm_ok() -> bool:
    if settings.LLM_PROVIDER.lower() == "ollama":
        return await ollama_ok()
    return bool(settings.GEMINI_API_KEY)

router = APIRouter(tags=["health"])

@router.get("/health")
async def health():
    return {
        "status": "ok",
        "llm_provider": settings.LLM_PROVIDER,
        "llm": await llm_ok(),
    }
