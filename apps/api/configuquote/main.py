from fastapi import FastAPI
from configuquote.core.config import settings
from configuquote.core.logging import setup_logging

from configuquote.api.v1.health import router as health_router
from configuquote.api.v1.quotes import router as quotes_router
from configuquote.api.v1.ui import router as ui_router

logger = setup_logging()

def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)

    @app.on_event("startup")
    async def _startup():
        logger.info(f"{settings.APP_NAME} starting (env={settings.ENV}, llm={settings.LLM_PROVIDER})")

    app.include_router(ui_router)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(quotes_router, prefix="/api/v1")

    return app

app = create_app()
