from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from .config import Settings, build_cors, configure_logging, get_settings
from .core.intent_registry import registry
from .hook_router import router as hook_router
from .middleware.turn import TurnMiddleware
from .utils.response import success

logger = logging.getLogger("dialog_hook.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.meta.app_name, version=settings.meta.version)
    app = build_cors(settings)(app)
    app.add_middleware(TurnMiddleware, slow_ms=settings.logging.slow_turn_threshold_ms)
    app.include_router(hook_router)
    app.dependency_overrides[get_settings] = lambda: settings

    @app.get("/health")
    def health():
        return success({"bot": settings.bot.name, "intents": list(registry.intents())}, environment=settings.meta.environment)

    logger.info(f"{settings.meta.app_name} ready for bot {settings.bot.name}")
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dialog_hook.main:create_app",
        factory=True,
        host=settings.fastapi.host,
        port=settings.fastapi.port,
        reload=settings.fastapi.reload,
        workers=settings.fastapi.workers,
    )


if __name__ == "__main__":
    run()
