import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from card_ssr.api import api_router
from card_ssr.config import Settings, get_settings
from card_ssr.exceptions import StartupConfigError
from card_ssr.logger import setup_logger
from card_ssr.services.backend import BackendGateway
from card_ssr.storage import Storage

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
) -> FastAPI:
    settings = settings or get_settings()
    storage = storage or Storage.from_path(settings.index_html_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        # Startup
        async with httpx.AsyncClient(timeout=settings.backend_timeout) as client:
            app.state.gateway = BackendGateway(settings, client)
            yield
        # Shutdown: client closed above

    app = FastAPI(title=settings.sitename, lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage
    app.include_router(api_router)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": settings.sitename}

    return app


def run() -> None:
    setup_logger()
    try:
        settings = get_settings()
        setup_logger(level=settings.log_level)
        host, port = settings.bind_address()
        app = create_app(settings)
    except StartupConfigError as exc:
        logger.error("Cannot start: %s", exc)
        sys.exit(1)

    logger.info("Listening on %s:%s, backend %s", host, port, settings.backend_url)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
