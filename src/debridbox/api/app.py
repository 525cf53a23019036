"""FastAPI application factory for the TorBox HTTP surface."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from debridbox.api.middleware import setup_cors
from debridbox.api.routes import router
from debridbox.config import Settings, get_settings
from debridbox.torbox.service import TorboxService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, service: TorboxService | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(title="debridbox TorBox resolver")
    app.state.service = service or TorboxService(settings)
    app.state.static_base_url = settings.static_base_url
    setup_cors(app)
    app.include_router(router)
    return app


def main() -> None:
    """Entry point for running the HTTP surface."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    logger.info("serving torbox resolver on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
