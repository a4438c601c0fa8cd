"""Ingest Key Gateway application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI

from .app import KeyGatewayApp
from .core.settings import settings
from .di.setup import cleanup_di, setup_di


@asynccontextmanager
async def lifespan(app: KeyGatewayApp) -> AsyncGenerator[None, None]:
    """Log startup and release the NerdGraph client on shutdown."""
    app_logger = app.state.logger.get_logger(__name__)
    app_logger.info(
        "Application configured successfully",
        extra={
            "environment": app.state.settings.ENVIRONMENT,
            "endpoint": app.state.settings.NEW_RELIC_GRAPHQL_URL,
            "credential_configured": app.state.nerdgraph_client.has_credential,
        },
    )
    if not app.state.nerdgraph_client.has_credential:
        app_logger.warning("NEW_RELIC_API_KEY is not set; key requests will fail")

    try:
        yield
    finally:
        app_logger.info("Shutting down application")
        await app.state.nerdgraph_client.aclose()
        cleanup_di(app)


def init_app() -> FastAPI:
    """Initialize FastAPI application."""
    app = KeyGatewayApp(lifespan=lifespan)
    setup_di(app)
    app.configure()
    return app


def get_app() -> FastAPI:
    """Factory function to create the FastAPI app."""
    return init_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "keygate.main:get_app",
        factory=True,
        host=settings.HOST,
        port=int(settings.PORT),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
