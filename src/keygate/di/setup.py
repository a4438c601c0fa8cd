"""FastAPI dependency injection setup."""
from typing import Optional

from fastapi import FastAPI

from .dependencies import container


def setup_di(app: FastAPI) -> None:
    """Attach container-managed services to ``app.state``.

    Args:
        app: FastAPI application instance

    Raises:
        RuntimeError: If a service cannot be created
    """
    logger = container.logger().get_logger(__name__)
    try:
        logger.info("Starting dependency injection configuration")

        app.state.logger = container.logger()
        app.state.settings = container.settings()
        app.state.nerdgraph_client = container.nerdgraph_client()
        app.state.key_service = container.key_service()

        logger.info(
            "Dependency injection configuration completed successfully",
            extra={"endpoint": app.state.settings.NEW_RELIC_GRAPHQL_URL},
        )
    except Exception as e:
        logger.error("Failed to configure dependency injection: %s" % str(e))
        cleanup_di(app)
        raise RuntimeError("Dependency injection configuration failed") from e


def cleanup_di(app: Optional[FastAPI] = None) -> None:
    """Release container singletons.

    Safe to call multiple times; errors are logged, not raised.
    """
    logger = container.logger().get_logger(__name__)
    try:
        logger.info("Starting dependency injection cleanup")
        container.shutdown_resources()
        container.reset_singletons()

        if app:
            app.dependency_overrides.clear()

        logger.info("Dependency injection cleanup completed successfully")
    except Exception as e:
        logger.error("Error during DI cleanup: %s" % str(e), exc_info=True)
