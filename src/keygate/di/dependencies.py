"""Dependency injection container."""
from dependency_injector import containers, providers

from ..core.logger import LoggerService
from ..core.settings import Settings
from ..keys.service import KeyService
from ..nerdgraph.client import NerdGraphClient


class Container(containers.DeclarativeContainer):
    """Main application container."""

    # Settings
    settings = providers.Singleton(Settings)

    # Core services
    logger = providers.Singleton(LoggerService, settings_instance=settings)

    # Upstream client, one HTTP connection pool per process
    nerdgraph_client = providers.Singleton(
        NerdGraphClient,
        settings=settings,
        logger=logger,
    )

    # Business services
    key_service = providers.Singleton(
        KeyService,
        client=nerdgraph_client,
        logger=logger,
    )


container = Container()
