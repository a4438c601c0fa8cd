"""Base router implementation."""
from abc import ABC, abstractmethod
from typing import List, Optional

from fastapi import APIRouter, Request

from ...core.logger import LoggerService


class BaseRouter(ABC):
    """Owns an ``APIRouter`` and registers its endpoints on construction."""

    def __init__(
        self,
        logger: LoggerService,
        prefix: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """Initialize router.

        Args:
            logger: Logger service instance
            prefix: URL prefix for all routes
            tags: OpenAPI tags for documentation
        """
        if not logger:
            raise ValueError("Logger service is required")

        self.logger = logger.get_logger(type(self).__module__)
        self.router = APIRouter(prefix=prefix, tags=tags or [])
        self._setup_routes()

    @staticmethod
    def request_id(request: Request) -> Optional[str]:
        """ID assigned by ``RequestIDMiddleware``, if it ran."""
        return getattr(request.state, "request_id", None)

    @abstractmethod
    def _setup_routes(self) -> None:
        """Register endpoints on ``self.router``."""
