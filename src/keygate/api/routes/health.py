"""Liveness endpoint."""
from typing import Dict

from fastapi import Request

from ...core.logger import LoggerService
from .base import BaseRouter

HEALTHY: Dict[str, str] = {"status": "healthy"}


class HealthRouter(BaseRouter):
    """Serves ``GET /health``; never contacts NerdGraph."""

    def __init__(self, logger: LoggerService) -> None:
        super().__init__(logger=logger, tags=["health"])

    def _setup_routes(self) -> None:
        self.router.add_api_route(
            "/health",
            self.health_check,
            methods=["GET"],
            response_model=Dict[str, str],
            summary="Health Check",
            description="Report that the gateway process is up.",
            operation_id="get_health_status_v1",
            responses={
                200: {
                    "description": "Gateway is up",
                    "content": {"application/json": {"example": HEALTHY}},
                }
            },
        )

    async def health_check(self, request: Request) -> Dict[str, str]:
        """Return the static healthy status."""
        self.logger.debug(
            "Health check requested",
            extra={"request_id": self.request_id(request)},
        )
        return dict(HEALTHY)
