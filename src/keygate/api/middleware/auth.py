"""Service authentication middleware."""
import re
import secrets
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from ...core.errors import GatewayError
from ...core.logger import LoggerService
from ...core.settings import Settings


class AuthMiddleware:
    """Middleware for inbound Bearer token authentication.

    When ``ENABLE_SERVICE_AUTH`` is set, every non-public route requires
    ``Authorization: Bearer <SERVICE_API_KEY>``. Failures are answered
    directly with a JSON error body.
    """

    # Routes that don't require authentication
    PUBLIC_ROUTES = {
        "/docs",
        "/docs/oauth2-redirect",
        "/redoc",
        "/openapi.json",
        "/health",
    }

    TOKEN_PATTERN = re.compile(r"^Bearer\s+(\S+)$")

    def __init__(
        self,
        app: ASGIApp,
        logger: LoggerService,
        settings: Settings,
    ) -> None:
        """Initialize middleware.

        Args:
            app: ASGI application
            logger: Logger service
            settings: Settings instance
        """
        self.app = app
        self.logger = logger.get_logger(__name__)
        self.settings = settings

    def _get_token(self, request: Request) -> Optional[str]:
        """Extract the Bearer token from the Authorization header.

        Returns:
            Token if the header is present, None otherwise

        Raises:
            GatewayError: If the header is not a Bearer token
        """
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return None

        match = self.TOKEN_PATTERN.match(auth_header)
        if not match:
            raise GatewayError(code=401, message="Bearer token required")
        return match.group(1)

    def _validate_service_auth(self, request: Request, request_id: Optional[str]) -> None:
        """Check the request's token against ``SERVICE_API_KEY``.

        Raises:
            GatewayError: 500 if misconfigured, 401 if the token is missing
                or wrong
        """
        if not self.settings.SERVICE_API_KEY:
            self.logger.error(
                "Service auth enabled but SERVICE_API_KEY not set",
                extra={"request_id": request_id, "path": request.url.path},
            )
            raise GatewayError(code=500, message="Service authentication misconfigured")

        token = self._get_token(request)
        if not token:
            raise GatewayError(code=401, message="Authentication required")

        if not secrets.compare_digest(
            token.encode(), self.settings.SERVICE_API_KEY.encode()
        ):
            self.logger.warning(
                "Invalid service API key",
                extra={"request_id": request_id, "path": request.url.path},
            )
            raise GatewayError(code=401, message="Invalid service API key")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        request_id = getattr(request.state, "request_id", None)
        path = request.url.path

        if not self.settings.ENABLE_SERVICE_AUTH or path in self.PUBLIC_ROUTES:
            await self.app(scope, receive, send)
            return

        try:
            self._validate_service_auth(request, request_id)
        except GatewayError as e:
            self.logger.warning(
                "Authentication failed",
                extra={
                    "request_id": request_id,
                    "path": path,
                    "method": request.method,
                    "error_message": e.message,
                },
            )
            response = JSONResponse(status_code=e.code, content=e.to_dict())
            await response(scope, receive, send)
            return

        self.logger.debug(
            "Service authentication successful",
            extra={"request_id": request_id, "path": path},
        )
        await self.app(scope, receive, send)
