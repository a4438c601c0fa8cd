"""Error handling middleware."""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ...core.errors import GatewayError, UpstreamError, error_body
from ...core.logger import LoggerService
from ...core.settings import Settings


def upstream_status(exc: BaseException) -> Optional[int]:
    """Return the NerdGraph HTTP status behind ``exc``, if it wraps one."""
    while exc is not None:
        if isinstance(exc, UpstreamError):
            return exc.status_code
        exc = exc.__cause__
    return None


class ErrorHandlerMiddleware:
    """Turns exceptions raised by handlers into JSON error responses.

    Bodies have the form ``{"error": <message>, "details"?: <details>}``.
    Exceptions raised after the response has started are re-raised, since a
    second response cannot be sent.
    """

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
            settings: Application settings
        """
        self.app = app
        self.logger = logger.get_logger(__name__)
        self.settings = settings

    @staticmethod
    def _context(request: Request) -> Dict[str, Any]:
        return {
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "method": request.method,
        }

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
            return
        except GatewayError as e:
            if response_started:
                raise
            log = self.logger.warning if e.code < 500 else self.logger.error
            log(
                "Gateway error",
                extra={
                    **self._context(request),
                    "error_code": e.code,
                    "error_message": e.message,
                    "error_details": e.details,
                    "upstream_status_code": upstream_status(e),
                },
            )
            response = JSONResponse(status_code=e.code, content=e.to_dict())
        except Exception as e:
            self.logger.error(
                "Unexpected error",
                extra={
                    **self._context(request),
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "response_started": response_started,
                },
                exc_info=True,
            )
            if response_started:
                raise
            response = JSONResponse(
                status_code=500,
                content=error_body(
                    "Internal server error",
                    str(e) if self.settings.DEBUG else None,
                ),
            )

        await response(scope, receive, send)
