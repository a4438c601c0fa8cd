"""Ingest Key Gateway FastAPI application."""
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .api.middleware.auth import AuthMiddleware
from .api.middleware.error_handler import ErrorHandlerMiddleware
from .api.middleware.request_id import RequestIDMiddleware
from .api.routes.health import HealthRouter
from .api.routes.keys import KeysRouter
from .core.errors import error_body


class KeyGatewayApp(FastAPI):
    """Ingest Key Gateway FastAPI application."""

    def __init__(
        self,
        lifespan: Optional[Callable] = None,
    ) -> None:
        """Initialize application.

        Args:
            lifespan: Application lifespan manager
        """
        self._configured = False
        super().__init__(
            title="Ingest Key Gateway",
            description="""
            # New Relic Key Management Facade

            Creates and deletes New Relic ingest keys through NerdGraph
            mutations and relays the upstream result.
            """,
            version="0.1.0",  # Replaced in configure()
            docs_url="/docs",
            redoc_url="/redoc",
            lifespan=lifespan,
        )

        # Set by setup_di() before configure()
        self.state.logger = None
        self.state.settings = None
        self.state.nerdgraph_client = None
        self.state.key_service = None

    def configure(self) -> None:
        """Configure middleware and routes after dependencies are set."""
        if self._configured:
            raise RuntimeError("Application is already configured")

        if not all(
            [
                self.state.logger,
                self.state.settings,
                self.state.nerdgraph_client,
                self.state.key_service,
            ]
        ):
            raise RuntimeError("Dependencies must be set before configuring the app.")

        logger = self.state.logger
        settings = self.state.settings
        app_logger = logger.get_logger(__name__)

        self.title = settings.PROJECT_NAME
        self.version = settings.VERSION

        app_logger.info(
            "Configuring CORS middleware",
            extra={"allowed_origins": settings.BACKEND_CORS_ORIGINS},
        )
        self.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        # Added innermost first; RequestIDMiddleware ends up outermost
        self.add_middleware(ErrorHandlerMiddleware, logger=logger, settings=settings)
        self.add_middleware(AuthMiddleware, logger=logger, settings=settings)
        self.add_middleware(RequestIDMiddleware, logger=logger, settings=settings)

        self.include_router(HealthRouter(logger=logger).router)

        app_logger.info("Registering KeysRouter")
        keys_router = KeysRouter(logger=logger, key_service=self.state.key_service)
        self.include_router(keys_router.router)

        self.add_exception_handler(HTTPException, self._http_exception_handler)
        self.add_exception_handler(
            RequestValidationError, self._validation_exception_handler
        )

        app_logger.info(
            "Application configuration completed successfully",
            extra={
                "middleware_count": len(self.user_middleware),
                "router_count": len(self.router.routes),
            },
        )

        self._configured = True

    async def _http_exception_handler(
        self, request: Request, exc: HTTPException
    ) -> JSONResponse:
        """Render HTTP exceptions (404, 405, ...) in the gateway error format."""
        self.state.logger.get_logger(__name__).warning(
            "HTTP error occurred",
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
                "detail": exc.detail,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    async def _validation_exception_handler(
        self, request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render validation errors as 400 responses."""
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        self.state.logger.get_logger(__name__).warning(
            "Validation error",
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "path": request.url.path,
                "method": request.method,
                "errors": errors,
            },
        )
        return JSONResponse(
            status_code=400,
            content=error_body("Invalid JSON request body", errors),
        )
