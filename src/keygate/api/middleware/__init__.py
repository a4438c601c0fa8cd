"""ASGI middleware."""
from .auth import AuthMiddleware
from .error_handler import ErrorHandlerMiddleware
from .request_id import RequestIDMiddleware

__all__ = ["AuthMiddleware", "ErrorHandlerMiddleware", "RequestIDMiddleware"]
