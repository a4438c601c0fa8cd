"""Core services: settings, logging and errors."""
from .errors import GatewayError, UpstreamError, error_body
from .logger import LoggerService
from .settings import Settings, settings

__all__ = [
    "GatewayError",
    "LoggerService",
    "Settings",
    "UpstreamError",
    "error_body",
    "settings",
]
