"""API routers."""
from .health import HealthRouter
from .keys import KeysRouter

__all__ = ["HealthRouter", "KeysRouter"]
