"""Key management: request models, decoding and the key service."""
from .decoder import decode_request
from .models import (
    DeleteKeyRequest,
    DeleteKeyResponse,
    InsertKeyRequest,
    InsertKeyResponse,
)
from .service import KeyService

__all__ = [
    "DeleteKeyRequest",
    "DeleteKeyResponse",
    "InsertKeyRequest",
    "InsertKeyResponse",
    "KeyService",
    "decode_request",
]
