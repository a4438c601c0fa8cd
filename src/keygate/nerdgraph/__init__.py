"""New Relic NerdGraph client, models and mutation builders."""
from .client import NerdGraphClient
from .models import (
    CreatedKey,
    CreateKeyError,
    CreateKeysPayload,
    DeletedKey,
    DeleteKeyError,
    DeleteKeysPayload,
    GraphQLRequest,
)
from .mutations import build_create_ingest_key_mutation, build_delete_keys_mutation

__all__ = [
    "CreatedKey",
    "CreateKeyError",
    "CreateKeysPayload",
    "DeletedKey",
    "DeleteKeyError",
    "DeleteKeysPayload",
    "GraphQLRequest",
    "NerdGraphClient",
    "build_create_ingest_key_mutation",
    "build_delete_keys_mutation",
]
