"""Key management service."""
from typing import Optional

from pydantic import ValidationError

from ..core.errors import GatewayError, UpstreamError
from ..core.logger import LoggerService
from ..nerdgraph.client import NerdGraphClient
from ..nerdgraph.models import CreateKeysPayload, DeleteKeysPayload
from ..nerdgraph.mutations import (
    build_create_ingest_key_mutation,
    build_delete_keys_mutation,
)
from .decoder import decode_request
from .models import (
    DeleteKeyRequest,
    DeleteKeyResponse,
    InsertKeyRequest,
    InsertKeyResponse,
)

MISSING_CREDENTIAL_MESSAGE = "Missing NEW_RELIC_API_KEY"
UPSTREAM_ERROR_MESSAGE = "API returned an error"


class KeyService:
    """Translates key requests into NerdGraph mutations.

    Each call runs credential check, decode, build, send and relay in that
    order. Outcomes other than success are raised as ``GatewayError``.
    """

    def __init__(self, client: NerdGraphClient, logger: LoggerService) -> None:
        """Initialize service.

        Args:
            client: NerdGraph client shared across requests
            logger: Logger service
        """
        self.client = client
        self.logger = logger.get_logger(__name__)

    def _require_credential(self, request_id: Optional[str]) -> None:
        if not self.client.has_credential:
            self.logger.error(
                "NerdGraph credential is not configured",
                extra={"request_id": request_id},
            )
            raise GatewayError(code=401, message=MISSING_CREDENTIAL_MESSAGE)

    async def create_insert_key(
        self, body: bytes, request_id: Optional[str] = None
    ) -> InsertKeyResponse:
        """Create an ingest key.

        Args:
            body: Raw JSON request body
            request_id: Optional request ID for logging

        Returns:
            The first created key, as returned upstream

        Raises:
            GatewayError: 401 without a credential, 400 on a bad body or
                upstream key errors, 500 on upstream failure or when no key
                was created
        """
        self.logger.info(
            "Received request to create a new key", extra={"request_id": request_id}
        )
        self._require_credential(request_id)
        request = decode_request(body, InsertKeyRequest)

        mutation = build_create_ingest_key_mutation(
            account_id=request.account_id,
            ingest_type=request.ingest_type,
            name=request.name,
            notes=request.notes,
        )

        try:
            data = await self.client.execute(mutation)
            payload = CreateKeysPayload.model_validate(
                data.get("apiAccessCreateKeys") or {}
            )
        except (UpstreamError, ValidationError) as e:
            self.logger.error(
                "Failed to create insert key",
                extra={"request_id": request_id, "error": str(e)},
            )
            raise GatewayError(
                code=500,
                message="Failed to create insert key",
                details=e.message if isinstance(e, UpstreamError) else str(e),
            ) from e

        if payload.errors:
            self.logger.warning(
                "NerdGraph rejected key creation",
                extra={"request_id": request_id, "error_count": len(payload.errors)},
            )
            raise GatewayError(
                code=400,
                message=UPSTREAM_ERROR_MESSAGE,
                details=[error.relay() for error in payload.errors],
            )

        if not payload.created_keys:
            raise GatewayError(code=500, message="No key was created")

        created = payload.created_keys[0]
        self.logger.info(
            "Insert key created",
            extra={
                "request_id": request_id,
                "key_id": created.id,
                "account_id": request.account_id,
                "ingest_type": request.ingest_type,
            },
        )
        return InsertKeyResponse(insert_key=created.relay())

    async def delete_key(
        self, body: bytes, request_id: Optional[str] = None
    ) -> DeleteKeyResponse:
        """Delete an ingest or user key.

        Args:
            body: Raw JSON request body
            request_id: Optional request ID for logging

        Returns:
            The deleted keys, as returned upstream

        Raises:
            GatewayError: 401 without a credential, 400 on a bad body or
                upstream key errors, 500 on upstream failure or when nothing
                was deleted
        """
        self.logger.info(
            "Received request to delete a key", extra={"request_id": request_id}
        )
        self._require_credential(request_id)
        request = decode_request(body, DeleteKeyRequest)

        mutation = build_delete_keys_mutation(
            key_id=request.key_id, key_type=request.key_type
        )

        try:
            data = await self.client.execute(mutation)
            payload = DeleteKeysPayload.model_validate(
                data.get("apiAccessDeleteKeys") or {}
            )
        except (UpstreamError, ValidationError) as e:
            self.logger.error(
                "Failed to delete key",
                extra={"request_id": request_id, "error": str(e)},
            )
            raise GatewayError(
                code=500,
                message="Failed to delete key",
                details=e.message if isinstance(e, UpstreamError) else str(e),
            ) from e

        if payload.errors:
            self.logger.warning(
                "NerdGraph rejected key deletion",
                extra={"request_id": request_id, "error_count": len(payload.errors)},
            )
            raise GatewayError(
                code=400,
                message=UPSTREAM_ERROR_MESSAGE,
                details=[error.relay() for error in payload.errors],
            )

        if not payload.deleted_keys:
            raise GatewayError(code=500, message="No key was deleted")

        self.logger.info(
            "Key deleted",
            extra={
                "request_id": request_id,
                "key_id": request.key_id,
                "key_type": request.key_type,
            },
        )
        return DeleteKeyResponse(
            deleted_keys=[key.relay() for key in payload.deleted_keys]
        )
