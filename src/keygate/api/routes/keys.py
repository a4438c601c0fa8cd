"""Key management router implementation."""
from fastapi import Request

from ...core.logger import LoggerService
from ...keys.models import DeleteKeyResponse, InsertKeyResponse
from ...keys.service import KeyService
from ..docs import (
    CREATE_INSERT_KEY_DESCRIPTION,
    CREATE_INSERT_KEY_OPERATION_ID,
    CREATE_INSERT_KEY_REQUEST_BODY,
    CREATE_INSERT_KEY_RESPONSES,
    CREATE_INSERT_KEY_SUMMARY,
    DELETE_KEY_DESCRIPTION,
    DELETE_KEY_OPERATION_ID,
    DELETE_KEY_REQUEST_BODY,
    DELETE_KEY_RESPONSES,
    DELETE_KEY_SUMMARY,
    KEYS_TAGS,
)
from .base import BaseRouter


class KeysRouter(BaseRouter):
    """Routes for creating and deleting NerdGraph keys.

    Bodies are read raw and handed to ``KeyService`` so the credential check
    runs before the body is decoded.
    """

    def __init__(self, logger: LoggerService, key_service: KeyService) -> None:
        """Initialize router.

        Args:
            logger: Logger service instance
            key_service: Service translating requests into NerdGraph mutations
        """
        self.key_service = key_service
        super().__init__(logger=logger, tags=KEYS_TAGS)

    def _setup_routes(self) -> None:
        self.router.add_api_route(
            "/create-insert-key",
            self.create_insert_key,
            methods=["POST"],
            response_model=InsertKeyResponse,
            summary=CREATE_INSERT_KEY_SUMMARY,
            description=CREATE_INSERT_KEY_DESCRIPTION,
            operation_id=CREATE_INSERT_KEY_OPERATION_ID,
            responses=CREATE_INSERT_KEY_RESPONSES,
            openapi_extra=CREATE_INSERT_KEY_REQUEST_BODY,
        )
        self.router.add_api_route(
            "/delete-key",
            self.delete_key,
            methods=["POST"],
            response_model=DeleteKeyResponse,
            summary=DELETE_KEY_SUMMARY,
            description=DELETE_KEY_DESCRIPTION,
            operation_id=DELETE_KEY_OPERATION_ID,
            responses=DELETE_KEY_RESPONSES,
            openapi_extra=DELETE_KEY_REQUEST_BODY,
        )

    async def create_insert_key(self, request: Request) -> InsertKeyResponse:
        """Create an ingest key from the JSON body.

        Args:
            request: FastAPI request; its raw body is decoded by the service

        Returns:
            The created key as returned by NerdGraph
        """
        return await self.key_service.create_insert_key(
            await request.body(), request_id=self.request_id(request)
        )

    async def delete_key(self, request: Request) -> DeleteKeyResponse:
        """Delete the key named in the JSON body.

        Args:
            request: FastAPI request; its raw body is decoded by the service

        Returns:
            The deleted keys as returned by NerdGraph
        """
        return await self.key_service.delete_key(
            await request.body(), request_id=self.request_id(request)
        )
