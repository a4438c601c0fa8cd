"""NerdGraph GraphQL API client."""
from typing import Any, Dict, Optional

import httpx

from ..core.errors import UpstreamError
from ..core.logger import LoggerService
from ..core.settings import Settings
from .models import GraphQLRequest


class NerdGraphClient:
    """Client for the New Relic NerdGraph API.

    Holds one ``httpx.AsyncClient`` for the lifetime of the process. The
    credential is read from settings once and sent in the ``API-Key`` header.
    """

    def __init__(
        self,
        settings: Settings,
        logger: LoggerService,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client.

        Args:
            settings: Application settings
            logger: Logger service
            transport: Optional transport override, used by tests
        """
        self.settings = settings
        self.endpoint = settings.NEW_RELIC_GRAPHQL_URL
        self.api_key = settings.NEW_RELIC_API_KEY
        self.logger = logger.get_logger(__name__)
        self.client = self._create_client(transport)

    def _create_client(
        self, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> httpx.AsyncClient:
        """Create and configure HTTP client.

        Returns:
            Configured HTTP client
        """
        return httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json; charset=utf-8",
            },
            timeout=float(self.settings.NEW_RELIC_TIMEOUT),
            transport=transport,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Run a GraphQL document and return its ``data`` object.

        Args:
            query: GraphQL document
            variables: Optional variables

        Returns:
            The ``data`` member of the GraphQL response

        Raises:
            UpstreamError: On transport failure, an undecodable response or
                GraphQL-level errors
        """
        request = GraphQLRequest(query=query, variables=variables or {})

        self.logger.debug(
            "NerdGraph request",
            extra={"endpoint": self.endpoint, "query_length": len(query)},
        )

        try:
            response = await self.client.post(
                self.endpoint,
                json=request.model_dump(),
                headers={"API-Key": self.api_key},
            )
        except httpx.HTTPError as e:
            self.logger.error(
                "NerdGraph request failed",
                extra={
                    "endpoint": self.endpoint,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise UpstreamError(str(e) or type(e).__name__) from e

        try:
            body = response.json()
        except ValueError as e:
            self.logger.error(
                "Failed to decode NerdGraph response",
                extra={
                    "status_code": response.status_code,
                    "text": response.text[:500],
                },
            )
            if response.status_code != httpx.codes.OK:
                raise UpstreamError(
                    "graphql: server returned a non-200 status code: "
                    f"{response.status_code}",
                    status_code=response.status_code,
                ) from e
            raise UpstreamError(f"decoding response: {e}") from e

        if not isinstance(body, dict):
            raise UpstreamError(
                "decoding response: expected a JSON object",
                status_code=response.status_code,
            )

        self.logger.debug(
            "NerdGraph response",
            extra={
                "status_code": response.status_code,
                "has_errors": bool(body.get("errors")),
            },
        )

        errors = body.get("errors") or []
        if not isinstance(errors, list):
            raise UpstreamError(
                "decoding response: errors must be a list",
                status_code=response.status_code,
            )
        if errors:
            self.logger.warning(
                "NerdGraph returned GraphQL errors",
                extra={"errors": errors, "status_code": response.status_code},
            )
            raise UpstreamError(
                f"graphql: {self._error_message(errors[0])}",
                status_code=response.status_code,
            )

        if response.status_code != httpx.codes.OK:
            raise UpstreamError(
                "graphql: server returned a non-200 status code: "
                f"{response.status_code}",
                status_code=response.status_code,
            )

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise UpstreamError(
                "decoding response: data must be an object",
                status_code=response.status_code,
            )
        return data

    @staticmethod
    def _error_message(error: Any) -> str:
        if isinstance(error, dict):
            message = error.get("message")
            if message:
                return str(message)
            return "unknown error"
        return str(error)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
        self.logger.info("NerdGraph HTTP client closed")

    async def __aenter__(self) -> "NerdGraphClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()
