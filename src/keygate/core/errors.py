"""Gateway error types.

Every failure that ends up in an HTTP response is raised as a
``GatewayError`` carrying the status code and the JSON payload to send.
"""
from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Error with an HTTP status code and response details."""

    def __init__(
        self,
        code: int,
        message: str,
        details: Optional[Any] = None,
    ) -> None:
        """Initialize gateway error.

        Args:
            code: HTTP status code
            message: Error message, sent as the ``error`` field
            details: Optional error details, sent as the ``details`` field
        """
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.message, self.details)


class UpstreamError(GatewayError):
    """NerdGraph request failed at the transport or GraphQL level."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """Initialize upstream error.

        Args:
            message: Failure description
            status_code: Upstream HTTP status, when a response was received
        """
        super().__init__(code=500, message=message)
        self.status_code = status_code


def error_body(message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """Build the JSON error body shared by every endpoint.

    Args:
        message: Error message
        details: Optional details; omitted from the body when empty

    Returns:
        Error response dictionary
    """
    body: Dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return body
