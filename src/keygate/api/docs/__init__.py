"""API documentation package.

OpenAPI documentation for API endpoints, organized by endpoint group:
- keys.py: Key management endpoints
- responses.py: Common error response examples
"""

from .keys import (
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
from .responses import ERROR_RESPONSES

__all__ = [
    "CREATE_INSERT_KEY_DESCRIPTION",
    "CREATE_INSERT_KEY_OPERATION_ID",
    "CREATE_INSERT_KEY_REQUEST_BODY",
    "CREATE_INSERT_KEY_RESPONSES",
    "CREATE_INSERT_KEY_SUMMARY",
    "DELETE_KEY_DESCRIPTION",
    "DELETE_KEY_OPERATION_ID",
    "DELETE_KEY_REQUEST_BODY",
    "DELETE_KEY_RESPONSES",
    "DELETE_KEY_SUMMARY",
    "ERROR_RESPONSES",
    "KEYS_TAGS",
]
