"""OpenAPI documentation for key management endpoints."""
from typing import Any, Dict, List

from .responses import ERROR_RESPONSES

KEYS_TAGS: List[str] = ["keys"]

CREATE_INSERT_KEY_OPERATION_ID = "create_insert_key_v1"
CREATE_INSERT_KEY_SUMMARY = "Create Insert Key"
CREATE_INSERT_KEY_DESCRIPTION = """
Create a New Relic ingest key through the NerdGraph `apiAccessCreateKeys`
mutation and return the created key as received.
"""

DELETE_KEY_OPERATION_ID = "delete_key_v1"
DELETE_KEY_SUMMARY = "Delete Key"
DELETE_KEY_DESCRIPTION = """
Delete a New Relic ingest or user key through the NerdGraph
`apiAccessDeleteKeys` mutation and return the deleted key ids.
"""

CREATE_INSERT_KEY_REQUEST_BODY: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "required": ["account_id", "ingestType"],
                    "properties": {
                        "account_id": {"type": "integer"},
                        "name": {"type": "string"},
                        "notes": {"type": "string"},
                        "ingestType": {
                            "type": "string",
                            "enum": ["BROWSER", "LICENSE"],
                        },
                    },
                },
                "example": {
                    "account_id": 1234567,
                    "name": "browser-prod",
                    "notes": "Created by the deploy pipeline",
                    "ingestType": "BROWSER",
                },
            }
        },
    }
}

DELETE_KEY_REQUEST_BODY: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "required": ["key_id"],
                    "properties": {
                        "key_id": {"type": "string"},
                        "key_type": {
                            "type": "string",
                            "enum": ["INGEST", "USER"],
                            "default": "INGEST",
                        },
                    },
                },
                "example": {"key_id": "ABC123DEF456", "key_type": "INGEST"},
            }
        },
    }
}

CREATE_INSERT_KEY_RESPONSES: Dict[int, Dict] = {
    200: {
        "description": "Key created",
        "content": {
            "application/json": {
                "example": {
                    "insert_key": {
                        "id": "ABC123DEF456",
                        "key": "NRII-xxxxxxxxxxxxxxxx",
                        "name": "browser-prod",
                        "notes": "Created by the deploy pipeline",
                        "type": "INGEST",
                        "ingestType": "BROWSER",
                    }
                }
            }
        },
    },
    **ERROR_RESPONSES,
}

DELETE_KEY_RESPONSES: Dict[int, Dict] = {
    200: {
        "description": "Key deleted",
        "content": {
            "application/json": {
                "example": {"deleted_keys": [{"id": "ABC123DEF456"}]}
            }
        },
    },
    **ERROR_RESPONSES,
}
