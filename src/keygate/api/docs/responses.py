"""Common response examples for API documentation."""
from typing import Dict

ERROR_RESPONSES: Dict[int, Dict] = {
    400: {
        "description": "Invalid request body or upstream rejected the request",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_body": {
                        "value": {
                            "error": "Invalid JSON request body",
                            "details": [
                                {
                                    "loc": ["ingestType"],
                                    "msg": "Field required",
                                    "type": "missing",
                                }
                            ],
                        }
                    },
                    "upstream_error": {
                        "value": {
                            "error": "API returned an error",
                            "details": [
                                {
                                    "message": "You do not have access to this account",
                                    "type": "INGEST",
                                    "errorType": "FORBIDDEN",
                                }
                            ],
                        }
                    },
                }
            }
        },
    },
    401: {
        "description": "Credential missing",
        "content": {
            "application/json": {
                "example": {"error": "Missing NEW_RELIC_API_KEY"}
            }
        },
    },
    500: {
        "description": "Upstream failure",
        "content": {
            "application/json": {
                "example": {
                    "error": "Failed to create insert key",
                    "details": "graphql: server returned a non-200 status code: 503",
                }
            }
        },
    },
}
