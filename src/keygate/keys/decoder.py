"""Request body decoding."""
import json
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import GatewayError

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_BODY_MESSAGE = "Invalid JSON request body"


def decode_request(raw: bytes, model: Type[ModelT]) -> ModelT:
    """Decode a raw JSON body into ``model``.

    Args:
        raw: Request body
        model: Request model to validate against

    Returns:
        Validated request model

    Raises:
        GatewayError: 400 if the body is not JSON or does not match the model
    """
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise GatewayError(
            code=400,
            message=INVALID_BODY_MESSAGE,
            details=[{"loc": ["body"], "msg": str(e), "type": "json_invalid"}],
        ) from e

    if not isinstance(data, dict):
        raise GatewayError(
            code=400,
            message=INVALID_BODY_MESSAGE,
            details=[
                {"loc": ["body"], "msg": "Expected a JSON object", "type": "dict_type"}
            ],
        )

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise GatewayError(
            code=400,
            message=INVALID_BODY_MESSAGE,
            details=[
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in e.errors()
            ],
        ) from e
