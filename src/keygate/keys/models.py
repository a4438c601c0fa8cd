"""Key management request and response models."""
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class InsertKeyRequest(BaseModel):
    """Request to create an ingest key."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: int = Field(
        ..., strict=True, description="Account the key is created in"
    )
    name: str = Field("", description="Key name")
    notes: str = Field("", description="Free-form notes stored with the key")
    ingest_type: Literal["BROWSER", "LICENSE"] = Field(
        ..., alias="ingestType", description="Kind of ingest key"
    )


class DeleteKeyRequest(BaseModel):
    """Request to delete a key."""

    key_id: str = Field(..., min_length=1, description="Identifier of the key")
    key_type: Literal["INGEST", "USER"] = Field(
        "INGEST", description="Whether the identifier is an ingest or a user key"
    )


class InsertKeyResponse(BaseModel):
    """Successful create response."""

    insert_key: Dict[str, Any] = Field(..., description="Key as returned upstream")


class DeleteKeyResponse(BaseModel):
    """Successful delete response."""

    deleted_keys: List[Dict[str, Any]] = Field(
        ..., description="Deleted keys as returned upstream"
    )
