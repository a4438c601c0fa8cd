"""NerdGraph API models."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NerdGraphModel(BaseModel):
    """Base for upstream payloads.

    Unknown fields are kept so responses can be relayed as received.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def relay(self) -> Dict[str, Any]:
        """Dump only the fields the upstream actually sent."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class GraphQLRequest(BaseModel):
    """GraphQL request envelope."""

    query: str = Field(..., description="GraphQL document")
    variables: Dict[str, Any] = Field(
        default_factory=dict, description="Variables referenced by the document"
    )


class CreatedKey(NerdGraphModel):
    """Key returned by ``apiAccessCreateKeys``."""

    id: Optional[str] = Field(None, description="Key identifier")
    key: Optional[str] = Field(None, description="Key value")
    name: Optional[str] = Field(None, description="Key name")
    notes: Optional[str] = Field(None, description="Key notes")
    type: Optional[str] = Field(None, description="Key type (INGEST or USER)")
    ingest_type: Optional[str] = Field(
        None, alias="ingestType", description="Ingest key type (BROWSER or LICENSE)"
    )


class CreateKeyError(NerdGraphModel):
    """Error entry returned by ``apiAccessCreateKeys``."""

    message: Optional[str] = None
    type: Optional[str] = None
    account_id: Optional[int] = Field(None, alias="accountId")
    error_type: Optional[str] = Field(None, alias="errorType")
    ingest_type: Optional[str] = Field(None, alias="ingestType")


class DeletedKey(NerdGraphModel):
    """Key returned by ``apiAccessDeleteKeys``."""

    id: Optional[str] = Field(None, description="Deleted key identifier")


class DeleteKeyError(NerdGraphModel):
    """Error entry returned by ``apiAccessDeleteKeys``."""

    message: Optional[str] = None
    type: Optional[str] = None
    id: Optional[str] = None
    error_type: Optional[str] = Field(None, alias="errorType")


class _KeysPayload(NerdGraphModel):
    @field_validator("*", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        # GraphQL returns null rather than [] for empty lists
        return [] if v is None else v


class CreateKeysPayload(_KeysPayload):
    """Payload of the ``apiAccessCreateKeys`` mutation."""

    created_keys: List[CreatedKey] = Field(default_factory=list, alias="createdKeys")
    errors: List[CreateKeyError] = Field(default_factory=list)


class DeleteKeysPayload(_KeysPayload):
    """Payload of the ``apiAccessDeleteKeys`` mutation."""

    deleted_keys: List[DeletedKey] = Field(default_factory=list, alias="deletedKeys")
    errors: List[DeleteKeyError] = Field(default_factory=list)
