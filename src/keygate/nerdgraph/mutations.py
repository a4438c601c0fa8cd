"""GraphQL mutation templates for NerdGraph key management.

Values are interpolated into fixed documents. Strings are rendered as
GraphQL string literals, so quotes, backslashes and control characters in
user input cannot escape their literal. Enum values are checked against the
allowed set before rendering.
"""
import json
from string import Template
from typing import Iterable

INGEST_TYPES = ("BROWSER", "LICENSE")
KEY_TYPES = ("INGEST", "USER")

CREATE_INGEST_KEY_MUTATION = Template(
    """
mutation {
  apiAccessCreateKeys(
    keys: {
      ingest: {
        accountId: $account_id
        ingestType: $ingest_type
        name: $name
        notes: $notes
      }
    }
  ) {
    createdKeys {
      id
      key
      name
      notes
      type
      ... on ApiAccessIngestKey {
        ingestType
      }
    }
    errors {
      message
      type
      ... on ApiAccessIngestKeyError {
        accountId
        errorType
        ingestType
      }
    }
  }
}
"""
)

DELETE_KEYS_MUTATION = Template(
    """
mutation {
  apiAccessDeleteKeys(keys: { $id_field: [$key_id] }) {
    deletedKeys {
      id
    }
    errors {
      message
      type
      ... on $error_type {
        id
        errorType
      }
    }
  }
}
"""
)

# key type -> (ids argument, error fragment type)
_DELETE_TARGETS = {
    "INGEST": ("ingestKeyIds", "ApiAccessIngestKeyError"),
    "USER": ("userKeyIds", "ApiAccessUserKeyError"),
}


def graphql_string(value: str) -> str:
    """Render a Python string as a GraphQL string literal.

    JSON string escapes are a subset of GraphQL's, so ``json.dumps`` output
    is always a valid literal.
    """
    return json.dumps(str(value))


def graphql_enum(value: str, allowed: Iterable[str]) -> str:
    """Render an enum value, rejecting anything outside ``allowed``.

    Raises:
        ValueError: If the value is not an allowed enum member
    """
    allowed = tuple(allowed)
    if value not in allowed:
        raise ValueError(f"{value!r} is not one of {', '.join(allowed)}")
    return value


def build_create_ingest_key_mutation(
    account_id: int, ingest_type: str, name: str = "", notes: str = ""
) -> str:
    """Build the ``apiAccessCreateKeys`` mutation for a single ingest key.

    Args:
        account_id: Account the key belongs to
        ingest_type: BROWSER or LICENSE
        name: Key name
        notes: Free-form notes

    Returns:
        GraphQL document
    """
    return CREATE_INGEST_KEY_MUTATION.substitute(
        account_id=int(account_id),
        ingest_type=graphql_enum(ingest_type, INGEST_TYPES),
        name=graphql_string(name),
        notes=graphql_string(notes),
    )


def build_delete_keys_mutation(key_id: str, key_type: str = "INGEST") -> str:
    """Build the ``apiAccessDeleteKeys`` mutation for a single key.

    Args:
        key_id: Identifier of the key to delete
        key_type: INGEST or USER

    Returns:
        GraphQL document
    """
    id_field, error_type = _DELETE_TARGETS[graphql_enum(key_type, KEY_TYPES)]
    return DELETE_KEYS_MUTATION.substitute(
        id_field=id_field,
        key_id=graphql_string(key_id),
        error_type=error_type,
    )
