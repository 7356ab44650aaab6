"""
GraphQL response envelope.

Classification order:
- bytes are not JSON            -> MalformedResponse
- top level is not an object    -> SchemaError
- non-empty `errors` array      -> GraphQLServerError (`data` is not read)
- `data` missing / null         -> SchemaError
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Annotated, Any, Union

from pydantic import BaseModel, PlainValidator, ValidationError

from countries_graphql.client.errors import GraphQLServerError, MalformedResponse, SchemaError


@dataclass(frozen=True)
class StringSegment:
    value: str


@dataclass(frozen=True)
class IndexSegment:
    value: int


PathComponent = Union[StringSegment, IndexSegment]


def parse_path_component(value: Any) -> PathComponent:
    """Try string first, then integer. Anything else is rejected."""
    if isinstance(value, (StringSegment, IndexSegment)):
        return value
    if isinstance(value, str):
        return StringSegment(value)
    # bool is an int subclass; JSON true/false is not a list index
    if isinstance(value, int) and not isinstance(value, bool):
        return IndexSegment(value)
    raise ValueError(f"Invalid path component: {value!r}")


class GraphQLLocation(BaseModel):
    line: int
    column: int


class GraphQLErrorItem(BaseModel):
    message: str
    locations: list[GraphQLLocation] | None = None
    path: list[Annotated[PathComponent, PlainValidator(parse_path_component)]] | None = None


def parse_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e


def format_validation_error(e: ValidationError) -> str:
    parts: list[str] = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc") or ()) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def parse_errors(items: Any) -> list[GraphQLErrorItem]:
    if not isinstance(items, list):
        raise SchemaError("`errors` must be an array")
    try:
        return [GraphQLErrorItem.model_validate(item) for item in items]
    except ValidationError as e:
        raise SchemaError(f"Invalid GraphQL error entry: {format_validation_error(e)}") from e


def unwrap_data(raw: bytes) -> dict[str, Any]:
    """
    Return the `data` object of a GraphQL response, or raise a classified error.
    Any non-empty `errors` array is a hard failure, even alongside `data`.
    """
    envelope = parse_json(raw)
    if not isinstance(envelope, dict):
        raise SchemaError(f"Expected a JSON object envelope, got {type(envelope).__name__}")

    errors = envelope.get("errors")
    if errors:
        raise GraphQLServerError(parse_errors(errors))

    if "data" not in envelope:
        raise SchemaError("Missing `data` in response")
    data = envelope["data"]
    if not isinstance(data, dict):
        raise SchemaError("`data` must be an object")
    return data
