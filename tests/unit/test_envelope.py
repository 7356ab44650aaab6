from __future__ import annotations

import pytest

from countries_graphql.client.errors import GraphQLServerError, MalformedResponse, SchemaError
from countries_graphql.transforms.envelope import (
    GraphQLErrorItem,
    IndexSegment,
    StringSegment,
    parse_path_component,
    unwrap_data,
)


def test_unwrap_data_returns_data_object() -> None:
    assert unwrap_data(b'{"data": {"countries": []}}') == {"countries": []}


@pytest.mark.parametrize("raw", [b"{ invalid json }", b"", b"\x80\x81", b'{"data": '])
def test_unwrap_data_malformed(raw: bytes) -> None:
    with pytest.raises(MalformedResponse):
        unwrap_data(raw)


@pytest.mark.parametrize("raw", [b"[]", b'"data"', b"null", b"{}", b'{"data": null}', b'{"data": [1]}'])
def test_unwrap_data_shape_mismatch(raw: bytes) -> None:
    with pytest.raises(SchemaError):
        unwrap_data(raw)


def test_errors_envelope_is_server_error() -> None:
    with pytest.raises(GraphQLServerError) as exc:
        unwrap_data(b'{"errors":[{"message":"m"}]}')
    assert exc.value.messages == ["m"]
    assert str(exc.value) == "m"


def test_errors_win_over_partial_data() -> None:
    raw = b'{"data":{"countries":[]},"errors":[{"message":"a"},{"message":"b"}]}'
    with pytest.raises(GraphQLServerError) as exc:
        unwrap_data(raw)
    assert exc.value.messages == ["a", "b"]


def test_empty_errors_array_is_ignored() -> None:
    assert unwrap_data(b'{"data":{"country":null},"errors":[]}') == {"country": None}


def test_errors_with_locations_and_mixed_path() -> None:
    raw = (
        b'{"errors":[{"message":"Cannot query field","locations":[{"line":3,"column":5}],'
        b'"path":["countries",0,"invalidField"]}]}'
    )
    with pytest.raises(GraphQLServerError) as exc:
        unwrap_data(raw)

    err = exc.value.errors[0]
    assert err.locations is not None
    assert err.locations[0].line == 3
    assert err.locations[0].column == 5
    assert err.path == [StringSegment("countries"), IndexSegment(0), StringSegment("invalidField")]


@pytest.mark.parametrize(
    "raw",
    [
        b'{"errors":[{"locations":[]}]}',
        b'{"errors":[{"message":"m","path":[1.5]}]}',
        b'{"errors":[{"message":"m","path":[true]}]}',
        b'{"errors":"boom"}',
    ],
)
def test_malformed_error_entries_are_schema_errors(raw: bytes) -> None:
    with pytest.raises(SchemaError):
        unwrap_data(raw)


def test_parse_path_component_prefers_string() -> None:
    assert parse_path_component("0") == StringSegment("0")
    assert parse_path_component(0) == IndexSegment(0)
    with pytest.raises(ValueError):
        parse_path_component(None)


def test_error_item_without_optional_fields() -> None:
    item = GraphQLErrorItem.model_validate({"message": "m"})
    assert item.locations is None
    assert item.path is None


def test_deeply_nested_body_is_malformed() -> None:
    depth = 100_000
    raw = b'{"data":' + b"[" * depth + b"]" * depth + b"}"
    with pytest.raises(MalformedResponse):
        unwrap_data(raw)


def test_module_documents_classification_order() -> None:
    import countries_graphql.transforms.envelope as envelope

    assert envelope.__doc__ is not None
    assert "Classification order" in envelope.__doc__
