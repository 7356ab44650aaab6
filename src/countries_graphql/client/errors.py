from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from countries_graphql.transforms.envelope import GraphQLErrorItem


class CountriesClientError(Exception):
    pass


class TransportError(CountriesClientError):
    """Network unreachable, connection reset, protocol failure."""


class TransportTimeoutError(TransportError):
    pass


class HTTPStatusError(TransportError):
    def __init__(self, status_code: int, body_text: str | None = None) -> None:
        super().__init__(f"Unexpected status code: {status_code}")
        self.status_code = status_code
        self.body_text = body_text


class MalformedResponse(CountriesClientError):
    """Response body is not valid JSON."""


class SchemaError(CountriesClientError):
    """Valid JSON, but missing `data` or a required field."""


class GraphQLServerError(CountriesClientError):
    """
    Server answered with a non-empty top-level `errors` array.
    Transport and JSON parsing both succeeded; the query itself failed.
    """

    def __init__(self, errors: list[GraphQLErrorItem]) -> None:
        self.errors = list(errors)
        self.messages = [e.message for e in self.errors]
        super().__init__("; ".join(self.messages) or "GraphQL error")
