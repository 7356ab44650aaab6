from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from countries_graphql.client.errors import (
    CountriesClientError,
    GraphQLServerError,
    HTTPStatusError,
    MalformedResponse,
    SchemaError,
    TransportError,
    TransportTimeoutError,
)
from countries_graphql.client.queries import GET_ALL_COUNTRIES, GET_COUNTRY_INFO
from countries_graphql.domain.countries import Country, CountryDetail
from countries_graphql.transforms.countries import decode_countries, decode_country_detail
from countries_graphql.utils.logging import get_logger


logger = get_logger(component="fetch_operations")

T = TypeVar("T")


class GraphQLTransport(Protocol):
    async def post(self, query: str, variables: dict[str, Any] | None = None) -> bytes: ...


async def list_countries(client: GraphQLTransport) -> list[Country]:
    raw = await client.post(GET_ALL_COUNTRIES)
    try:
        countries = decode_countries(raw)
    except CountriesClientError as e:
        logger.warning("decode_failed", operation="list_countries", kind=type(e).__name__, err=str(e))
        raise
    logger.info("countries_listed", count=len(countries))
    return countries


async def get_country_detail(client: GraphQLTransport, code: str) -> CountryDetail | None:
    """
    None means the server knows no country with this code.
    """
    raw = await client.post(GET_COUNTRY_INFO, {"code": code})
    try:
        detail = decode_country_detail(raw)
    except CountriesClientError as e:
        logger.warning("decode_failed", operation="get_country_detail", code=code, kind=type(e).__name__, err=str(e))
        raise
    if detail is None:
        logger.info("country_not_found", code=code)
    else:
        logger.info("country_detail_loaded", code=code, subdivisions=len(detail.subdivisions))
    return detail


async def deliver(
    operation: Awaitable[T],
    *,
    on_success: Callable[[T], Any],
    on_failure: Callable[[CountriesClientError], Any],
    on_cancel: Callable[[], Any] | None = None,
) -> None:
    """
    Await one fetch and fire exactly one outcome.

    If the awaiting task is cancelled first, the pending result is dropped,
    only `on_cancel` fires and the cancellation propagates.
    """
    try:
        result = await operation
    except asyncio.CancelledError:
        if on_cancel is not None:
            on_cancel()
        raise
    except CountriesClientError as e:
        on_failure(e)
        return
    on_success(result)


def describe_error(exc: CountriesClientError) -> str:
    """Human-readable message for display next to a retry action."""
    if isinstance(exc, TransportTimeoutError):
        return "The request timed out. Check your connection and try again."
    if isinstance(exc, HTTPStatusError):
        return f"The server responded with HTTP {exc.status_code}."
    if isinstance(exc, TransportError):
        return f"Could not reach the server: {exc}"
    if isinstance(exc, MalformedResponse):
        return "The server sent a response that could not be read."
    if isinstance(exc, SchemaError):
        return f"The server response was missing expected data: {exc}"
    if isinstance(exc, GraphQLServerError):
        return "The server reported an error: " + "; ".join(exc.messages)
    return str(exc)
