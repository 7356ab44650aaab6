from __future__ import annotations

import json
import time
from typing import Any

import httpx

from countries_graphql.client.errors import HTTPStatusError, TransportError, TransportTimeoutError
from countries_graphql.utils.config import DEFAULT_ENDPOINT_URL, APIConfig
from countries_graphql.utils.logging import get_logger


logger = get_logger(component="graphql_client")


class GraphQLClient:
    """
    Countries GraphQL transport
    - POST-only, single fixed endpoint
    - Content-Type: application/json
    - Raw bytes out; no decoding, no retries, no caching
    - Async httpx
    """

    def __init__(
        self,
        *,
        endpoint_url: str = DEFAULT_ENDPOINT_URL,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url

        kwargs: dict[str, Any] = {}
        # Unset timeout keeps the httpx default.
        if timeout_seconds is not None:
            kwargs["timeout"] = float(timeout_seconds)
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    @classmethod
    def from_config(cls, config: APIConfig, **kwargs: Any) -> GraphQLClient:
        return cls(endpoint_url=config.endpoint_url, timeout_seconds=config.timeout_seconds, **kwargs)

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def post(self, query: str, variables: dict[str, Any] | None = None) -> bytes:
        body: dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        log = logger.bind(endpoint=self._endpoint_url, variables=variables or None)
        log.debug("graphql_request_sent")
        started = time.monotonic()

        try:
            resp = await self._client.post(
                self._endpoint_url,
                content=json.dumps(body, ensure_ascii=False).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            log.warning("graphql_request_failed", err="timeout")
            raise TransportTimeoutError("Request timeout") from e
        except httpx.RequestError as e:
            log.warning("graphql_request_failed", err=str(e))
            raise TransportError(f"Request error: {e}") from e

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        log.info(
            "graphql_response_received",
            status_code=resp.status_code,
            bytes=len(resp.content),
            duration_ms=duration_ms,
        )

        if not resp.is_success:
            raise HTTPStatusError(resp.status_code, body_text=resp.text)

        return resp.content
