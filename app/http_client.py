"""Single seam for outbound HTTP calls made by the domain clients.

Every provider call goes through `HttpClient.send`, which turns transport
failures and non-2xx answers into the `app.errors` taxonomy. Tests swap the
underlying `httpx.AsyncClient` transport instead of patching individual clients.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx

from app.config import Settings, settings as default_settings
from app.errors import NetworkError, SchemaError, UpstreamError
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="http_client")


def encode_segment(value: object) -> str:
    """Percent-encode a single free-text path segment ("/" included)."""
    return quote(str(value), safe="")


@dataclass(frozen=True)
class UpstreamRequest:
    """One outbound GET: base URL, path, query parameters and headers."""
    base_url: str
    path: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def query_items(self) -> list[tuple[str, str]]:
        """Parameters as string pairs, skipping None values."""
        items = []
        for key, value in self.params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            items.append((key, str(value)))
        return items

    @property
    def url(self) -> str:
        """Full URL with every query value percent-encoded."""
        url = f"{self.base_url.rstrip('/')}{self.path}"
        query = urlencode(self.query_items(), quote_via=quote)
        return f"{url}?{query}" if query else url


def build_async_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout and User-Agent."""
    settings = settings or default_settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        transport=transport,
    )


class HttpClient:
    """Issue one request, return the decoded JSON or raise an `HttpError`."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, settings: Settings | None = None):
        self._client = client or build_async_client(settings)

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Convenience wrapper: split-out URL plus optional params."""
        return await self.send(UpstreamRequest(base_url=url, params=params or {}, headers=headers or {}))

    async def send(self, request: UpstreamRequest) -> Any:
        url = request.url
        logger.debug("GET %s", mask_url(url))
        try:
            resp = await self._client.get(url, headers=dict(request.headers))
        except httpx.RequestError as exc:
            # also covers redirect loops and undecodable bodies
            logger.warning(f"Upstream request to {mask_url(url)} failed before a response: {exc!r}")
            raise NetworkError("Network error occurred") from exc

        if not resp.is_success:
            raise UpstreamError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise SchemaError(f"Response from {mask_url(url)} is not valid JSON") from exc
