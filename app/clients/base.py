"""Shared plumbing for the per-provider domain clients."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Type, TypeVar

from pydantic import BaseModel

from app.errors import HttpError, ValidationError
from app.http_client import HttpClient, UpstreamRequest
from app.models import validate_list, validate_payload
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="clients/base")

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R")


def require_text(value: str | None, name: str) -> str:
    """Return `value` stripped, or raise ValidationError when it is blank."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return str(value).strip()


def require_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{name} must be a positive integer")
    return value


class DomainClient:
    """Base for clients that talk to one provider through an `HttpClient`."""

    base_url: str = ""

    def __init__(self, http: HttpClient):
        self._http = http

    def _request(self, path: str = "", **params: Any) -> UpstreamRequest:
        return UpstreamRequest(base_url=self.base_url, path=path, params=params)

    async def _fetch(self, request: UpstreamRequest) -> Any:
        return await self._http.send(request)

    async def _fetch_model(self, request: UpstreamRequest, model: Type[M], *, context: str) -> M:
        data = await self._http.send(request)
        return validate_payload(model, data, context=context)

    async def _fetch_list(self, request: UpstreamRequest, model: Type[M], *, context: str) -> List[M]:
        data = await self._http.send(request)
        return validate_list(model, data, context=context)


class ProxiedDomainClient(DomainClient):
    """
    Client whose live path goes through the credential-injecting proxy.

    `_with_demo_fallback` runs the live call and, on any `HttpError` (network,
    non-2xx, schema mismatch), logs the failure and returns the demo payload.
    """

    def __init__(self, http: HttpClient, proxy_base_url: str):
        super().__init__(http)
        self.base_url = proxy_base_url.rstrip("/")

    async def _with_demo_fallback(
        self,
        live: Callable[[], Awaitable[R]],
        demo: Callable[[], R],
        *,
        context: str,
    ) -> R:
        try:
            return await live()
        except HttpError as exc:
            logger.warning(
                f"Proxy call {context} failed (status {exc.status_code}): {exc.message}; serving demo data"
            )
            return demo()
