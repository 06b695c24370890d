"""All-settled join for concurrent coroutines."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one branch: either a value or the exception it raised."""
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or_none(self) -> Optional[T]:
        return self.value if self.error is None else None


async def gather_settled(*aws: Awaitable[T]) -> List[Settled[T]]:
    """
    Run `aws` concurrently and wait for every one of them.

    The returned list is in input order regardless of completion order. A
    failing branch never cancels its siblings.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    out: List[Settled[T]] = []
    for result in results:
        if isinstance(result, Exception):
            out.append(Settled(error=result))
        elif isinstance(result, BaseException):
            raise result
        else:
            out.append(Settled(value=result))
    return out
