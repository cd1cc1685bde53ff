"""One-shot asynchronous result streams.

Every repository operation is an async generator that yields ``Loading()``
first and then exactly one terminal ``Success`` or ``Error``.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Optional, TypeVar

from ..core import constants
from .resource import Error, Loading, Resource, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Latency:
    """Simulated delay per operation kind, in seconds."""

    list: float = constants.LIST_LATENCY
    get: float = constants.GET_LATENCY
    mutation: float = constants.MUTATION_LATENCY
    attendance: float = constants.ATTENDANCE_LATENCY
    login: float = constants.LOGIN_LATENCY

    @classmethod
    def none(cls) -> "Latency":
        return cls(list=0, get=0, mutation=0, attendance=0, login=0)

    def scaled(self, factor: float) -> "Latency":
        return Latency(
            list=self.list * factor,
            get=self.get * factor,
            mutation=self.mutation * factor,
            attendance=self.attendance * factor,
            login=self.login * factor,
        )


async def resource_flow(
    action: Callable[[], Optional[T]],
    *,
    delay: float,
    failure: str,
    not_found: Optional[str] = None,
) -> AsyncIterator[Resource[T]]:
    """Run ``action`` after ``delay`` and translate its outcome.

    ``action`` returning ``None`` means the entity was not found and yields
    ``Error(not_found)``. Any exception is logged and yields
    ``Error("<failure>: <description>")``.
    """
    yield Loading()
    try:
        if delay > 0:
            await asyncio.sleep(delay)
        value = action()
    except Exception as e:
        logger.exception("%s", failure)
        yield Error(f"{failure}: {e}")
        return

    if value is None:
        yield Error(not_found or failure)
        return
    yield Success(value)


async def last_emission(stream: AsyncIterator[Resource[T]]) -> Resource[T]:
    """Drain ``stream`` and return its terminal state."""
    last: Optional[Resource[T]] = None
    async for resource in stream:
        last = resource
    if last is None:
        raise RuntimeError("stream completed without emitting")
    return last
