"""Base class for per-screen state holders.

A holder owns one immutable state snapshot, replaces it on every change and
notifies subscribers. Repository streams are collected on tasks keyed by the
logical query they serve; launching a new request under the same key cancels
the previous task and bumps a generation counter so that a late emission from
a superseded request is never applied.

Intents that start work must be called while an event loop is running; they
return the ``asyncio.Task`` so callers (and tests) can await completion.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import AsyncIterator, Callable, Dict, Generic, List, Optional, TypeVar

from .resource import Resource

logger = logging.getLogger(__name__)

S = TypeVar("S")
Listener = Callable[[S], None]


class StateHolder(Generic[S]):
    def __init__(self, initial: S):
        self._state = initial
        self._listeners: List[Listener] = []
        self._tasks: Dict[str, asyncio.Task] = {}
        self._generations: Dict[str, int] = {}

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; it immediately receives the current state."""
        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: S) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _update(self, **changes) -> None:
        self._set_state(replace(self._state, **changes))

    def _launch(
        self,
        key: str,
        stream: AsyncIterator[Resource],
        on_emit: Callable[[Resource], None],
        *,
        on_finish: Optional[Callable[[], None]] = None,
    ) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        generation = self._generations.get(key, 0) + 1
        self._generations[key] = generation

        previous = self._tasks.get(key)
        if previous is not None and not previous.done():
            logger.debug("%s: superseding in-flight %r request", type(self).__name__, key)
            previous.cancel()

        task = loop.create_task(self._collect(key, generation, stream, on_emit))
        # Done callbacks also fire for tasks cancelled before their first step.
        task.add_done_callback(lambda t: self._finished(key, t, on_finish))
        self._tasks[key] = task
        return task

    def _finished(self, key: str, task: asyncio.Task, on_finish: Optional[Callable[[], None]]) -> None:
        if self._tasks.get(key) is task:
            del self._tasks[key]
        if on_finish is not None:
            on_finish()

    def is_current(self, key: str, generation: int) -> bool:
        return self._generations.get(key) == generation

    async def _collect(
        self,
        key: str,
        generation: int,
        stream: AsyncIterator[Resource],
        on_emit: Callable[[Resource], None],
    ) -> None:
        async for resource in stream:
            if not self.is_current(key, generation):
                logger.debug("%s: dropping stale %r emission", type(self).__name__, key)
                return
            on_emit(resource)

    async def wait_idle(self) -> None:
        """Wait until no request is in flight, including follow-up reloads."""
        while True:
            pending = [t for t in self._tasks.values() if not t.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        """Cancel every in-flight request; the holder is not used afterwards."""
        for task in self._tasks.values():
            task.cancel()
        self._tasks.clear()
        self._listeners.clear()
