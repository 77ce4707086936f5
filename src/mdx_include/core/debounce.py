from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Hashable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Coalesce bursts of events per key into one delayed callback.

    Each key owns at most one pending task. ``schedule`` cancels the pending
    task for the key and starts a new quiet interval, so the callback runs
    once, ``delay`` seconds after the last event.
    """

    def __init__(self, delay: float, callback: Callable[..., Coroutine[Any, Any, None]]) -> None:
        self.delay = delay
        self._callback = callback
        self._pending: dict[Hashable, asyncio.Task[None]] = {}

    def schedule(self, key: Hashable, *args: Any) -> None:
        self.cancel(key)
        self._pending[key] = asyncio.create_task(self._fire(key, args))

    def pending(self, key: Hashable) -> bool:
        task = self._pending.get(key)
        return task is not None and not task.done()

    def cancel(self, key: Hashable) -> None:
        task = self._pending.pop(key, None)
        if task is not None and not task.done():
            task.cancel()

    async def cancel_all(self) -> None:
        tasks = list(self._pending.values())
        self._pending.clear()
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _fire(self, key: Hashable, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self.delay)
        if self._pending.get(key) is asyncio.current_task():
            del self._pending[key]
        try:
            await self._callback(*args)
        except Exception:
            logger.exception("Debounced callback failed for %s", key)
