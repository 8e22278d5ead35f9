"""Cancellable debounce timer on the running asyncio loop."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], Awaitable[object]]


class DebounceTimer:
    """Runs a callback once ``delay`` seconds pass without a new ``schedule()``.

    Each ``schedule()`` disarms the pending call and re-arms the timer.
    Once the delay has elapsed the callback is no longer pending and a
    later ``cancel()`` does not interrupt it.
    """

    def __init__(self, delay: float):
        self._delay = delay
        self._waiting: asyncio.Task | None = None
        self._callback: Callback | None = None
        self._running: set[asyncio.Task] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._waiting is not None and not self._waiting.done()

    def schedule(self, callback: Callback) -> None:
        self.cancel()
        self._callback = callback
        self._waiting = asyncio.get_running_loop().create_task(self._wait_then_fire())

    def cancel(self) -> None:
        if self._waiting is not None and not self._waiting.done():
            self._waiting.cancel()
        self._waiting = None
        self._callback = None

    async def flush(self) -> None:
        """Fire the pending callback now instead of waiting out the delay."""
        callback = self._callback
        if not self.pending or callback is None:
            return
        self.cancel()
        await callback()

    async def wait(self) -> None:
        """Wait until nothing is pending and every fired callback has finished."""
        while self.pending or self._running:
            if self._waiting is not None and not self._waiting.done():
                await asyncio.wait({self._waiting})
            if self._running:
                await asyncio.wait(set(self._running))

    async def _wait_then_fire(self) -> None:
        await asyncio.sleep(self._delay)
        callback = self._callback
        self._waiting = None
        self._callback = None
        if callback is None:
            return
        task = asyncio.get_running_loop().create_task(callback())
        self._running.add(task)
        task.add_done_callback(self._on_fired_done)

    def _on_fired_done(self, task: asyncio.Task) -> None:
        self._running.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Debounced callback failed", exc_info=task.exception())
