"""Cancellable fixed-interval tick timer on top of asyncio."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[None]]
ErrorCallback = Callable[[Exception], None]


class TickScheduler:
    """Calls an async callback every *interval* seconds until stopped.

    Sleeps are not corrected for time spent in the callback, so ticks drift
    slightly behind wall-clock time. Only one loop runs at a time; starting
    again replaces the previous loop. When the callback raises, the loop
    stops and *on_error* is called with the exception.
    """

    def __init__(
        self, interval: float, on_error: ErrorCallback | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = interval
        self.on_error = on_error
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback) -> None:
        """Begin ticking. Must be called from inside a running event loop."""
        self.stop()
        self._task = asyncio.create_task(self._loop(callback))

    def stop(self) -> None:
        """Cancel the loop. Safe to call from within the callback itself."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        if task is asyncio.current_task():
            # The loop checks for its own detachment after each callback.
            return
        task.cancel()

    async def aclose(self) -> None:
        """Stop the loop and wait for it to finish."""
        task = self._task
        self.stop()
        if task is not None and task is not asyncio.current_task():
            await asyncio.gather(task, return_exceptions=True)

    async def _loop(self, callback: TickCallback) -> None:
        me = asyncio.current_task()
        try:
            while self._task is me:
                await asyncio.sleep(self.interval)
                await callback()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception as exc:
            logger.exception("Tick loop error; stopping.")
            if self._task is me:
                self._task = None
            if self.on_error is not None:
                self.on_error(exc)
