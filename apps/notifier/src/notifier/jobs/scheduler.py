from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class IntervalScheduler:
    """Invokes ``callback`` now and then every ``interval_seconds`` until stopped.

    A failed run is logged and the schedule keeps going; there is no catch-up
    for runs missed while a previous one was in progress.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[Any]],
        interval_seconds: float,
        sleep_fn: Callable[[float], Awaitable[None]] = asyncio.sleep,
        name: str = "scheduled_job",
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self._callback = callback
        self._interval_seconds = interval_seconds
        self._sleep = sleep_fn
        self._name = name
        self._stopped = False

    def stop(self) -> None:
        self._stopped = True

    async def run(self, max_runs: int | None = None) -> int:
        if max_runs is not None and max_runs <= 0:
            raise ValueError("max_runs must be > 0")
        self._stopped = False
        runs = 0
        while not self._stopped:
            try:
                await self._callback()
            except Exception:
                logger.exception("scheduled_run_failed", extra={"job": self._name, "run": runs + 1})
            runs += 1
            if max_runs is not None and runs >= max_runs:
                break
            if self._stopped:
                break
            await self._sleep(self._interval_seconds)
        return runs
