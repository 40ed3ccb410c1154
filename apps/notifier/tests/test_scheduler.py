from __future__ import annotations

import pytest

from notifier.jobs.scheduler import IntervalScheduler


@pytest.mark.asyncio
async def test_scheduler_runs_callback_at_fixed_interval() -> None:
    delays: list[float] = []
    runs: list[int] = []

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)

    async def callback() -> None:
        runs.append(len(runs) + 1)

    scheduler = IntervalScheduler(callback, interval_seconds=86_400, sleep_fn=fake_sleep)
    count = await scheduler.run(max_runs=3)

    assert count == 3
    assert runs == [1, 2, 3]
    assert delays == [86_400, 86_400]


@pytest.mark.asyncio
async def test_scheduler_keeps_running_after_failure(caplog) -> None:
    calls = {"count": 0}

    async def fake_sleep(delay: float) -> None:
        return None

    async def flaky() -> None:
        calls["count"] += 1
        if calls["count"] == 1:
            raise RuntimeError("temporary failure")

    scheduler = IntervalScheduler(flaky, interval_seconds=1, sleep_fn=fake_sleep, name="event_broadcast")
    count = await scheduler.run(max_runs=2)

    assert count == 2
    assert calls["count"] == 2
    assert "scheduled_run_failed" in caplog.text


@pytest.mark.asyncio
async def test_scheduler_stop_ends_loop() -> None:
    scheduler: IntervalScheduler

    async def fake_sleep(delay: float) -> None:
        scheduler.stop()

    async def callback() -> None:
        return None

    scheduler = IntervalScheduler(callback, interval_seconds=60, sleep_fn=fake_sleep)
    count = await scheduler.run()

    assert count == 1


@pytest.mark.parametrize("interval", [0, -5])
def test_scheduler_rejects_non_positive_interval(interval: float) -> None:
    async def callback() -> None:
        return None

    with pytest.raises(ValueError):
        IntervalScheduler(callback, interval_seconds=interval)
