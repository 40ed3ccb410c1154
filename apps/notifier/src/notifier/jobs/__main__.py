from __future__ import annotations

import asyncio
import threading
from typing import Callable

from devkit.firebase import initialize_firebase_app
from devkit.observability import configure_logging, configure_otel

from notifier.config import NotifierSettings, load_notifier_settings
from notifier.dependencies import build_event_broadcaster, build_event_store, build_firestore_client, build_sender
from notifier.events.broadcaster import UpcomingEventBroadcaster
from notifier.jobs.scheduler import IntervalScheduler
from notifier.monitoring.server import start_monitoring_thread

_BROADCAST_MODES = ("once", "interval")


def _resolve_mode(settings: NotifierSettings) -> str:
    mode = settings.EVENT_BROADCAST_MODE.lower()
    if mode not in _BROADCAST_MODES:
        supported = ", ".join(_BROADCAST_MODES)
        raise RuntimeError(f"unsupported EVENT_BROADCAST_MODE '{mode}', supported: {supported}")
    return mode


def _maybe_start_monitoring(
    settings: NotifierSettings,
    mode: str,
    start_fn: Callable[[str, int], threading.Thread] = start_monitoring_thread,
) -> threading.Thread | None:
    # a one-shot run exits before anything could scrape it
    if mode != "interval" or not settings.MONITORING_ENABLED:
        return None
    return start_fn(settings.MONITORING_HOST, settings.MONITORING_PORT)


async def run_event_broadcast(
    broadcaster: UpcomingEventBroadcaster,
    mode: str,
    interval_seconds: float,
) -> int:
    if mode == "once":
        summary = await broadcaster.run()
        if summary.failed:
            raise RuntimeError(f"event broadcast had failures: sent={summary.sent}, failed={summary.failed}")
        return summary.sent
    scheduler = IntervalScheduler(broadcaster.run, interval_seconds, name="event_broadcast")
    return await scheduler.run()


def main() -> None:
    settings = load_notifier_settings()
    mode = _resolve_mode(settings)
    configure_logging(settings.LOG_LEVEL)
    configure_otel(settings.SERVICE_NAME)
    app = initialize_firebase_app(settings)
    broadcaster = build_event_broadcaster(
        settings,
        store=build_event_store(settings, build_firestore_client(app)),
        sender=build_sender(settings, app),
    )
    _maybe_start_monitoring(settings, mode)
    asyncio.run(run_event_broadcast(broadcaster, mode, settings.EVENT_BROADCAST_INTERVAL_SECONDS))


if __name__ == "__main__":
    main()
