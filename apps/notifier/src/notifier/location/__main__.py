from __future__ import annotations

import asyncio
import contextlib
import signal
from typing import Any

from devkit.firebase import initialize_firebase_app
from devkit.observability import configure_logging, configure_otel

from notifier.config import NotifierSettings, load_notifier_settings
from notifier.dependencies import build_firestore_client, build_location_handler, build_sender
from notifier.location.watcher import ChangeListener, FirestoreLocationWatcher
from notifier.monitoring.server import start_monitoring_thread

STOP_SIGNALS = (signal.SIGTERM, signal.SIGINT)


async def run_location_watch(
    settings: NotifierSettings,
    client: Any,
    listener: ChangeListener,
    stop_event: asyncio.Event,
) -> None:
    watcher = FirestoreLocationWatcher(
        client=client,
        listener=listener,
        loop=asyncio.get_running_loop(),
        collection_group=settings.LOCATION_COLLECTION_GROUP,
        document_id=settings.LOCATION_DOCUMENT_ID,
    )
    watcher.start()
    try:
        await stop_event.wait()
    finally:
        watcher.stop()


async def _serve(settings: NotifierSettings, client: Any, listener: ChangeListener) -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for signum in STOP_SIGNALS:
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(signum, stop_event.set)
    await run_location_watch(settings, client, listener, stop_event)


def main() -> None:
    settings = load_notifier_settings()
    configure_logging(settings.LOG_LEVEL)
    configure_otel(settings.SERVICE_NAME)
    app = initialize_firebase_app(settings)
    handler = build_location_handler(settings, sender=build_sender(settings, app))
    if settings.MONITORING_ENABLED:
        start_monitoring_thread(settings.MONITORING_HOST, settings.MONITORING_PORT)
    asyncio.run(_serve(settings, build_firestore_client(app), handler))


if __name__ == "__main__":
    main()
