from __future__ import annotations

from devkit.firebase import initialize_firebase_app

from notifier.config import load_notifier_settings
from notifier.dependencies import build_event_broadcaster, build_event_store, build_firestore_client, build_sender
from notifier.events.broadcaster import UpcomingEventBroadcaster
from notifier.orchestration.airflow_adapter import AIRFLOW_AVAILABLE, create_event_broadcast_dag


def _build_broadcaster() -> UpcomingEventBroadcaster:
    settings = load_notifier_settings()
    app = initialize_firebase_app(settings)
    return build_event_broadcaster(
        settings,
        store=build_event_store(settings, build_firestore_client(app)),
        sender=build_sender(settings, app),
    )


if AIRFLOW_AVAILABLE:
    dag = create_event_broadcast_dag("notifier_event_broadcast", broadcaster_factory=_build_broadcaster)
else:
    dag = None
