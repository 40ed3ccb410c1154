from __future__ import annotations

from typing import Any

from firebase_admin import firestore

from proximity import GeoPoint

from notifier.config import NotifierSettings
from notifier.events.broadcaster import UpcomingEventBroadcaster
from notifier.events.firestore_store import FirestoreEventStore
from notifier.events.store import EventStore
from notifier.location.handler import LocationNotificationHandler
from notifier.messaging.firebase_sender import FirebaseNotificationSender
from notifier.messaging.sender import NotificationSender
from notifier.metrics import InMemoryNotifierMetricsCollector
from notifier.models import ProximitySite
from notifier.monitoring.state import notifier_metrics


def build_site(settings: NotifierSettings) -> ProximitySite:
    return ProximitySite(
        name=settings.SITE_NAME,
        location=GeoPoint(latitude=settings.SITE_LATITUDE, longitude=settings.SITE_LONGITUDE),
        radius_km=settings.SITE_RADIUS_KM,
    )


def build_sender(settings: NotifierSettings, app: Any) -> NotificationSender:
    return FirebaseNotificationSender(app=app, dry_run=settings.PUSH_DRY_RUN)


def build_firestore_client(app: Any) -> Any:
    return firestore.client(app=app)


def build_event_store(settings: NotifierSettings, client: Any) -> EventStore:
    return FirestoreEventStore(client=client, collection=settings.EVENTS_COLLECTION)


def build_location_handler(
    settings: NotifierSettings,
    sender: NotificationSender,
    metrics: InMemoryNotifierMetricsCollector | None = notifier_metrics,
) -> LocationNotificationHandler:
    return LocationNotificationHandler(
        sender=sender,
        site=build_site(settings),
        title=settings.NEARBY_NOTIFICATION_TITLE,
        body=settings.NEARBY_NOTIFICATION_BODY,
        metrics=metrics,
    )


def build_event_broadcaster(
    settings: NotifierSettings,
    store: EventStore,
    sender: NotificationSender,
    metrics: InMemoryNotifierMetricsCollector | None = notifier_metrics,
) -> UpcomingEventBroadcaster:
    return UpcomingEventBroadcaster(
        store=store,
        sender=sender,
        topic=settings.EVENT_BROADCAST_TOPIC,
        metrics=metrics,
    )
