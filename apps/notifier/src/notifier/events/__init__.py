from notifier.events.broadcaster import UpcomingEventBroadcaster, build_event_notification
from notifier.events.firestore_store import FirestoreEventStore
from notifier.events.store import EventStore, InMemoryEventStore

__all__ = [
    "EventStore",
    "FirestoreEventStore",
    "InMemoryEventStore",
    "UpcomingEventBroadcaster",
    "build_event_notification",
]
