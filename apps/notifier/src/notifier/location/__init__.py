from notifier.location.handler import LocationNotificationHandler
from notifier.location.watcher import ChangeListener, FirestoreLocationWatcher

__all__ = [
    "ChangeListener",
    "FirestoreLocationWatcher",
    "LocationNotificationHandler",
]
