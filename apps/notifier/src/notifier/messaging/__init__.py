from notifier.messaging.firebase_sender import FirebaseNotificationSender
from notifier.messaging.sender import InMemoryNotificationSender, NotificationSender

__all__ = [
    "FirebaseNotificationSender",
    "InMemoryNotificationSender",
    "NotificationSender",
]
