from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from notifier.models import DeliveryResult, PushNotification


class NotificationSender(ABC):
    @abstractmethod
    async def send(self, notification: PushNotification) -> DeliveryResult:
        raise NotImplementedError


class InMemoryNotificationSender(NotificationSender):
    def __init__(self, failing_targets: Iterable[str] = ()) -> None:
        self.sent: list[PushNotification] = []
        self._failing_targets = set(failing_targets)

    async def send(self, notification: PushNotification) -> DeliveryResult:
        target = notification.token or notification.topic or ""
        if target in self._failing_targets:
            return DeliveryResult(success=False, error_code="unavailable", error=f"delivery refused: {target}")
        self.sent.append(notification)
        return DeliveryResult(success=True, message_id=f"in-memory/{len(self.sent)}")
