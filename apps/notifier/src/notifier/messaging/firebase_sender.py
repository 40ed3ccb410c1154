from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging

from notifier.messaging.sender import NotificationSender
from notifier.models import DeliveryResult, PushNotification

logger = logging.getLogger(__name__)


class FirebaseNotificationSender(NotificationSender):
    """Delivers notifications through Firebase Cloud Messaging.

    Delivery failures reported by FCM come back as an unsuccessful
    ``DeliveryResult``; nothing is retried.
    """

    def __init__(
        self,
        app: Any | None = None,
        dry_run: bool = False,
        send_fn: Callable[..., str] | None = None,
    ) -> None:
        self._app = app
        self._dry_run = dry_run
        self._send_fn = send_fn or messaging.send

    async def send(self, notification: PushNotification) -> DeliveryResult:
        message = self._to_message(notification)
        try:
            message_id = await asyncio.to_thread(
                self._send_fn,
                message,
                dry_run=self._dry_run,
                app=self._app,
            )
        except firebase_exceptions.FirebaseError as exc:
            error_code = str(exc.code)
            logger.warning(
                "push_delivery_failed",
                extra={
                    "target_kind": notification.target_kind,
                    "error_code": error_code,
                    "stale_token": isinstance(exc, messaging.UnregisteredError),
                },
            )
            return DeliveryResult(success=False, error_code=error_code, error=str(exc))
        logger.info(
            "push_delivered",
            extra={"target_kind": notification.target_kind, "message_id": message_id},
        )
        return DeliveryResult(success=True, message_id=message_id)

    def _to_message(self, notification: PushNotification) -> messaging.Message:
        return messaging.Message(
            notification=messaging.Notification(title=notification.title, body=notification.body),
            token=notification.token,
            topic=notification.topic,
        )
