from __future__ import annotations

import logging
from typing import Any

from opentelemetry import trace

from proximity import is_near

from notifier.errors import InvalidLocationDocument
from notifier.messaging.sender import NotificationSender
from notifier.metrics import InMemoryNotifierMetricsCollector
from notifier.models import DeliveryResult, DocumentChange, ProximitySite, PushNotification
from notifier.schemas import parse_location_update

logger = logging.getLogger(__name__)

DEFAULT_NEARBY_TITLE = "You’re Near the Pyramids!"
DEFAULT_NEARBY_BODY = "Start your audio tour now."


def user_id_from_path(path: str) -> str | None:
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "users":
        return parts[1]
    return None


class LocationNotificationHandler:
    """Sends the site notification when an updated location falls inside its radius."""

    def __init__(
        self,
        sender: NotificationSender,
        site: ProximitySite,
        title: str = DEFAULT_NEARBY_TITLE,
        body: str = DEFAULT_NEARBY_BODY,
        metrics: InMemoryNotifierMetricsCollector | None = None,
    ) -> None:
        self._sender = sender
        self._site = site
        self._title = title
        self._body = body
        self._metrics = metrics
        self._tracer = trace.get_tracer("notifier")

    async def on_change(self, change: DocumentChange) -> DeliveryResult | None:
        if change.change_type != "MODIFIED" or change.after is None:
            self._record("ignored")
            return None
        if user_id_from_path(change.path) is None:
            self._record("ignored")
            logger.info("location_change_ignored", extra={"path": change.path, "reason": "not_a_user_location"})
            return None
        return await self.handle_location(change.after, path=change.path)

    async def handle_location(self, data: dict[str, Any], path: str = "") -> DeliveryResult | None:
        user_id = user_id_from_path(path)
        with self._tracer.start_as_current_span("notifier.location_check") as span:
            span.set_attribute("site.name", self._site.name)
            if user_id:
                span.set_attribute("user.id", user_id)
            try:
                update = parse_location_update(data)
            except InvalidLocationDocument as exc:
                self._record("invalid")
                logger.warning(
                    "location_document_invalid",
                    extra={"user_id": user_id, "reason": str(exc)},
                )
                return None

            if not is_near(update.location, self._site.location, self._site.radius_km):
                self._record("far")
                return None
            if update.token is None:
                self._record("missing_token")
                logger.warning(
                    "location_notification_skipped",
                    extra={"user_id": user_id, "site": self._site.name, "reason": "missing_token"},
                )
                return None

            self._record("near")
            result = await self._sender.send(
                PushNotification(title=self._title, body=self._body, token=update.token)
            )
            span.set_attribute("notification.success", result.success)
        if self._metrics:
            self._metrics.increment_notification(kind="location", success=result.success)
        if not result.success:
            logger.warning(
                "location_notification_failed",
                extra={"user_id": user_id, "site": self._site.name, "error_code": result.error_code},
            )
        return result

    def _record(self, outcome: str) -> None:
        if self._metrics:
            self._metrics.increment_location_check(outcome)
