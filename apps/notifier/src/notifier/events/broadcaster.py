from __future__ import annotations

import logging
from datetime import datetime, timezone
from time import perf_counter

from opentelemetry import trace

from notifier.events.store import EventStore
from notifier.messaging.sender import NotificationSender
from notifier.metrics import InMemoryNotifierMetricsCollector
from notifier.models import BroadcastSummary, PushNotification, UpcomingEvent

logger = logging.getLogger(__name__)

DEFAULT_BROADCAST_TOPIC = "allUsers"


def build_event_notification(event: UpcomingEvent, topic: str = DEFAULT_BROADCAST_TOPIC) -> PushNotification:
    return PushNotification(
        title=f"Upcoming Event: {event.name}!",
        body=event.description,
        topic=topic,
    )


class UpcomingEventBroadcaster:
    """Announces every future event to a topic, one push per event."""

    def __init__(
        self,
        store: EventStore,
        sender: NotificationSender,
        topic: str = DEFAULT_BROADCAST_TOPIC,
        metrics: InMemoryNotifierMetricsCollector | None = None,
    ) -> None:
        self._store = store
        self._sender = sender
        self._topic = topic
        self._metrics = metrics
        self._tracer = trace.get_tracer("notifier")

    async def run(self, now: datetime | None = None) -> BroadcastSummary:
        started = perf_counter()
        cutoff = now or datetime.now(timezone.utc)
        with self._tracer.start_as_current_span("notifier.event_broadcast") as span:
            span.set_attribute("broadcast.topic", self._topic)
            try:
                summary = await self._broadcast(cutoff)
            except Exception:
                self._record_run("failure", started)
                raise
            span.set_attribute("broadcast.sent", summary.sent)
            span.set_attribute("broadcast.failed", summary.failed)
        self._record_run("success", started)
        logger.info(
            "event_broadcast_completed",
            extra={"topic": self._topic, "sent": summary.sent, "failed": summary.failed},
        )
        return summary

    async def _broadcast(self, cutoff: datetime) -> BroadcastSummary:
        events = await self._store.list_upcoming(cutoff)
        sent = 0
        failed = 0
        for event in events:
            result = await self._sender.send(build_event_notification(event, self._topic))
            if self._metrics:
                self._metrics.increment_notification(kind="event", success=result.success)
            if result.success:
                sent += 1
                continue
            failed += 1
            logger.warning(
                "event_notification_failed",
                extra={"event_id": event.event_id, "error_code": result.error_code},
            )
        return BroadcastSummary(sent=sent, failed=failed)

    def _record_run(self, status: str, started: float) -> None:
        if self._metrics:
            self._metrics.increment_broadcast_run(status)
            self._metrics.observe_broadcast_duration(perf_counter() - started)
