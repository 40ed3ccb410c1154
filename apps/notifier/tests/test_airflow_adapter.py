from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from notifier.events.broadcaster import UpcomingEventBroadcaster
from notifier.events.store import InMemoryEventStore
from notifier.messaging.sender import InMemoryNotificationSender
from notifier.models import UpcomingEvent
from notifier.orchestration.airflow_adapter import (
    AIRFLOW_AVAILABLE,
    build_event_broadcast_callable,
    create_event_broadcast_dag,
)


def _broadcaster(failing: bool = False) -> UpcomingEventBroadcaster:
    tomorrow = datetime.now(timezone.utc) + timedelta(days=1)
    return UpcomingEventBroadcaster(
        store=InMemoryEventStore([UpcomingEvent(event_id="e1", name="Gala", description=None, date=tomorrow)]),
        sender=InMemoryNotificationSender(failing_targets={"allUsers"} if failing else ()),
    )


def test_build_event_broadcast_callable_runs_broadcast() -> None:
    runner = build_event_broadcast_callable(lambda: _broadcaster())
    assert runner() == 1


def test_build_event_broadcast_callable_fails_task_on_delivery_failures() -> None:
    runner = build_event_broadcast_callable(lambda: _broadcaster(failing=True))
    with pytest.raises(RuntimeError):
        runner()


def test_create_event_broadcast_dag_requires_airflow() -> None:
    if AIRFLOW_AVAILABLE:
        dag = create_event_broadcast_dag("event_broadcast_test", broadcaster_factory=_broadcaster)
        assert dag is not None
        return

    with pytest.raises(RuntimeError):
        create_event_broadcast_dag("event_broadcast_test", broadcaster_factory=_broadcaster)
