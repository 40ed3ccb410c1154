from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from notifier.models import UpcomingEvent


class EventStore(ABC):
    @abstractmethod
    async def list_upcoming(self, after: datetime) -> list[UpcomingEvent]:
        """Events whose date is strictly later than ``after``."""
        raise NotImplementedError


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[UpcomingEvent] = ()) -> None:
        self.events: list[UpcomingEvent] = list(events)

    async def list_upcoming(self, after: datetime) -> list[UpcomingEvent]:
        upcoming = [event for event in self.events if event.date > after]
        return sorted(upcoming, key=lambda event: event.date)
