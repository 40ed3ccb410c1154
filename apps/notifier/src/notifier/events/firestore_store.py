from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any

from google.cloud.firestore_v1.base_query import FieldFilter

from notifier.errors import InvalidEventDocument
from notifier.events.store import EventStore
from notifier.models import UpcomingEvent
from notifier.schemas import parse_upcoming_event

logger = logging.getLogger(__name__)


class FirestoreEventStore(EventStore):
    def __init__(self, client: Any, collection: str = "events") -> None:
        self._client = client
        self._collection = collection

    async def list_upcoming(self, after: datetime) -> list[UpcomingEvent]:
        return await asyncio.to_thread(self._query_upcoming, after)

    def _query_upcoming(self, after: datetime) -> list[UpcomingEvent]:
        query = self._client.collection(self._collection).where(filter=FieldFilter("date", ">", after))
        events: list[UpcomingEvent] = []
        for snapshot in query.stream():
            try:
                events.append(parse_upcoming_event(snapshot.id, snapshot.to_dict() or {}))
            except InvalidEventDocument as exc:
                logger.warning(
                    "event_document_skipped",
                    extra={"collection": self._collection, "event_id": snapshot.id, "reason": str(exc)},
                )
        return events
