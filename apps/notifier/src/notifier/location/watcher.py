from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future
from typing import Any, Protocol

from notifier.models import DocumentChange

logger = logging.getLogger(__name__)


class ChangeListener(Protocol):
    async def on_change(self, change: DocumentChange) -> Any: ...


class FirestoreLocationWatcher:
    """Forwards updates of ``users/{userId}/location/current`` documents to a listener.

    Firestore delivers snapshots on its own thread; each change is handed to
    the listener on ``loop``. Only ``MODIFIED`` changes are forwarded, since
    the first snapshot replays every existing document as ``ADDED``.
    """

    def __init__(
        self,
        client: Any,
        listener: ChangeListener,
        loop: asyncio.AbstractEventLoop,
        collection_group: str = "location",
        document_id: str = "current",
    ) -> None:
        self._client = client
        self._listener = listener
        self._loop = loop
        self._collection_group = collection_group
        self._document_id = document_id
        self._watch: Any | None = None

    @property
    def running(self) -> bool:
        return self._watch is not None

    def start(self) -> None:
        if self._watch is not None:
            return
        query = self._client.collection_group(self._collection_group)
        self._watch = query.on_snapshot(self._on_snapshot)
        logger.info(
            "location_watch_started",
            extra={"collection_group": self._collection_group, "document_id": self._document_id},
        )

    def stop(self) -> None:
        if self._watch is None:
            return
        self._watch.unsubscribe()
        self._watch = None
        logger.info("location_watch_stopped", extra={"collection_group": self._collection_group})

    def _on_snapshot(self, snapshots: Any, changes: list[Any], read_time: Any) -> list[Future]:
        del snapshots, read_time
        futures: list[Future] = []
        for change in changes:
            document = change.document
            if document.id != self._document_id or change.type.name != "MODIFIED":
                continue
            document_change = DocumentChange(
                path=document.reference.path,
                change_type=change.type.name,
                after=document.to_dict(),
            )
            future = asyncio.run_coroutine_threadsafe(self._listener.on_change(document_change), self._loop)
            future.add_done_callback(self._log_failure)
            futures.append(future)
        return futures

    def _log_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("location_change_failed", exc_info=exc)
