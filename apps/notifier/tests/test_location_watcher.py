from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest

from notifier.location.watcher import FirestoreLocationWatcher
from notifier.models import DocumentChange


class RecordingListener:
    def __init__(self) -> None:
        self.changes: list[DocumentChange] = []

    async def on_change(self, change: DocumentChange) -> None:
        self.changes.append(change)


class FakeWatch:
    def __init__(self) -> None:
        self.unsubscribed = False

    def unsubscribe(self) -> None:
        self.unsubscribed = True


class FakeQuery:
    def __init__(self) -> None:
        self.callback = None
        self.watch = FakeWatch()

    def on_snapshot(self, callback):
        self.callback = callback
        return self.watch


class FakeClient:
    def __init__(self) -> None:
        self.groups: list[str] = []
        self.query = FakeQuery()

    def collection_group(self, name: str) -> FakeQuery:
        self.groups.append(name)
        return self.query


def _change(change_type: str, path: str, data: dict) -> SimpleNamespace:
    document = SimpleNamespace(
        id=path.rsplit("/", 1)[-1],
        reference=SimpleNamespace(path=path),
        to_dict=lambda: data,
    )
    return SimpleNamespace(type=SimpleNamespace(name=change_type), document=document)


@pytest.mark.asyncio
async def test_watcher_forwards_current_location_updates() -> None:
    client = FakeClient()
    listener = RecordingListener()
    watcher = FirestoreLocationWatcher(client=client, listener=listener, loop=asyncio.get_running_loop())

    watcher.start()
    futures = client.query.callback(
        [],
        [
            _change("ADDED", "users/u-1/location/current", {"latitude": 1.0, "longitude": 2.0}),
            _change("MODIFIED", "users/u-1/location/current", {"latitude": 29.9, "longitude": 31.1}),
            _change("MODIFIED", "users/u-1/location/history-1", {"latitude": 0.0, "longitude": 0.0}),
            _change("REMOVED", "users/u-2/location/current", {"latitude": 3.0, "longitude": 4.0}),
        ],
        None,
    )
    await asyncio.gather(*(asyncio.wrap_future(future) for future in futures))

    assert client.groups == ["location"]
    assert len(listener.changes) == 1
    change = listener.changes[0]
    assert change.path == "users/u-1/location/current"
    assert change.change_type == "MODIFIED"
    assert change.after == {"latitude": 29.9, "longitude": 31.1}


@pytest.mark.asyncio
async def test_watcher_stop_unsubscribes_once() -> None:
    client = FakeClient()
    watcher = FirestoreLocationWatcher(client=client, listener=RecordingListener(), loop=asyncio.get_running_loop())

    watcher.start()
    watcher.start()
    assert watcher.running
    watcher.stop()
    watcher.stop()

    assert client.groups == ["location"]
    assert client.query.watch.unsubscribed
    assert not watcher.running


@pytest.mark.asyncio
async def test_watcher_logs_listener_failures(caplog) -> None:
    class FailingListener:
        async def on_change(self, change: DocumentChange) -> None:
            raise RuntimeError("boom")

    client = FakeClient()
    watcher = FirestoreLocationWatcher(client=client, listener=FailingListener(), loop=asyncio.get_running_loop())
    watcher.start()

    futures = client.query.callback(
        [],
        [_change("MODIFIED", "users/u-1/location/current", {"latitude": 1.0, "longitude": 2.0})],
        None,
    )
    with pytest.raises(RuntimeError):
        await asyncio.wrap_future(futures[0])
    await asyncio.sleep(0)

    assert "location_change_failed" in caplog.text
