"""Session store tests."""

import threading

import pytest

from wxmp.sessions import SessionStore


class Handle:
    def __init__(self, user_id: str):
        self.user_id = user_id


def test_get_or_create_creates_once():
    calls = []

    def factory(uid):
        calls.append(uid)
        return Handle(uid)

    store = SessionStore(factory)
    first = store.get_or_create("u1")
    assert store.get_or_create("u1") is first
    assert first.user_id == "u1"
    assert calls == ["u1"]
    assert "u1" in store
    assert len(store) == 1


def test_get_does_not_create():
    store = SessionStore(Handle)
    assert store.get("u1") is None
    assert len(store) == 0


def test_reset_replaces_handle():
    store = SessionStore(Handle)
    first = store.get_or_create("u1")
    second = store.reset("u1")
    assert second is not first
    assert store.get("u1") is second


def test_discard():
    store = SessionStore(Handle)
    store.get_or_create("u1")
    store.discard("u1")
    store.discard("missing")
    assert "u1" not in store


def test_factory_error_stores_nothing():
    def factory(uid):
        raise RuntimeError("backend down")

    store = SessionStore(factory)
    with pytest.raises(RuntimeError):
        store.get_or_create("u1")
    assert "u1" not in store


def test_concurrent_get_or_create_single_handle():
    created = []
    store = SessionStore(lambda uid: created.append(uid) or Handle(uid))
    barrier = threading.Barrier(16)
    results = []

    def worker():
        barrier.wait()
        results.append(store.get_or_create("u1"))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 1
    assert all(r is results[0] for r in results)
