import pytest
from stylefit.services.sessions import SessionNotFound, SessionStore


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_expired_session_is_dropped():
    clock = FakeClock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    session_id, _ = store.create()
    assert store.get(session_id) is not None

    clock.now += 61
    with pytest.raises(SessionNotFound):
        store.get(session_id)
    assert len(store) == 0


def test_create_purges_old_sessions():
    clock = FakeClock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    old, _ = store.create()
    clock.now += 30
    recent, _ = store.create()

    clock.now += 40
    fresh, _ = store.create()
    assert len(store) == 2
    with pytest.raises(SessionNotFound):
        store.get(old)
    store.get(recent)
    store.get(fresh)


def test_replace_unknown_session():
    store = SessionStore(ttl_seconds=60)
    with pytest.raises(SessionNotFound):
        store.replace("missing", store.create()[1])


def test_snapshot_is_independent():
    store = SessionStore(ttl_seconds=60)
    session_id, profile = store.create()
    snap = store.snapshot(session_id)
    store.replace(session_id, profile.model_copy(update={
        "measurements": profile.measurements.with_values({"chest": "40"}),
    }))
    assert snap.measurements.chest == ""
    assert store.get(session_id).measurements.chest == "40"
