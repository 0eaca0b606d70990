"""Tests for the in-memory session store."""
import pytest

from tests.conftest import FakeClock
from tutorbot.sessions import MessageRole, SessionStore, SessionStoreError


def _fill(store: SessionStore, session_id: str, count: int) -> None:
    for i in range(count):
        role = MessageRole.USER if i % 2 == 0 else MessageRole.ASSISTANT
        store.append(session_id, role, f"message {i}")


class TestCreate:
    """Session creation and id allocation."""

    def test_create_holds_only_system_message(self, store: SessionStore, clock: FakeClock) -> None:
        session = store.create("Tu es un assistant.")
        assert len(session.messages) == 1
        assert session.messages[0].role == MessageRole.SYSTEM
        assert session.messages[0].content == "Tu es un assistant."
        assert session.created_at == clock.now
        assert session.last_activity == clock.now
        assert session.metadata == {}

    def test_ids_are_unique(self, store: SessionStore) -> None:
        ids = {store.create("p").session_id for _ in range(50)}
        assert len(ids) == 50
        assert len(store) == 50

    def test_id_collision_is_regenerated(self) -> None:
        ids = iter(["dup", "dup", "fresh"])
        store = SessionStore(id_factory=lambda: next(ids))
        assert store.create("a").session_id == "dup"
        assert store.create("b").session_id == "fresh"

    def test_id_generation_exhaustion_raises(self) -> None:
        store = SessionStore(id_factory=lambda: "same")
        store.create("a")
        with pytest.raises(SessionStoreError):
            store.create("b")


class TestGet:
    def test_unknown_returns_none(self, store: SessionStore) -> None:
        assert store.get("nope") is None

    def test_get_does_not_touch_activity(self, store: SessionStore, clock: FakeClock) -> None:
        sid = store.create("p").session_id
        clock.advance(minutes=5)
        assert store.get(sid).last_activity != clock.now

    def test_returned_copy_cannot_mutate_store(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        store.update_metadata(sid, {"context": {"subject": "listes"}})
        copy = store.get(sid)
        copy.messages.clear()
        copy.metadata["context"]["subject"] = "changed"
        fresh = store.get(sid)
        assert len(fresh.messages) == 1
        assert fresh.metadata["context"]["subject"] == "listes"


class TestAppend:
    """Appending and history trimming."""

    def test_unknown_session_returns_false(self, store: SessionStore) -> None:
        assert store.append("nope", MessageRole.USER, "hi") is False

    def test_append_updates_activity(self, store: SessionStore, clock: FakeClock) -> None:
        sid = store.create("p").session_id
        clock.advance(minutes=3)
        assert store.append(sid, MessageRole.USER, "bonjour") is True
        session = store.get(sid)
        assert session.last_activity == clock.now
        assert session.last_activity >= session.created_at
        assert session.messages[-1].content == "bonjour"

    def test_accepts_role_strings(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        store.append(sid, "assistant", "salut")
        assert store.get(sid).messages[-1].role == MessageRole.ASSISTANT

    def test_history_never_exceeds_bound(self, store: SessionStore) -> None:
        sid = store.create("system").session_id
        for i in range(60):
            store.append(sid, MessageRole.USER, f"m{i}")
            session = store.get(sid)
            assert len(session.messages) <= store.max_history
            assert session.messages[0].role == MessageRole.SYSTEM
            assert session.messages[0].content == "system"

    def test_trim_keeps_system_and_latest_messages_in_order(self, store: SessionStore) -> None:
        sid = store.create("system").session_id
        k = 7
        _fill(store, sid, store.max_history + k)
        contents = [m.content for m in store.get(sid).messages]
        expected = [f"message {i}" for i in range(store.max_history + k)][-(store.max_history - 1):]
        assert contents == ["system", *expected]

    def test_small_bound_is_clamped(self, clock: FakeClock) -> None:
        store = SessionStore(max_history=0, clock=clock)
        assert store.max_history == 2
        sid = store.create("system").session_id
        _fill(store, sid, 5)
        messages = store.get(sid).messages
        assert [m.content for m in messages] == ["system", "message 4"]


class TestCompletionMessages:
    def test_projection_strips_timestamps(self, store: SessionStore) -> None:
        sid = store.create("system").session_id
        store.append(sid, MessageRole.USER, "q")
        store.append(sid, MessageRole.ASSISTANT, "a")
        assert store.to_completion_messages(sid) == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "q"},
            {"role": "assistant", "content": "a"},
        ]

    def test_unknown_session_is_empty(self, store: SessionStore) -> None:
        assert store.to_completion_messages("nope") == []


class TestMetadata:
    def test_merge_adds_and_overwrites(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        assert store.update_metadata(sid, {"a": 1}) is True
        store.update_metadata(sid, {"b": 2})
        assert store.get(sid).metadata == {"a": 1, "b": 2}
        store.update_metadata(sid, {"a": 3})
        assert store.get(sid).metadata == {"a": 3, "b": 2}

    def test_unknown_session_returns_false(self, store: SessionStore) -> None:
        assert store.update_metadata("nope", {"a": 1}) is False


class TestReset:
    """Reset back to the system prompt."""

    def test_reset_keeps_only_system_message(self, store: SessionStore, clock: FakeClock) -> None:
        sid = store.create("system").session_id
        store.update_metadata(sid, {"mode": "DEBUG_HELPER"})
        _fill(store, sid, 6)
        created_at = store.get(sid).created_at
        clock.advance(minutes=1)
        assert store.reset(sid) is True
        session = store.get(sid)
        assert [m.content for m in session.messages] == ["system"]
        assert session.last_activity == clock.now
        assert session.created_at == created_at
        assert session.metadata == {"mode": "DEBUG_HELPER"}

    def test_reset_is_idempotent(self, store: SessionStore) -> None:
        sid = store.create("system").session_id
        _fill(store, sid, 4)
        store.reset(sid)
        first = store.get(sid).messages
        store.reset(sid)
        assert store.get(sid).messages == first

    def test_reset_after_trim_keeps_original_system_message(self, store: SessionStore) -> None:
        sid = store.create("system").session_id
        _fill(store, sid, 45)
        store.reset(sid)
        assert store.to_completion_messages(sid) == [{"role": "system", "content": "system"}]

    def test_unknown_session_returns_false(self, store: SessionStore) -> None:
        assert store.reset("nope") is False


class TestDelete:
    def test_delete_reports_whether_removed(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        assert store.delete(sid) is True
        assert store.delete(sid) is False
        assert store.get(sid) is None
        assert sid not in store


class TestStats:
    """Derived message counts."""

    def test_counts_are_consistent(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        _fill(store, sid, 5)
        stats = store.stats(sid)
        raw = len(store.get(sid).messages)
        assert stats.user_messages == 3
        assert stats.assistant_messages == 2
        assert stats.user_messages + stats.assistant_messages + 1 == raw
        assert stats.total_user_visible_messages == raw - 1

    def test_counts_after_trim(self, store: SessionStore) -> None:
        sid = store.create("p").session_id
        _fill(store, sid, 33)
        stats = store.stats(sid)
        assert stats.total_user_visible_messages == store.max_history - 1
        assert stats.user_messages + stats.assistant_messages == store.max_history - 1

    def test_unknown_session_returns_none(self, store: SessionStore) -> None:
        assert store.stats("nope") is None


class TestSweep:
    """Expiry of inactive sessions."""

    def test_removes_only_sessions_past_threshold(self, store: SessionStore, clock: FakeClock) -> None:
        stale = store.create("p").session_id
        clock.advance(minutes=1)
        boundary = store.create("p").session_id
        clock.advance(minutes=60)
        assert store.sweep_expired(60) == 1
        assert store.get(stale) is None
        assert store.get(boundary) is not None

    def test_default_threshold_comes_from_config(self, clock: FakeClock) -> None:
        store = SessionStore(expiry_minutes=10, clock=clock)
        sid = store.create("p").session_id
        clock.advance(minutes=11)
        assert store.sweep_expired() == 1
        assert sid not in store

    def test_activity_keeps_session_alive(self, store: SessionStore, clock: FakeClock) -> None:
        sid = store.create("p").session_id
        clock.advance(minutes=50)
        store.append(sid, MessageRole.USER, "encore là")
        clock.advance(minutes=50)
        assert store.sweep_expired(60) == 0
        assert sid in store

    def test_empty_store(self, store: SessionStore) -> None:
        assert store.sweep_expired(60) == 0
