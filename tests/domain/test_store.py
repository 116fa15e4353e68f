"""Tests for Store — names, usage histories, and snapshots."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tests.conftest import T0, FakeClock
from usage_tracker.domain.errors import DuplicateName, InvalidName, NotFound
from usage_tracker.domain.store import Store, StoreSnapshot, TrackedObject


class TestAdd:
    def test_add_then_list(self, store: Store) -> None:
        store.add("milk")
        assert list(store.names()) == ["milk"]

    def test_new_object_has_no_usages(self, store: Store) -> None:
        store.add("milk")
        assert store.get_usages("milk") == ()

    def test_duplicate_fails(self, store: Store) -> None:
        store.add("milk")
        with pytest.raises(DuplicateName) as exc_info:
            store.add("milk")
        assert exc_info.value.name == "milk"
        assert exc_info.value.code == "DUPLICATE_NAME"
        assert "milk" in exc_info.value.message

    def test_duplicate_leaves_history_untouched(self, store: Store, clock: FakeClock) -> None:
        store.add("milk")
        store.record_usage("milk")
        clock.advance(5)
        store.record_usage("milk")
        before = store.get_usages("milk")
        with pytest.raises(DuplicateName):
            store.add("milk")
        assert store.get_usages("milk") == before
        assert len(store) == 1

    def test_names_are_case_sensitive(self, store: Store) -> None:
        store.add("milk")
        store.add("Milk")
        assert sorted(store.names()) == ["Milk", "milk"]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, store: Store, name: str) -> None:
        with pytest.raises(InvalidName):
            store.add(name)
        assert len(store) == 0


class TestRemove:
    def test_remove_twice_fails(self, store: Store) -> None:
        store.add("milk")
        store.remove("milk")
        with pytest.raises(NotFound) as exc_info:
            store.remove("milk")
        assert exc_info.value.name == "milk"

    def test_remove_drops_history(self, store: Store) -> None:
        store.add("milk")
        store.record_usage("milk")
        store.remove("milk")
        store.add("milk")
        assert store.get_usages("milk") == ()

    def test_clear(self, store: Store) -> None:
        store.add("milk")
        store.add("eggs")
        assert store.clear() == 2
        assert list(store.names()) == []

    def test_clear_empty(self, store: Store) -> None:
        assert store.clear() == 0


class TestRecordUsage:
    def test_appends_current_time(self, store: Store, clock: FakeClock) -> None:
        store.add("milk")
        assert store.record_usage("milk") == T0
        clock.advance(10)
        store.record_usage("milk")
        assert store.get_usages("milk") == (T0, T0 + timedelta(seconds=10))

    def test_length_grows_by_one(self, store: Store, clock: FakeClock) -> None:
        store.add("milk")
        for expected in range(1, 6):
            prior = store.get_usages("milk")
            store.record_usage("milk")
            usages = store.get_usages("milk")
            assert len(usages) == expected
            assert usages[:-1] == prior
            clock.advance(1)

    def test_unknown_name(self, store: Store) -> None:
        with pytest.raises(NotFound):
            store.record_usage("milk")

    def test_converts_clock_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        store = Store(clock=lambda: datetime(2024, 1, 1, 14, 0, tzinfo=plus_two))
        store.add("milk")
        used_at = store.record_usage("milk")
        assert used_at == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert used_at.tzinfo == UTC

    def test_default_clock_is_aware(self) -> None:
        store = Store()
        store.add("milk")
        assert store.record_usage("milk").tzinfo is not None


class TestQueries:
    def test_get_usages_unknown(self, store: Store) -> None:
        with pytest.raises(NotFound):
            store.get_usages("milk")

    def test_get_usages_is_a_copy(self, store: Store) -> None:
        store.add("milk")
        store.record_usage("milk")
        usages = store.get_usages("milk")
        assert isinstance(usages, tuple)
        store.record_usage("milk")
        assert len(usages) == 1

    def test_names_sorted_and_restartable(self, store: Store) -> None:
        for name in ("tea", "coffee", "milk"):
            store.add(name)
        assert list(store.names()) == ["coffee", "milk", "tea"]
        assert list(store.names()) == ["coffee", "milk", "tea"]

    def test_contains(self, store: Store) -> None:
        store.add("milk")
        assert "milk" in store
        assert "eggs" not in store


class TestSnapshots:
    def test_round_trip(self, store: Store, clock: FakeClock) -> None:
        store.add("milk")
        store.add("eggs")
        store.record_usage("milk")
        clock.advance(0.25)
        store.record_usage("milk")
        store.record_usage("eggs")

        raw = store.to_snapshot().model_dump_json()
        restored = Store.from_snapshot(StoreSnapshot.model_validate_json(raw))

        assert list(restored.names()) == list(store.names())
        for name in store.names():
            assert restored.get_usages(name) == store.get_usages(name)

    def test_snapshot_is_detached(self, store: Store) -> None:
        store.add("milk")
        snapshot = store.to_snapshot()
        store.record_usage("milk")
        assert snapshot.objects["milk"].usages == []

    def test_from_snapshot_is_detached(self) -> None:
        snapshot = StoreSnapshot(objects={"milk": TrackedObject(name="milk", usages=[T0])})
        store = Store.from_snapshot(snapshot)
        store.record_usage("milk")
        assert snapshot.objects["milk"].usages == [T0]

    def test_key_must_match_name(self) -> None:
        with pytest.raises(ValidationError):
            StoreSnapshot(objects={"milk": TrackedObject(name="eggs")})

    def test_naive_timestamps_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrackedObject(name="milk", usages=[datetime(2024, 1, 1)])
