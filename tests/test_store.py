"""Tests for the in-memory user store (core/store.py)."""

from __future__ import annotations

import json

import pytest

from userdb.core.models import User
from userdb.core.store import UserStore
from userdb.exceptions import DuplicateKeyError, NotFoundError


def _user(user_id: str = "1", **overrides: object) -> User:
    fields: dict[str, object] = {"email": f"{user_id}@example.com", "age": 30}
    fields.update(overrides)
    return User(id=user_id, **fields)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_add_inserts(self) -> None:
        store = UserStore()
        store.add(_user("1"))
        assert "1" in store
        assert len(store) == 1

    def test_duplicate_raises_and_leaves_store_unchanged(self) -> None:
        original = _user("1", age=30)
        store = UserStore.from_users([original])

        with pytest.raises(DuplicateKeyError, match="Item with id 1 already exists"):
            store.add(_user("1", age=99))

        assert store.list() == [original]


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------

class TestRemove:
    def test_remove_deletes(self) -> None:
        store = UserStore.from_users([_user("1"), _user("2")])
        store.remove("1")
        assert "1" not in store
        assert [u.id for u in store] == ["2"]

    def test_missing_id_raises_and_leaves_store_unchanged(self) -> None:
        store = UserStore.from_users([_user("1")])

        with pytest.raises(NotFoundError, match="Item with id 2 not found"):
            store.remove("2")

        assert [u.id for u in store] == ["1"]

    def test_remove_from_empty_store(self) -> None:
        with pytest.raises(NotFoundError):
            UserStore().remove("1")


# ---------------------------------------------------------------------------
# list / find
# ---------------------------------------------------------------------------

class TestListAndFind:
    def test_list_returns_all_users(self) -> None:
        users = [_user("1"), _user("2"), _user("3")]
        store = UserStore.from_users(users)
        assert sorted(store.list(), key=lambda u: u.id) == users

    def test_list_is_a_snapshot(self) -> None:
        store = UserStore.from_users([_user("1")])
        snapshot = store.list()
        snapshot.clear()
        assert len(store) == 1

    def test_find_existing(self) -> None:
        store = UserStore.from_users([_user("1"), _user("2")])
        assert store.find("2") == _user("2")

    @pytest.mark.parametrize("user_id", ["1", "", "missing"])
    def test_find_on_empty_store_returns_none(self, user_id: str) -> None:
        assert UserStore().find(user_id) is None

    def test_from_users_keeps_last_duplicate(self) -> None:
        store = UserStore.from_users([_user("1", age=1), _user("1", age=2)])
        assert len(store) == 1
        found = store.find("1")
        assert found is not None
        assert found.age == 2


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

class TestToJson:
    def test_empty_store(self) -> None:
        assert UserStore().to_json() == "[]"

    def test_array_of_users(self) -> None:
        store = UserStore.from_users([_user("1"), _user("2")])
        decoded = json.loads(store.to_json())
        assert sorted(decoded, key=lambda d: d["id"]) == [
            {"id": "1", "email": "1@example.com", "age": 30},
            {"id": "2", "email": "2@example.com", "age": 30},
        ]

    def test_compact(self) -> None:
        store = UserStore.from_users([User(id="1", email="a@b.com", age=30)])
        assert store.to_json() == '[{"id":"1","email":"a@b.com","age":30}]'
