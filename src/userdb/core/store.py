"""In-memory keyed collection of :class:`~userdb.core.models.User` records.

Pure data structure — no I/O.  Persistence lives in the infra layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from userdb.core.models import User, dump_json
from userdb.exceptions import DuplicateKeyError, NotFoundError


class UserStore:
    """Mapping of user id to :class:`User`, unique by construction.

    Enumeration order is not part of the contract.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    @classmethod
    def from_users(cls, users: Iterable[User]) -> UserStore:
        """Build a store from *users*; a repeated id keeps the last record."""
        store = cls()
        for user in users:
            store._users[user.id] = user
        return store

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, user: User) -> None:
        """Insert *user*.

        Raises
        ------
        DuplicateKeyError
            If a user with the same id is already stored.  The store is
            left unchanged.
        """
        if user.id in self._users:
            raise DuplicateKeyError(f"Item with id {user.id} already exists")
        self._users[user.id] = user

    def remove(self, user_id: str) -> None:
        """Delete the user stored under *user_id*.

        Raises
        ------
        NotFoundError
            If no such user exists.  The store is left unchanged.
        """
        if user_id not in self._users:
            raise NotFoundError(f"Item with id {user_id} not found")
        del self._users[user_id]

    def list(self) -> list[User]:
        """Return a snapshot of every stored user."""
        return list(self._users.values())

    def find(self, user_id: str) -> User | None:
        """Return the user stored under *user_id*, or ``None``."""
        return self._users.get(user_id)

    def to_json(self) -> str:
        """Serialize :meth:`list` as a compact JSON array."""
        return dump_json([user.to_dict() for user in self.list()])

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __iter__(self) -> Iterator[User]:
        return iter(self.list())

    def __repr__(self) -> str:
        return f"UserStore({len(self)} users)"
