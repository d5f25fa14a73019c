"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from userdb.core.store import UserStore


class StorageBackend(Protocol):
    """Contract for loading and saving a :class:`UserStore`.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally.
    Implementations must map all backend-specific exceptions to
    :class:`~userdb.exceptions.UserDbError` subclasses.
    """

    def load(self, path: str) -> UserStore:
        """Return the store kept at *path*.

        A missing store is an empty store, not an error.

        Raises
        ------
        DecodingError
            When the stored content is not a valid list of users.
        StorageIOError
            When the store exists but cannot be read.
        """
        ...  # pragma: no cover

    def save(self, path: str, store: UserStore) -> None:
        """Replace the store kept at *path* with *store*.

        Raises
        ------
        EncodingError
            When *store* cannot be serialized.
        StorageIOError
            When the store cannot be written.
        """
        ...  # pragma: no cover
