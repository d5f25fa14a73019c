"""Core command dispatcher — runs one operation against the store.

The dispatcher depends on a
:class:`~userdb.core.protocols.StorageBackend` injected at construction
time and writes results to a text sink handed in by the caller.  It is
responsible for:

* Validating the flags the requested operation needs.
* Loading the store, applying the operation and saving on mutation.
* Turning duplicate/not-found outcomes into informational output.

Guarantees
----------
* No direct filesystem access — persistence goes through the backend.
* Only :class:`~userdb.exceptions.UserDbError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO

from userdb.core.models import Arguments, User
from userdb.core.protocols import StorageBackend
from userdb.core.store import UserStore
from userdb.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    UnknownOperationError,
    UserDbError,
    missing_flag,
)

logger = logging.getLogger(__name__)

OPERATIONS: tuple[str, ...] = ("add", "remove", "list", "findById")


class CommandDispatcher:
    """Execute a single operation described by :class:`Arguments`.

    Parameters
    ----------
    storage:
        Any object satisfying the :class:`StorageBackend` protocol.
    """

    def __init__(self, storage: StorageBackend) -> None:
        self._storage: StorageBackend = storage
        self._handlers: dict[str, Callable[[str, UserStore, Arguments, TextIO], None]] = {
            "add": self._add,
            "remove": self._remove,
            "list": self._list,
            "findById": self._find_by_id,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def perform(self, arguments: Arguments, writer: TextIO) -> None:
        """Validate *arguments*, run the operation and write its output.

        Raises
        ------
        MissingArgumentError
            If ``fileName``, ``operation`` or an operation-specific flag
            is missing.
        UnknownOperationError
            If ``operation`` is not one of :data:`OPERATIONS`.
        DecodingError
            If the ``item`` JSON or the store file is malformed.
        StorageIOError
            If the store file cannot be read or written.
        """
        file_name = _require(arguments, "fileName")
        operation = _require(arguments, "operation")

        store = self._storage.load(file_name)

        handler = self._handlers.get(operation)
        if handler is None:
            raise UnknownOperationError(
                f"Operation {operation} not allowed!",
                hint=f"Use one of: {', '.join(OPERATIONS)}",
            )
        handler(file_name, store, arguments, writer)

    # ------------------------------------------------------------------
    # Operation handlers
    # ------------------------------------------------------------------

    def _add(
        self, file_name: str, store: UserStore, arguments: Arguments, writer: TextIO,
    ) -> None:
        user = User.from_json(_require(arguments, "item"))
        try:
            store.add(user)
        except DuplicateKeyError as exc:
            logger.info("add skipped: %s", exc)
            writer.write(str(exc))
        self._save(file_name, store)

    def _remove(
        self, file_name: str, store: UserStore, arguments: Arguments, writer: TextIO,
    ) -> None:
        user_id = _require(arguments, "id")
        try:
            store.remove(user_id)
        except NotFoundError as exc:
            logger.info("remove skipped: %s", exc)
            writer.write(str(exc))
        self._save(file_name, store)

    @staticmethod
    def _list(
        file_name: str, store: UserStore, arguments: Arguments, writer: TextIO,
    ) -> None:
        writer.write(store.to_json())

    @staticmethod
    def _find_by_id(
        file_name: str, store: UserStore, arguments: Arguments, writer: TextIO,
    ) -> None:
        user = store.find(_require(arguments, "id"))
        if user is None:
            # Absent users produce no output.
            return
        writer.write(user.to_json())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save(self, file_name: str, store: UserStore) -> None:
        """Save through the backend; failures are logged and re-raised."""
        try:
            self._storage.save(file_name, store)
        except UserDbError as exc:
            logger.error("Failed to save %s: %s", file_name, exc)
            raise


def _require(arguments: Arguments, flag: str) -> str:
    """Return the non-empty value of *flag* or raise ``MissingArgumentError``."""
    value = arguments.get(flag)
    if not value:
        raise missing_flag(flag)
    return value
