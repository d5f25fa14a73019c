"""JSON-file implementation of :class:`~userdb.core.protocols.StorageBackend`.

The store file is a JSON array of user objects::

    [{"id":"1","email":"a@b.com","age":30}]

This module is the **only** place in the codebase that touches the
store file.  ``OSError`` and ``json`` failures are caught here and
re-raised as typed :class:`~userdb.exceptions.UserDbError` subclasses.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from userdb.core.models import User
from userdb.core.store import UserStore
from userdb.exceptions import DecodingError, EncodingError, StorageIOError

logger = logging.getLogger(__name__)

STORE_FILE_MODE: int = 0o644
"""Permissions for newly created store files (owner rw, group/other r)."""


class JsonFileStorage:
    """Concrete :class:`StorageBackend` backed by a local JSON file.

    Usage::

        storage = JsonFileStorage()
        store = storage.load("users.json")
        storage.save("users.json", store)
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding: str = encoding

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self, path: str) -> UserStore:
        """Read the store at *path*.

        A missing or blank file yields an empty store.

        Raises
        ------
        DecodingError
            When the file is not a JSON array of valid users.
        StorageIOError
            When the file exists but cannot be read.
        """
        file_path = Path(path)
        try:
            content = file_path.read_text(encoding=self._encoding)
        except FileNotFoundError:
            logger.debug("Store %s does not exist yet; starting empty", path)
            return UserStore()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(
                f"Cannot read store file {path}: {exc}",
            ) from exc

        if not content.strip():
            logger.debug("Store %s is blank; starting empty", path)
            return UserStore()

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as exc:
            raise DecodingError(
                f"Store file {path} is not valid JSON: {exc.msg} "
                f"(line {exc.lineno}, column {exc.colno})",
                hint="Fix or remove the file; it will be recreated on the next add.",
            ) from exc

        if not isinstance(raw, list):
            raise DecodingError(
                f"Store file {path} must contain a JSON array, got {type(raw).__name__}",
            )

        try:
            users = [User.from_dict(entry) for entry in raw]
        except DecodingError as exc:
            raise DecodingError(f"Store file {path}: {exc}") from exc

        store = UserStore.from_users(users)
        logger.debug("Loaded %d users from %s", len(store), path)
        return store

    def save(self, path: str, store: UserStore) -> None:
        """Overwrite *path* with the JSON array of *store*'s users.

        Raises
        ------
        EncodingError
            When the users cannot be serialized.
        StorageIOError
            When the file cannot be written.
        """
        # Encode fully before truncating so a bad payload never empties the file.
        try:
            payload = store.to_json().encode(self._encoding)
        except UnicodeEncodeError as exc:
            raise EncodingError(
                f"Cannot encode users as {self._encoding}: {exc}",
            ) from exc

        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, STORE_FILE_MODE)
            with open(fd, "wb") as fh:
                fh.write(payload)
        except OSError as exc:
            raise StorageIOError(
                f"Cannot write store file {path}: {exc}",
            ) from exc
        logger.debug("Saved %d users to %s", len(store), path)
