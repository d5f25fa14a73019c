"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem.  Every raw
``OSError`` or ``json`` exception must be caught here and re-raised as a
:class:`~userdb.exceptions.UserDbError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from userdb.infra.json_storage import STORE_FILE_MODE, JsonFileStorage

__all__: list[str] = [
    "STORE_FILE_MODE",
    "JsonFileStorage",
]
