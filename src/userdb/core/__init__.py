"""Core / service layer — domain models, the store and the dispatcher.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from userdb.core.dispatcher import OPERATIONS, CommandDispatcher
from userdb.core.models import Arguments, User
from userdb.core.protocols import StorageBackend
from userdb.core.store import UserStore

__all__: list[str] = [
    "OPERATIONS",
    "Arguments",
    "CommandDispatcher",
    "StorageBackend",
    "User",
    "UserStore",
]
