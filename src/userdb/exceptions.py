"""Custom exception hierarchy for userdb.

All exceptions that cross layer boundaries must inherit from
:class:`UserDbError`.  Raw ``OSError`` and ``json`` exceptions must
NEVER propagate beyond the layer that triggered them — they are caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
UserDbError
├── ArgumentError
│   └── MissingArgumentError
├── UnknownOperationError
├── DuplicateKeyError
├── NotFoundError
├── DecodingError
├── EncodingError
├── StorageIOError
└── EnvironmentError
"""

from __future__ import annotations


class UserDbError(Exception):
    """Base exception for all userdb errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation / configuration --------------------------------------------

class ArgumentError(UserDbError):
    """Raised when the command-line token list is malformed."""


class MissingArgumentError(ArgumentError):
    """Raised when a flag required by the requested operation is absent."""


class UnknownOperationError(UserDbError):
    """Raised when ``operation`` names something the dispatcher cannot run."""


# --- Store operations ------------------------------------------------------

class DuplicateKeyError(UserDbError):
    """Raised when adding a user whose id is already stored."""


class NotFoundError(UserDbError):
    """Raised when removing an id that is not stored."""


# --- Serialization ---------------------------------------------------------

class DecodingError(UserDbError):
    """Raised when JSON input (an item or the store file) cannot be decoded."""


class EncodingError(UserDbError):
    """Raised when users cannot be serialized to JSON."""


# --- Persistence / environment ---------------------------------------------

class StorageIOError(UserDbError):
    """Raised when the store file cannot be read or written."""


class EnvironmentError(UserDbError):
    """Raised when an optional runtime dependency is not available."""


def missing_flag(flag: str) -> MissingArgumentError:
    """Build the standard error for a required flag that was not given."""
    return MissingArgumentError(
        f"-{flag} flag has to be specified",
        hint=f"Pass it as two tokens: {flag} <value>",
    )
