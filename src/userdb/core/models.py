"""Domain models for userdb.

All models are **frozen** dataclasses — immutable value objects.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from userdb.exceptions import DecodingError, EncodingError

# Compact separators, e.g. {"id":"1","email":"a@b.com","age":30}
JSON_SEPARATORS: tuple[str, str] = (",", ":")


def dump_json(payload: Any) -> str:
    """Encode *payload* compactly, mapping failures to :class:`EncodingError`."""
    try:
        text = json.dumps(payload, separators=JSON_SEPARATORS, ensure_ascii=False)
        # Lone surrogates decode from JSON escapes but cannot be written as UTF-8.
        text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(
            f"Cannot encode users as JSON: {exc}",
            hint="Values must be valid Unicode text (no unpaired \\uD800-\\uDFFF escapes).",
        ) from exc
    return text


# ---------------------------------------------------------------------------
# User record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class User:
    """A single user record."""

    id: str
    """Unique identifier.  An empty id marks an absent record."""

    email: str = ""
    """Free-form e-mail address."""

    age: int = 0
    """Age in years."""

    @classmethod
    def from_dict(cls, data: object) -> User:
        """Build a :class:`User` from a decoded JSON object.

        Missing ``email`` and ``age`` fall back to ``""`` and ``0``;
        unknown keys are ignored.

        Raises
        ------
        DecodingError
            If *data* is not an object, ``id`` is missing or empty, or a
            field has the wrong type.
        """
        if not isinstance(data, dict):
            raise DecodingError(
                f"A user must be a JSON object, got {type(data).__name__}",
            )

        user_id = data.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise DecodingError("A user must carry a non-empty string 'id'")

        email = data.get("email", "")
        if not isinstance(email, str):
            raise DecodingError(f"User {user_id}: 'email' must be a string")

        age = data.get("age", 0)
        # bool is an int subclass; reject it explicitly.
        if isinstance(age, bool) or not isinstance(age, int):
            raise DecodingError(f"User {user_id}: 'age' must be an integer")

        return cls(id=user_id, email=email, age=age)

    @classmethod
    def from_json(cls, text: str) -> User:
        """Decode a JSON-encoded user such as the ``item`` flag value."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodingError(
                f"Invalid user JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
                hint='Expected something like {"id":"1","email":"a@b.com","age":30}',
            ) from exc
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "email": self.email, "age": self.age}

    def to_json(self) -> str:
        """Serialize to compact JSON, or ``""`` for an absent (empty-id) user."""
        if not self.id:
            return ""
        return dump_json(self.to_dict())


# ---------------------------------------------------------------------------
# Invocation configuration
# ---------------------------------------------------------------------------

# CLI flag name -> Arguments attribute
FLAG_FIELDS: dict[str, str] = {
    "fileName": "file_name",
    "operation": "operation",
    "item": "item",
    "id": "id",
}


@dataclass(frozen=True, slots=True)
class Arguments:
    """Flag values for one invocation.

    Built once by the argument parser and passed by value into the
    dispatcher.  A flag that was not given (or given an empty value) is
    ``None``.
    """

    file_name: str | None = None
    operation: str | None = None
    item: str | None = None
    id: str | None = None
    extras: Mapping[str, str] = field(default_factory=dict)
    """Flags the dispatcher does not recognise, kept for diagnostics."""

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> Arguments:
        """Build from a ``{flag: value}`` mapping keyed by CLI flag names."""
        known = {
            attr: values[flag]
            for flag, attr in FLAG_FIELDS.items()
            if flag in values
        }
        extras = {k: v for k, v in values.items() if k not in FLAG_FIELDS}
        return cls(**known, extras=extras)

    def get(self, flag: str) -> str | None:
        """Return the value given for *flag* (a CLI flag name), or ``None``."""
        attr = FLAG_FIELDS.get(flag)
        if attr is not None:
            return getattr(self, attr)
        return self.extras.get(flag)
