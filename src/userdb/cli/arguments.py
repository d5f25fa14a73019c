"""Flat token-pair argument parsing.

The command line is a sequence of alternating flag names and values::

    userdb fileName users.json operation add item '{"id":"1"}'

No ``--flag=value`` or short-flag syntax is recognised here; the
top-level ``argparse`` parser only handles ``--help``/``--version``/
``--verbose`` before handing the remaining tokens over.
"""

from __future__ import annotations

from collections.abc import Sequence

from userdb.core.models import Arguments
from userdb.exceptions import ArgumentError


def parse_tokens(tokens: Sequence[str]) -> Arguments:
    """Pair up *tokens* as ``flag value`` and build :class:`Arguments`.

    * Empty values are dropped — the flag is treated as not given.
    * A repeated flag keeps its last value.

    Raises
    ------
    ArgumentError
        If the number of tokens is odd (a trailing flag has no value).
    """
    if len(tokens) % 2:
        raise ArgumentError(
            f"Flag {tokens[-1]!r} has no value",
            hint="Flags and values must alternate: <flag> <value> ...",
        )

    values: dict[str, str] = {}
    for flag, value in zip(tokens[::2], tokens[1::2]):
        if value:
            values[flag] = value
    return Arguments.from_mapping(values)
