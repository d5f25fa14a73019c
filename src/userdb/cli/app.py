"""CLI application entry point for userdb.

This module is the **sole error boundary** for the entire application.
It catches :class:`~userdb.exceptions.UserDbError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  dispatcher and the infrastructure storage backend.
* Operation results are the only thing written to stdout; diagnostics,
  logs and errors go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys

from userdb.cli import exit_codes
from userdb.cli.arguments import parse_tokens
from userdb.cli.console import console, escape
from userdb.cli.logging_setup import configure_logging
from userdb.core.dispatcher import OPERATIONS, CommandDispatcher
from userdb.exceptions import UserDbError
from userdb.infra.json_storage import JsonFileStorage
from userdb.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only process-level switches are options; everything after them is
    handed to :func:`~userdb.cli.arguments.parse_tokens` untouched.
    """
    parser = argparse.ArgumentParser(
        prog="userdb",
        description="Manage user records kept in a JSON file.",
        epilog=(
            "example: userdb fileName users.json operation add "
            "item '{\"id\":\"1\",\"email\":\"a@b.com\",\"age\":30}'"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help=(
            "Alternating flag/value tokens: fileName <path> operation "
            f"<{'|'.join(OPERATIONS)}> [item <json>] [id <id>]"
        ),
    )
    return parser


def _emit(output: str) -> None:
    """Write an operation result to stdout, newline-terminated."""
    if output:
        sys.stdout.write(output + "\n")
        sys.stdout.flush()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the userdb CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if not args.tokens:
        parser.print_help()
        return exit_codes.SUCCESS

    arguments = parse_tokens(args.tokens)
    logger.debug("Parsed arguments: %s", arguments)

    dispatcher = CommandDispatcher(JsonFileStorage())
    output = io.StringIO()
    try:
        dispatcher.perform(arguments, output)
    finally:
        # Informational text written before a fatal error is still shown.
        _emit(output.getvalue())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UserDbError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
