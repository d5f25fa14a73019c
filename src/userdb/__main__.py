"""Allow ``python -m userdb`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m userdb`` behaves identically to the ``userdb`` console
script.
"""

from __future__ import annotations

from userdb.cli.app import cli

if __name__ == "__main__":
    cli()
