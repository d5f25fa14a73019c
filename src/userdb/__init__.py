"""userdb — command-line manager for a JSON file of user records.

Loads the store, applies one operation (add, remove, list, findById)
and writes the store back when it changed.
"""

from userdb.version import __version__

__all__: list[str] = ["__version__"]
