"""Note store - central path configuration.

Nothing here touches the filesystem or the home directory at import time;
paths are resolved when a caller asks for them.
"""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "note-store"

NOTE_STORE_HOME_ENV = "NOTE_STORE_HOME"
NOTE_STORE_LOG_ENV = "NOTE_STORE_LOG"
NOTEBOOK_FILE_NAME = "notes.json"


class DefaultPathResolver:
    def home(self) -> Path | None:
        try:
            return Path.home()
        except RuntimeError:
            return None

    def env(self, key: str) -> str | None:
        return os.environ.get(key)


def notes_home(resolver: DefaultPathResolver | None = None) -> Path | None:
    """Directory holding the notebook: $NOTE_STORE_HOME, else ~/.notes."""
    resolver = resolver or DefaultPathResolver()
    env_override = resolver.env(NOTE_STORE_HOME_ENV)
    if env_override:
        return Path(env_override)
    home = resolver.home()
    if home is None:
        return None
    return home / ".notes"


def default_notebook_location(resolver: DefaultPathResolver | None = None) -> str | None:
    """Return the notebook file path, or None when it cannot be determined.

    Path: $NOTE_STORE_HOME/notes.json, else ~/.notes/notes.json
    """
    home = notes_home(resolver)
    if home is None:
        return None
    return str(home / NOTEBOOK_FILE_NAME)


def log_file(resolver: DefaultPathResolver | None = None) -> Path | None:
    """Log file path from $NOTE_STORE_LOG; None (logging off) when unset."""
    resolver = resolver or DefaultPathResolver()
    value = resolver.env(NOTE_STORE_LOG_ENV)
    return Path(value) if value else None
