"""
Note store - Logging Module
Best-effort session log. Off unless $NOTE_STORE_LOG names a log file (or
LOG_TO_STDERR is set); a log that cannot be written never fails a
notebook operation.
"""
import os
import sys
from datetime import datetime
from pathlib import Path

from .conf import log_file

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG_FILE: Path | None = log_file()
LOG_TO_STDERR = False  # Mirror log lines to stderr
session_started = False

# =============================================================================
# LOGGING
# =============================================================================

def note_log(message: str) -> None:
    """Append a timestamped line to LOG_FILE and/or stderr, ignoring I/O failures."""
    global session_started
    if LOG_FILE is None and not LOG_TO_STDERR:
        return
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    lines = f"[{timestamp}] {message}\n"
    if not session_started:
        session_started = True
        lines = f"[{timestamp}] --- note-store session pid={os.getpid()} ---\n" + lines
    if LOG_TO_STDERR:
        sys.stderr.write(lines)
    if LOG_FILE is None:
        return
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(lines)
    except OSError:
        pass  # logging is best-effort
