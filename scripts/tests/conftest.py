"""Pytest fixtures for note store tests."""

import pytest

from note_store import log


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send the note store log to a file in the test's tmp directory."""
    log_file = tmp_path / "logs" / "note-store.log"
    monkeypatch.setattr(log, "LOG_FILE", log_file)
    monkeypatch.setattr(log, "LOG_TO_STDERR", False)
    yield log_file


@pytest.fixture
def unwritable_log(tmp_path, monkeypatch):
    """Point the log at a path under a regular file so every write fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    log_file = blocker / "logs" / "note-store.log"
    monkeypatch.setattr(log, "LOG_FILE", log_file)
    yield log_file
