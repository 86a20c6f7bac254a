"""Ordered, in-memory collection of notes persisted as one JSON document."""

from __future__ import annotations

import json
import threading
import warnings
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Iterator

from pydantic import TypeAdapter, ValidationError

from .conf import default_notebook_location
from .errors import (
    DocumentEncodeError,
    DocumentParseError,
    NoteParseError,
    RecoverableParseWarning,
    StorageError,
)
from .log import note_log
from .note import Note
from .storage import FileStorage, StorageBackend

_DOCUMENT = TypeAdapter(list[Any])


class LoadPolicy(StrEnum):
    """What ``Notebook.load`` does with an element that fails to parse."""

    SKIP = "skip"  # warn and continue
    FAIL = "fail"  # abort the whole load


@dataclass(eq=False)
class Notebook:
    """Ordered collection of notes saved to / loaded from a single resource.

    The document is a top-level JSON array, one object per note, in
    insertion order. ``location`` is resolved once, on the first save or
    load, through ``resolve_location`` unless given explicitly.

    Ids are not required to be unique: ``add`` accepts duplicates and
    ``delete`` removes every note carrying the id.
    """

    storage: StorageBackend = field(default_factory=FileStorage)
    location: str | None = None
    resolve_location: Callable[[], str | None] = default_notebook_location
    load_policy: LoadPolicy = LoadPolicy.SKIP
    last_warnings: list[RecoverableParseWarning] = field(
        default_factory=list, init=False, repr=False
    )
    _notes: list[Note] = field(default_factory=list, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    # -- Mutation --

    def add(self, note: Note) -> None:
        """Append ``note``. Does not save."""
        with self._lock:
            self._notes.append(note)

    def delete(self, note_id: str) -> int:
        """Remove every note with ``note_id``. Returns how many were removed."""
        with self._lock:
            before = len(self._notes)
            self._notes = [n for n in self._notes if n.id != note_id]
            return before - len(self._notes)

    # -- Collection access --

    @property
    def notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes)

    def find(self, note_id: str) -> list[Note]:
        with self._lock:
            return [n for n in self._notes if n.id == note_id]

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    # -- Document encoding --

    def to_json(self, indent: int = 2) -> bytes:
        """Serialize the whole collection to a UTF-8 JSON array.

        Raises ``DocumentEncodeError`` when a note holds text UTF-8 cannot
        represent (lone surrogates).
        """
        with self._lock:
            payload = [n.to_dict() for n in self._notes]
        text = json.dumps(payload, indent=indent, ensure_ascii=False)
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            note_log(f"Notebook encode failed: {exc.reason}")
            raise DocumentEncodeError(f"Notebook is not encodable as UTF-8: {exc.reason}") from exc

    def parse_json(self, data: bytes | str) -> tuple[list[Note], list[RecoverableParseWarning]]:
        """Parse a notebook document into notes, honouring ``load_policy``.

        Raises ``DocumentParseError`` if ``data`` is not a JSON array.
        Under ``LoadPolicy.FAIL`` the first bad element's ``NoteParseError``
        propagates; under ``LoadPolicy.SKIP`` it becomes a warning.
        """
        try:
            items = _DOCUMENT.validate_json(data)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
            raise DocumentParseError(f"Notebook document is not a JSON array: {reason}") from exc

        notes: list[Note] = []
        found: list[RecoverableParseWarning] = []
        for index, item in enumerate(items):
            try:
                notes.append(Note.from_dict(item))
            except NoteParseError as exc:
                if self.load_policy == LoadPolicy.FAIL:
                    note_log(f"Load aborted at index {index}: {exc}")
                    raise
                warning = RecoverableParseWarning(index, exc)
                note_log(str(warning))
                warnings.warn(warning, stacklevel=2)
                found.append(warning)
        return notes, found

    # -- Persistence --

    def save(self) -> None:
        """Write the whole collection to storage.

        Raises ``StorageError`` if no location resolves or the backend
        fails, and ``DocumentEncodeError`` if the notes cannot be encoded.
        The in-memory collection is never modified.
        """
        with self._lock:
            location = self._resolve_location()
            payload = self.to_json()
            self._storage_call("write", location, self.storage.write_bytes, location, payload)
            note_log(f"Saved {len(self._notes)} notes to {location}")

    def load(self) -> list[Note]:
        """Replace the in-memory collection with the stored one.

        A missing resource loads as an empty collection. On any raised
        error the in-memory collection is left as it was.
        """
        with self._lock:
            location = self._resolve_location()
            if not self._storage_call("check", location, self.storage.exists, location):
                note_log(f"No notebook at {location}, starting empty")
                self._notes = []
                self.last_warnings = []
                return []
            data = self._storage_call("read", location, self.storage.read_bytes, location)
            notes, found = self.parse_json(data)
            self._notes = notes
            self.last_warnings = found
            note_log(f"Loaded {len(notes)} notes from {location} ({len(found)} skipped)")
            return list(notes)

    # -- Internals --

    def _resolve_location(self) -> str:
        if self.location is None:
            self.location = self.resolve_location()
            if self.location is None:
                note_log("Notebook location could not be resolved")
                raise StorageError("No storage location available for the notebook")
            note_log(f"Notebook location: {self.location}")
        return self.location

    def _storage_call(self, action: str, location: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except OSError as exc:
            note_log(f"Storage {action} failed for {location}: {exc}")
            if isinstance(exc, StorageError):
                raise
            raise StorageError(f"Cannot {action} {location}: {exc}") from exc
