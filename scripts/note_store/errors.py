"""Error and warning types raised by the note store."""

from __future__ import annotations


class NoteStoreError(Exception):
    """Base class for every note store failure."""


class NoteParseError(NoteStoreError, ValueError):
    """A single serialized note could not be turned into a ``Note``."""


class NoteValidationError(NoteParseError):
    """A required field is missing or has the wrong type."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class ImportanceParseError(NoteParseError):
    """The ``importance`` value is not a known tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown importance tag: {tag!r}")
        self.tag = tag


class DocumentParseError(NoteStoreError, ValueError):
    """The notebook document is not a JSON array."""


class DocumentEncodeError(NoteStoreError, ValueError):
    """The notebook cannot be encoded as UTF-8 JSON (e.g. a lone surrogate in a note)."""


class StorageError(NoteStoreError, OSError):
    """Backend read/write failed, or no storage location could be resolved."""


class ColorParseWarning(UserWarning):
    """Color text was malformed and decoded to black."""


class RecoverableParseWarning(UserWarning):
    """One malformed element was skipped while loading a notebook."""

    def __init__(self, index: int, error: NoteParseError) -> None:
        super().__init__(f"Skipped note at index {index}: {error}")
        self.index = index
        self.error = error
