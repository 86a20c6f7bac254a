"""Personal note store: note records persisted as a single JSON document."""

from .color_codec import BLACK, WHITE, Rgb, decode_color, encode_color
from .errors import (
    ColorParseWarning,
    DocumentEncodeError,
    DocumentParseError,
    ImportanceParseError,
    NoteParseError,
    NoteStoreError,
    NoteValidationError,
    RecoverableParseWarning,
    StorageError,
)
from .importance import Importance
from .note import Note, NoteEntry
from .notebook import LoadPolicy, Notebook
from .storage import FileStorage, MemoryStorage, StorageBackend
