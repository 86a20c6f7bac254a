"""Byte-level storage backends for the notebook document."""

from __future__ import annotations

import os
import uuid
from abc import ABC, abstractmethod
from pathlib import Path

from .errors import StorageError


class StorageBackend(ABC):
    """Reads and writes the raw bytes of one named resource."""

    @abstractmethod
    def exists(self, location: str) -> bool: ...

    @abstractmethod
    def read_bytes(self, location: str) -> bytes: ...

    @abstractmethod
    def write_bytes(self, location: str, data: bytes) -> None: ...


class FileStorage(StorageBackend):
    """Filesystem backend; ``location`` is a file path."""

    def exists(self, location: str) -> bool:
        return Path(location).is_file()

    def read_bytes(self, location: str) -> bytes:
        try:
            with open(location, "rb") as fh:
                return fh.read()
        except OSError as exc:
            raise StorageError(f"Cannot read {location}: {exc}") from exc

    def write_bytes(self, location: str, data: bytes) -> None:
        """Atomic write: temp file in the same directory, fsync, then replace."""
        path = Path(location)
        tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            tmp_path.replace(path)
        except OSError as exc:
            raise StorageError(f"Cannot write {location}: {exc}") from exc
        finally:
            if tmp_path.exists():
                tmp_path.unlink()


class MemoryStorage(StorageBackend):
    """In-memory backend keyed by location."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})

    def exists(self, location: str) -> bool:
        return location in self.files

    def read_bytes(self, location: str) -> bytes:
        try:
            return self.files[location]
        except KeyError:
            raise StorageError(f"No such resource: {location}") from None

    def write_bytes(self, location: str, data: bytes) -> None:
        self.files[location] = bytes(data)
