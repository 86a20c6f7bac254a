"""Note importance levels."""

from __future__ import annotations

from enum import StrEnum

from .errors import ImportanceParseError


class Importance(StrEnum):
    IMPORTANT = "important"
    NORMAL = "normal"
    UNIMPORTANT = "unimportant"

    @classmethod
    def parse(cls, tag: str) -> Importance:
        """Return the member named by ``tag`` (case-insensitive, so ``"Normal"`` works)."""
        try:
            return cls(tag.lower())
        except ValueError:
            raise ImportanceParseError(tag) from None
