"""Note value object and its serialization contract.

A note serializes to a flat dict with ``title``, ``content`` and ``id``.
``importance`` and ``color`` are written only when they differ from their
defaults, and read back as the defaults when absent.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .color_codec import WHITE, Rgb, decode_color, encode_color
from .errors import NoteValidationError
from .importance import Importance


class NoteEntry(BaseModel):
    """Wire shape of one serialized note. Strict: no type coercion."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    title: str
    content: str
    # ``uid`` is the key older documents used.
    id: str = Field(validation_alias=AliasChoices("id", "uid"))
    importance: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class Note:
    """One immutable note record."""

    title: str
    content: str
    importance: Importance = Importance.NORMAL
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    color: Rgb = WHITE

    def replace(self, **changes: Any) -> Note:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    # -- Serialization --

    def to_dict(
        self,
        default_importance: Importance = Importance.NORMAL,
        default_color: Rgb = WHITE,
    ) -> dict:
        """Serialize to a plain dict, omitting fields equal to their defaults."""
        d: dict = {"title": self.title, "content": self.content, "id": self.id}
        if self.importance != default_importance:
            d["importance"] = self.importance.value
        if self.color != default_color:
            d["color"] = encode_color(self.color)
        return d

    @classmethod
    def from_dict(
        cls,
        data: Any,
        default_importance: Importance = Importance.NORMAL,
        default_color: Rgb = WHITE,
    ) -> Note:
        """Deserialize from a plain dict.

        Raises ``NoteValidationError`` when ``title``, ``content`` or ``id``
        is missing or not a string, and ``ImportanceParseError`` for an
        unknown importance tag. A malformed color decodes to black with a
        ``ColorParseWarning``.
        """
        if not isinstance(data, Mapping):
            raise NoteValidationError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        try:
            entry = NoteEntry.model_validate(dict(data))
        except ValidationError as exc:
            bad = tuple(
                dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            )
            raise NoteValidationError(
                f"Invalid note fields: {', '.join(bad)}", fields=bad
            ) from exc

        importance = (
            Importance.parse(entry.importance)
            if entry.importance is not None
            else default_importance
        )
        color = decode_color(entry.color) if entry.color is not None else default_color
        return cls(
            title=entry.title,
            content=entry.content,
            importance=importance,
            id=entry.id,
            color=color,
        )
