"""RGB color value and its ``RRGGBB`` hex text form."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass

from .errors import ColorParseWarning
from .log import note_log

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]+)")


@dataclass(frozen=True)
class Rgb:
    """Immutable color with 0-255 integer channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Invalid {name} component: {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Invalid {name} component: {value}")

    @classmethod
    def from_int(cls, value: int) -> Rgb:
        """Unpack a 24-bit ``0xRRGGBB`` integer; higher bits are ignored."""
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
        )

    def to_int(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue


WHITE = Rgb(255, 255, 255)
BLACK = Rgb(0, 0, 0)


def encode_color(color: Rgb, prefix: str = "") -> str:
    """Render ``color`` as six upper-case hex digits, optionally prefixed (e.g. ``#``)."""
    return f"{prefix}{color.red:02X}{color.green:02X}{color.blue:02X}"


def decode_color(text: str) -> Rgb:
    """Parse ``RRGGBB`` or ``#RRGGBB`` text.

    Malformed or empty input decodes to black (integer 0), not to the
    white write-default. A ``ColorParseWarning`` is emitted in that case,
    and also when more than six digits are given and the value is masked
    to its low 24 bits.
    """
    match = _HEX_RE.fullmatch(text.strip()) if isinstance(text, str) else None
    if match is None:
        note_log(f"Color decode fallback to black: {text!r}")
        warnings.warn(
            ColorParseWarning(f"Malformed color {text!r}, using 000000"),
            stacklevel=2,
        )
        return Rgb.from_int(0)
    digits = match.group(1)
    if len(digits) > 6:
        note_log(f"Color truncated to 24 bits: {text!r}")
        warnings.warn(
            ColorParseWarning(f"Color {text!r} has more than 6 digits, keeping the low 24 bits"),
            stacklevel=2,
        )
    return Rgb.from_int(int(digits, 16))
