"""Application flags, string conversion helpers and small numeric utilities."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterable, Sequence
from typing import Any

_FLOAT_PREFIX = re.compile(
    r"""
    \s*
    (
        [+-]?
        (?:
            inf(?:inity)?
          | nan
          | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        )
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class AppFlag(enum.IntFlag):
    """State bits kept by the application and its objects."""

    INIT = 0x1
    RUNNING = 0x2
    FULLSCREEN = 0x4
    VSYNC = 0x8
    LOST_DEVICE = 0x10
    DEVICE_ERROR = 0x20
    LEFT_MOUSE_DOWN = 0x40
    RIGHT_MOUSE_DOWN = 0x80
    PAUSED = 0x100
    SPHERICAL_CAMERA = 0x200


class FlagSet:
    """A mutable set of bit flags."""

    def __init__(self, flags: int = 0) -> None:
        self.flags = AppFlag(flags)

    def __repr__(self) -> str:
        return f"FlagSet({int(self.flags):#x})"

    def clear(self) -> None:
        """Remove every flag."""
        self.flags = AppFlag(0)

    def add(self, flags: int) -> None:
        """Set the given bits."""
        self.flags |= AppFlag(flags)

    def test(self, flags: int) -> bool:
        """Return True if any of the given bits is set."""
        return (self.flags & AppFlag(flags)) != 0

    def remove(self, flags: int) -> None:
        """Clear the given bits."""
        self.flags &= ~AppFlag(flags)


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def split_string(text: str, separator: str = " ") -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def strings_to_floats(strings: Iterable[str]) -> list[float]:
    """Parse the leading number of each string; unparsable strings give 0.0."""
    return [_leading_float(text) for text in strings]


def strings_to_ints(strings: Iterable[str]) -> list[int]:
    """Parse the leading integer of each string; unparsable strings give 0."""
    return [_leading_int(text) for text in strings]


def string_to_floats(text: str) -> list[float]:
    """Split on spaces and parse every piece as a float."""
    return strings_to_floats(split_string(text))


def string_to_ints(text: str) -> list[int]:
    """Split on spaces and parse every piece as an integer."""
    return strings_to_ints(split_string(text))


def lerp(x: float, y: float, t: float) -> float:
    """Linear interpolation between ``x`` and ``y``."""
    return x * (1.0 - t) + y * t


def format_matrix(m: Sequence[Sequence[Any]] | Any, count: int = 3) -> str:
    """Render the top-left ``count`` x ``count`` block, two decimals per entry."""
    return "".join(
        "".join(f"{m[row][column]:.2f}," for column in range(count)) + "\n"
        for row in range(count)
    )


def float_to_string(value: float, two_places: bool = False) -> str:
    """Format a float with six decimals, or two when ``two_places`` is set."""
    return f"{value:.2f}" if two_places else f"{value:f}"


def int_to_string(value: int) -> str:
    """Format an integer in decimal."""
    return f"{int(value)}"


def degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / math.pi)


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (math.pi / 180.0)