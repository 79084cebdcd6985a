"""
CSS declaration values.
This module defines the value variants a declaration can hold: keywords, lengths and colors.
"""

from enum import Enum
from typing import Any


class Unit(Enum):
    """Length units. Only pixels are modeled."""
    PX = "px"


class Color:
    """An RGBA color with 8-bit channels."""

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b, self.a))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


class Value:
    """Base class for declaration values."""

    def to_px(self) -> float:
        """
        Return the size of a length in px.

        Returns:
            The pixel value for a px length, 0.0 for anything else
        """
        return 0.0


class Keyword(Value):
    """An identifier value such as `block` or `red`."""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Keyword):
            return NotImplemented
        return self.keyword == other.keyword

    def __hash__(self) -> int:
        return hash(('keyword', self.keyword))

    def __repr__(self) -> str:
        return f"Keyword({self.keyword!r})"


class Length(Value):
    """A number with a unit, e.g. `10px`."""

    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit

    def to_px(self) -> float:
        if self.unit == Unit.PX:
            return self.value
        return 0.0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit

    def __hash__(self) -> int:
        return hash(('length', self.value, self.unit))

    def __repr__(self) -> str:
        return f"Length({self.value!r}, {self.unit.name})"


class ColorValue(Value):
    """A color literal, e.g. `#ff0000`."""

    def __init__(self, color: Color):
        self.color = color

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.color == other.color

    def __hash__(self) -> int:
        return hash(('color', self.color))

    def __repr__(self) -> str:
        return f"ColorValue({self.color!r})"
