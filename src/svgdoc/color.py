from __future__ import annotations
from dataclasses import dataclass

from .core import format_number


@dataclass(frozen=True)
class NoColor:
    """The absent color. Renders as the SVG keyword `none`."""

    def __str__(self) -> str:
        return "none"


NONE = NoColor()


@dataclass(frozen=True)
class Rgb:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __str__(self) -> str:
        return f"rgb({int(self.red)},{int(self.green)},{int(self.blue)})"


@dataclass(frozen=True)
class Rgba:
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: float = 1.0

    def __str__(self) -> str:
        return (
            f"rgba({int(self.red)},{int(self.green)},{int(self.blue)},"
            f"{format_number(self.alpha)})"
        )


# A plain string is a named color and is written verbatim.
type Color = NoColor | str | Rgb | Rgba


def render_color(color: Color) -> str:
    """Returns the canonical attribute text of a color."""
    match color:
        case NoColor() | Rgb() | Rgba():
            return str(color)
        case str():
            return color
        case _:
            raise TypeError(f"Unsupported color: {color!r}")
