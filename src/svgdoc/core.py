from __future__ import annotations
import copy
from dataclasses import dataclass
from abc import ABC, abstractmethod
from typing import TextIO
import typing


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


def format_number(value: float) -> str:
    """
    Formats a number the way it appears in attribute values.

    Floats use their shortest round-trip text, with integral values written
    without a fractional part (1.0 -> "1", 12.1 -> "12.1").
    """
    if isinstance(value, int):
        return str(int(value))

    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


if typing.TYPE_CHECKING:
    from .section import SectionBuilder


class Shape(ABC):
    """Base class for all renderable SVG components."""

    @abstractmethod
    def _render(self) -> str:
        """Returns the SVG XML string representation of the shape."""
        pass

    def render(self, out: TextIO) -> None:
        """Writes the shape's markup to a text sink."""
        out.write(self._render())

    def __str__(self) -> str:
        return self._render()

    def __add__(self, other: Shape) -> SectionBuilder:
        """Enables the 'shape + shape' syntax to start a section."""
        from .section import SectionBuilder

        return SectionBuilder().add(self, other)

    def clone(self) -> typing.Self:
        """
        Returns a deep copy of the shape.
        Containers store clones so later edits to the original do not leak in.
        """
        return copy.deepcopy(self)
