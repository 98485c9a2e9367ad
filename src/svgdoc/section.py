from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, Self

from .base import Circle, Polyline, Rectangle, Text
from .core import Shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section(Shape):
    """
    An already-rendered fragment of markup.

    Sections are produced by `SectionBuilder.build()` and behave like any other
    object when added to a document or to another builder. Their markup is
    written out as-is, so nesting costs nothing at render time.
    """

    markup: str = ""

    def _render(self) -> str:
        return self.markup


type Object = Circle | Polyline | Text | Rectangle | Section


def render_object(obj: Object) -> str:
    """Returns the markup of any drawable object."""
    match obj:
        case Circle() | Polyline() | Text() | Rectangle() | Section():
            return obj._render()
        case _:
            raise TypeError(f"Unsupported object: {obj!r}")


def ensure_object(obj: object) -> Object:
    if not isinstance(obj, (Circle, Polyline, Text, Rectangle, Section)):
        raise TypeError(f"Unsupported object: {obj!r}")
    return obj


class SectionBuilder:
    """
    Collects objects and flattens them into a single `Section`.

    `build()` takes a snapshot: the builder keeps its objects afterwards and can
    be extended and built again.
    """

    def __init__(self, objects: list[Object] | None = None) -> None:
        self.objects: list[Object] = []

        if objects:
            self.add(*objects)

    def add(self, *objects: Object) -> Self:
        """Adds objects in order and returns self for chaining."""
        for obj in objects:
            self.objects.append(ensure_object(obj).clone())

        return self

    def build(self) -> Section:
        logger.debug("Building section from %d objects", len(self.objects))
        return Section("".join(render_object(obj) for obj in self.objects))

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(self.objects)
