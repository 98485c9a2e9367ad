from __future__ import annotations
import io
import logging
from typing import Iterator, Self, TextIO

from .section import Object, ensure_object, render_object

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">'
SVG_CLOSE = "</svg>"


class Document:
    """
    The root container: an ordered list of objects wrapped in the SVG envelope.

    Rendering never changes the document, so it can be rendered any number of
    times and added to afterwards.
    """

    def __init__(self) -> None:
        self.objects: list[Object] = []

    def add(self, *objects: Object) -> Self:
        """Adds objects in order and returns self for chaining."""
        for obj in objects:
            self.objects.append(ensure_object(obj).clone())

        return self

    def render(self, out: TextIO) -> None:
        """Writes the full document, envelope included, to a text sink."""
        logger.debug("Rendering document with %d objects", len(self.objects))

        out.write(XML_DECLARATION)
        out.write(SVG_OPEN)
        for obj in self.objects:
            out.write(render_object(obj))
        out.write(SVG_CLOSE)

    def _build_svg(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def _repr_svg_(self) -> str:
        """Enables automatic rendering in Jupyter/Quarto environments."""
        return self._build_svg()

    def __str__(self) -> str:
        return self._build_svg()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(self.objects)
