from __future__ import annotations
from typing import Self

from .color import NONE, Color, render_color
from .core import Point, Shape, format_number


class Visual(Shape):
    """
    Style attributes shared by every drawable shape.

    The stroke line cap and line join are optional: when left as None they are
    omitted from the markup entirely.
    """

    def __init__(
        self,
        fill: Color = NONE,
        stroke: Color = NONE,
        stroke_width: float = 1.0,
        linecap: str | None = None,
        linejoin: str | None = None,
    ) -> None:
        super().__init__()
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.linecap = linecap
        self.linejoin = linejoin

    def set_fill_color(self, color: Color) -> Self:
        self.fill = color
        return self

    def set_stroke_color(self, color: Color) -> Self:
        self.stroke = color
        return self

    def set_stroke_width(self, width: float) -> Self:
        self.stroke_width = width
        return self

    def set_stroke_line_cap(self, linecap: str) -> Self:
        self.linecap = linecap
        return self

    def set_stroke_line_join(self, linejoin: str) -> Self:
        self.linejoin = linejoin
        return self

    def _render_style(self) -> str:
        attrs = (
            f'fill="{render_color(self.fill)}" '
            f'stroke="{render_color(self.stroke)}" '
            f'stroke-width="{format_number(self.stroke_width)}"'
        )
        if self.linecap is not None:
            attrs += f' stroke-linecap="{self.linecap}"'
        if self.linejoin is not None:
            attrs += f' stroke-linejoin="{self.linejoin}"'
        return attrs


class Circle(Visual):
    """A circle given by its center and radius."""

    def __init__(
        self,
        center: Point = Point(),
        radius: float = 1.0,
        **style,
    ) -> None:
        super().__init__(**style)
        self.center = center
        self.radius = radius

    def set_center(self, center: Point) -> Self:
        self.center = center
        return self

    def set_radius(self, radius: float) -> Self:
        self.radius = radius
        return self

    def _render(self) -> str:
        return (
            f"<circle {self._render_style()} "
            f'cx="{format_number(self.center.x)}" cy="{format_number(self.center.y)}" '
            f'r="{format_number(self.radius)}"/>'
        )


class Polyline(Visual):
    """A sequence of connected lines."""

    def __init__(self, points: list[Point] | None = None, **style) -> None:
        super().__init__(**style)
        self.points: list[Point] = list(points or [])

    def add_point(self, p: Point) -> Self:
        self.points.append(p)
        return self

    def extend(self, points: list[Point]) -> Self:
        self.points.extend(points)
        return self

    def _render(self) -> str:
        points = " ".join(
            f"{format_number(p.x)},{format_number(p.y)}" for p in self.points
        )
        return f'<polyline {self._render_style()} points="{points}"/>'


class Text(Visual):
    """
    Text primitive anchored at `point` and shifted by `offset`.

    The body is written as given, so markup characters in it are not escaped.
    """

    def __init__(
        self,
        data: str = "",
        point: Point = Point(),
        offset: Point = Point(),
        font_size: int = 1,
        font_family: str | None = None,
        font_weight: str | None = None,
        **style,
    ) -> None:
        super().__init__(**style)
        self.data = data
        self.point = point
        self.offset = offset
        self.font_size = font_size
        self.font_family = font_family
        self.font_weight = font_weight

    def set_point(self, point: Point) -> Self:
        self.point = point
        return self

    def set_offset(self, offset: Point) -> Self:
        self.offset = offset
        return self

    def set_font_size(self, size: int) -> Self:
        self.font_size = size
        return self

    def set_font_family(self, family: str) -> Self:
        self.font_family = family
        return self

    def set_font_weight(self, weight: str) -> Self:
        self.font_weight = weight
        return self

    def set_data(self, data: str) -> Self:
        self.data = data
        return self

    def _render(self) -> str:
        font = f'font-size="{int(self.font_size)}"'
        if self.font_family is not None:
            font += f' font-family="{self.font_family}"'
        if self.font_weight is not None:
            font += f' font-weight="{self.font_weight}"'

        return (
            f"<text {self._render_style()} "
            f'x="{format_number(self.point.x)}" y="{format_number(self.point.y)}" '
            f'dx="{format_number(self.offset.x)}" dy="{format_number(self.offset.y)}" '
            f"{font}>{self.data}</text>"
        )


class Rectangle(Visual):
    """An axis-aligned rectangle with `point` as its top-left corner."""

    def __init__(
        self,
        point: Point = Point(),
        width: float = 0,
        height: float = 0,
        **style,
    ) -> None:
        super().__init__(**style)
        self.point = point
        self.width = width
        self.height = height

    def set_point(self, point: Point) -> Self:
        self.point = point
        return self

    def set_width(self, width: float) -> Self:
        self.width = width
        return self

    def set_height(self, height: float) -> Self:
        self.height = height
        return self

    def _render(self) -> str:
        # Geometry goes before style here, unlike the other shapes.
        return (
            f'<rect x="{format_number(self.point.x)}" y="{format_number(self.point.y)}" '
            f'width="{format_number(self.width)}" height="{format_number(self.height)}" '
            f"{self._render_style()} />"
        )
