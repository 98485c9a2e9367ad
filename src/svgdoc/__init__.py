from .core import Shape, Point
from .color import Color, NoColor, NONE, Rgb, Rgba, render_color
from .base import (
    Visual,
    Circle,
    Polyline,
    Text,
    Rectangle,
)
from .section import Object, Section, SectionBuilder, render_object
from .document import Document

__version__ = "0.1.0"
