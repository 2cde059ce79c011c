"""Geometry values and a recording 2-D graphics context."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

PI = math.pi
PI2 = PI * 2

_DEFAULT_FONT_SIZE = 10
_CHAR_WIDTH_RATIO = 0.6


@dataclass(frozen=True)
class Point:
    """A location or offset in pixels."""

    x: float = 0
    y: float = 0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


WHITE = Colour(255, 255, 255)
BLACK = Colour(0, 0, 0)
RED = Colour(255, 0, 0)
TRANSPARENT = Colour(0, 0, 0, 0)


@dataclass(frozen=True)
class Transform:
    """An affine transform: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def translated(self, dx: float, dy: float) -> Transform:
        return replace(
            self,
            e=self.e + self.a * dx + self.c * dy,
            f=self.f + self.b * dx + self.d * dy,
        )

    def scaled(self, sx: float, sy: float) -> Transform:
        return replace(self, a=self.a * sx, b=self.b * sx, c=self.c * sy, d=self.d * sy)

    def rotated(self, angle: float) -> Transform:
        cos, sin = math.cos(angle), math.sin(angle)
        return replace(
            self,
            a=self.a * cos + self.c * sin,
            b=self.b * cos + self.d * sin,
            c=-self.a * sin + self.c * cos,
            d=-self.b * sin + self.d * cos,
        )


@dataclass
class Path:
    """A sequence of path segments to fill or stroke."""

    segments: list[tuple[str, tuple[float, ...]]] = field(default_factory=list)
    closed: bool = False

    @property
    def empty(self) -> bool:
        return not self.segments

    def move_to_point(self, x: float, y: float) -> None:
        self.segments.append(("move", (x, y)))

    def add_line_to_point(self, x: float, y: float) -> None:
        self.segments.append(("line", (x, y)))

    def add_curve_to_point(
        self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float
    ) -> None:
        self.segments.append(("curve", (cx1, cy1, cx2, cy2, x, y)))

    def close_subpath(self) -> None:
        self.closed = True


@dataclass(frozen=True)
class Pen:
    """Stroke settings."""

    colour: Colour
    width: float = 1


@dataclass(frozen=True)
class Call:
    """One drawing operation together with the state it was issued in."""

    name: str
    args: tuple[Any, ...]
    transform: Transform
    brush: Colour | None
    pen: Pen | None
    opacity: float


@dataclass(frozen=True)
class _State:
    transform: Transform
    brush: Colour | None
    pen: Pen | None
    font: tuple[float, Colour] | None


class Graphics:
    """A graphics context that records every drawing operation issued to it."""

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.transform = Transform()
        self.brush: Colour | None = None
        self.pen: Pen | None = None
        self.font: tuple[float, Colour] | None = None
        self._states: list[_State] = []
        self._layers: list[float] = []

    @property
    def opacity(self) -> float:
        return math.prod(self._layers)

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(
            Call(name, args, self.transform, self.brush, self.pen, self.opacity)
        )

    def push_state(self) -> None:
        self._states.append(_State(self.transform, self.brush, self.pen, self.font))

    def pop_state(self) -> None:
        if not self._states:
            raise RuntimeError("pop_state called without a matching push_state")
        state = self._states.pop()
        self.transform = state.transform
        self.brush = state.brush
        self.pen = state.pen
        self.font = state.font

    def translate(self, dx: float, dy: float) -> None:
        self.transform = self.transform.translated(dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self.transform = self.transform.scaled(sx, sy)

    def rotate(self, angle: float) -> None:
        """Rotate by an angle in radians."""
        self.transform = self.transform.rotated(angle)

    def set_brush(self, colour: Colour | None) -> None:
        self.brush = colour

    def set_pen(self, colour: Colour | None, width: float = 1) -> None:
        """Set the stroke pen; a colour of None means no stroke."""
        self.pen = None if colour is None else Pen(colour, width)

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("stroke_line", x1, y1, x2, y2)

    def draw_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self._record("draw_rectangle", x, y, width, height)

    def draw_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        self._record("draw_ellipse", x, y, width, height)

    def fill_path(self, path: Path) -> None:
        self._record("fill_path", path)

    def stroke_path(self, path: Path) -> None:
        self._record("stroke_path", path)

    def draw_image(
        self, image: Any, x: float, y: float, width: float, height: float
    ) -> None:
        self._record("draw_image", image, x, y, width, height)

    def clip(self, points: list[Point]) -> None:
        self._record("clip", tuple(points))

    def set_font(self, size: float, colour: Colour) -> None:
        self.font = (size, colour)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._record("draw_text", text, x, y)

    def get_text_extent(self, text: str) -> tuple[float, float]:
        """Return an estimated (width, height) of text in the current font."""
        size = self.font[0] if self.font else _DEFAULT_FONT_SIZE
        return (len(text) * size * _CHAR_WIDTH_RATIO, float(size))

    def begin_layer(self, opacity: float) -> None:
        if not 0 <= opacity <= 1:
            raise ValueError(f"layer opacity must be in [0, 1], got {opacity}")
        self._layers.append(opacity)

    def end_layer(self) -> None:
        if not self._layers:
            raise RuntimeError("end_layer called without a matching begin_layer")
        self._layers.pop()

    def calls_named(self, name: str) -> list[Call]:
        """Return the recorded calls with the given operation name, in order."""
        return [call for call in self.calls if call.name == name]