"""Polygons filled with a colour or textured with an image."""

from __future__ import annotations

import math
import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from PIL import Image, UnidentifiedImageError

from jackbox.graphics import BLACK, RED, Colour, Graphics, Path, Point

DEFAULT_CIRCLE_STEPS = 32

_TOO_FEW_POINTS = (
    "You must specify a shape when using Polygon. "
    "At least three points must be provided."
)


class PolygonError(RuntimeError):
    """Raised when a polygon is used incorrectly."""


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def union(self, point: Point) -> None:
        """Grow the rectangle so that it contains point."""
        left = min(self.left, point.x)
        top = min(self.top, point.y)
        right = max(self.right, point.x)
        bottom = max(self.bottom, point.y)
        self.x, self.y = left, top
        self.width, self.height = right - left, bottom - top


class _Mode(Enum):
    UNSET = auto()
    COLOUR = auto()
    IMAGE = auto()


class Polygon:
    """A shape made of points, drawn as a solid colour or a clipped image."""

    def __init__(self) -> None:
        self._points: list[Point] = []
        self.is_circle = False
        self.brush = BLACK
        self._mode = _Mode.UNSET
        self.image: Image.Image | None = None
        self._path: Path | None = None
        self._clip_top_left = Point()
        self._clip_size = Point()
        self._clip_points: list[Point] = []
        self._clip_dirty = True
        self._has_drawn = False
        self._opacity = 1.0
        self.inverted_y = False

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, opacity: float) -> None:
        if opacity == self._opacity:
            return
        if not 0 <= opacity <= 1:
            raise PolygonError("Polygon opacity must be in the range 0 to 1.")
        self._opacity = opacity

    @property
    def radius(self) -> float:
        """The radius, meaningful when the polygon is a circle."""
        if not self._points:
            raise PolygonError("The polygon has no points.")
        return self._points[0].x

    def _require_image(self, message: str) -> Image.Image:
        if self.image is None:
            raise PolygonError(message)
        return self.image

    @property
    def image_width(self) -> int:
        return self._require_image(
            "You must specify an image before you can get its width."
        ).width

    @property
    def image_height(self) -> int:
        return self._require_image(
            "You must specify an image before you can get its height."
        ).height

    def add_point(self, x: float, y: float) -> None:
        if self._has_drawn:
            raise PolygonError(
                "You cannot add points to the polygon after it has been drawn."
            )
        self._points.append(Point(x, y))

    def rectangle(
        self, x: float, y: float, width: float = 0, height: float = 0
    ) -> None:
        """Add a rectangle with its bottom-left corner at (x, y).

        A missing width or height is taken from the image, keeping its
        aspect ratio.
        """
        if width <= 0:
            width = self._require_image(
                "You must select an image before calling rectangle "
                "with no specified width."
            ).width
        if height <= 0:
            image = self._require_image(
                "You must select an image before calling rectangle "
                "with no specified height."
            )
            height = int(width * image.height / image.width)

        if self.inverted_y:
            corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        else:
            corners = [(x, y), (x, y - height), (x + width, y - height), (x + width, y)]
        for cx, cy in corners:
            self.add_point(cx, cy)

    def bottom_centered_rectangle(self, width: float = 0, height: float = 0) -> None:
        """Add a rectangle whose bottom centre is at (0, 0)."""
        if width == 0:
            width = self._require_image(
                "You must select an image before calling "
                "bottom_centered_rectangle with no width."
            ).width
        elif height == 0:
            image = self._require_image(
                "You must select an image before calling "
                "bottom_centered_rectangle with no height."
            )
            height = width * image.height / image.width
        self.rectangle(-width / 2, 0, width, height)

    def centered_square(self, size: float = 0) -> None:
        """Add a square centred on (0, 0)."""
        if size == 0:
            size = self._require_image(
                "You must select an image before calling centered_square "
                "with no size."
            ).width
        if self.inverted_y:
            self.rectangle(-size / 2, -size / 2, size, size)
        else:
            self.rectangle(-size / 2, size / 2, size, size)

    def circle(self, radius: float, steps: int = DEFAULT_CIRCLE_STEPS) -> None:
        """Add a circle of points centred on (0, 0)."""
        self.is_circle = True
        for i in range(steps):
            angle = i / steps * math.pi * 2
            self.add_point(radius * math.cos(angle), radius * math.sin(angle))

    def set_colour(self, colour: Colour) -> None:
        """Fill with a solid colour; images are no longer used."""
        self.brush = colour
        self._mode = _Mode.COLOUR

    def set_image(self, filename: Union[str, os.PathLike[str]]) -> None:
        """Load an image to texture the polygon with."""
        try:
            with Image.open(filename) as source:
                image = source.convert("RGBA")
        except (OSError, UnidentifiedImageError) as error:
            self.image = None
            raise PolygonError(f"Unable to load '{os.fspath(filename)}'") from error
        self.image = image
        self._mode = _Mode.IMAGE
        self._clip_dirty = True

    def draw(
        self, graphics: Graphics, x: float, y: float, rotation: float = 0
    ) -> None:
        """Draw at (x, y), rotated by rotation turns."""
        if len(self._points) < 3:
            raise PolygonError(_TOO_FEW_POINTS)
        if self._mode is _Mode.UNSET:
            raise PolygonError(
                "You must specify either a colour or an image when using Polygon."
            )
        self._has_drawn = True

        layered = self._opacity < 1
        if layered:
            graphics.begin_layer(self._opacity)
        try:
            if self._mode is _Mode.COLOUR:
                self._draw_colour(graphics, x, y, rotation)
            else:
                self._draw_image(graphics, x, y, rotation)
        finally:
            if layered:
                graphics.end_layer()

    def _draw_colour(
        self, graphics: Graphics, x: float, y: float, rotation: float
    ) -> None:
        if self._path is None:
            first, *rest = self._points
            path = Path()
            path.move_to_point(first.x, first.y)
            for point in rest:
                path.add_line_to_point(point.x, point.y)
            path.close_subpath()
            self._path = path

        graphics.push_state()
        graphics.translate(x, y)
        graphics.rotate(rotation * math.pi * 2)
        graphics.set_brush(self.brush)
        graphics.fill_path(self._path)
        graphics.pop_state()

    def _update_clip_region(self) -> None:
        left = min(point.x for point in self._points)
        top = min(point.y for point in self._points)
        right = max(point.x for point in self._points)
        bottom = max(point.y for point in self._points)
        self._clip_top_left = Point(left, top)
        self._clip_size = Point(right - left, bottom - top)
        self._clip_points = [
            Point(int(point.x - left + 0.5), int(point.y - top + 0.5))
            for point in self._points
        ]
        self._clip_dirty = False

    def _draw_image(
        self, graphics: Graphics, x: float, y: float, rotation: float
    ) -> None:
        if self._clip_dirty:
            self._update_clip_region()
        width, height = self._clip_size.x, self._clip_size.y

        graphics.push_state()
        graphics.translate(x, y)
        graphics.rotate(rotation * math.pi * 2)
        graphics.translate(self._clip_top_left.x, self._clip_top_left.y)
        graphics.clip(self._clip_points)
        if self.inverted_y:
            graphics.scale(1, -1)
            graphics.draw_image(self.image, 0, -height, width, height)
        else:
            graphics.draw_image(self.image, 0, 0, width, height)
        graphics.pop_state()

    def draw_crosshair(
        self,
        graphics: Graphics,
        x: float,
        y: float,
        size: int = 10,
        colour: Colour = RED,
    ) -> None:
        """Draw a crosshair centred on (x, y)."""
        half = int(size / 2)
        graphics.set_pen(colour)
        graphics.stroke_line(x - half, y, x + half, y)
        graphics.stroke_line(x, y - half, x, y + half)

    def average_luminance(self, x: int, y: int, wid: int, hit: int) -> float:
        """Average luminance (0 black to 1 white) of a block of image pixels."""
        if self._mode is not _Mode.IMAGE or self.image is None:
            raise PolygonError("average_luminance requires an image polygon.")
        image = self.image
        total = 0.0
        count = 0
        for i in range(max(x, 0), min(x + wid, image.width)):
            for j in range(max(y, 0), min(y + hit, image.height)):
                red, green, blue, *_ = image.getpixel((i, j))
                total += red + green + blue
                count += 3
        if count == 0:
            return 0.0
        return (total / count) / 255.0

    def center(self) -> Point:
        """The average of all points, or the origin for a circle."""
        if len(self._points) < 3:
            raise PolygonError(_TOO_FEW_POINTS)
        if self.is_circle:
            return Point(0, 0)
        count = len(self._points)
        return Point(
            sum(point.x for point in self._points) / count,
            sum(point.y for point in self._points) / count,
        )

    def bounding_box(self) -> Rect:
        """A rectangle that encloses the whole polygon."""
        if len(self._points) < 3:
            raise PolygonError(_TOO_FEW_POINTS)
        if self.is_circle:
            radius = self.radius
            return Rect(-radius, -radius, radius * 2, radius * 2)
        first = self._points[0]
        box = Rect(first.x, first.y, 0, 0)
        for point in self._points:
            box.union(point)
        return box