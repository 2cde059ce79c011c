"""A rotating shaft that is both a rotation sink and a source."""

from __future__ import annotations

from jackbox.component import Component, RotationSink
from jackbox.cylinder import Cylinder
from jackbox.graphics import Colour, Graphics, Point
from jackbox.rotation import RotationSource

SHAFT_DIAMETER = 10
SHAFT_LENGTH = 80
DEFAULT_POINT = Point(90, -185)

_SHAFT_COLOUR = Colour(220, 220, 220)
_SHAFT_LINE_COLOUR = Colour(100, 100, 100)
_SHAFT_LINE_WIDTH = 1
_SHAFT_NUM_LINES = 4

# Offsets from the shaft ends at which pulleys and cams attach.
_LEFT_CENTER_OFFSET = Point(5, 2)
_RIGHT_CENTER_OFFSET = Point(20, 2)


class Shaft(Component, RotationSink):
    """A shaft that turns with its source and drives its own sinks."""

    def __init__(
        self,
        diameter: int = SHAFT_DIAMETER,
        length: int = SHAFT_LENGTH,
        location: Point = DEFAULT_POINT,
    ) -> None:
        super().__init__(location)
        self.rotation = 0.0
        self.source = RotationSource()
        self.cylinder = Cylinder(colour=_SHAFT_COLOUR)
        self.cylinder.set_size(diameter, length)
        self.cylinder.set_lines(_SHAFT_LINE_COLOUR, _SHAFT_LINE_WIDTH, _SHAFT_NUM_LINES)
        self.left_center = Point(
            self.x + _LEFT_CENTER_OFFSET.x, self.y - _LEFT_CENTER_OFFSET.y
        )
        self.right_center = Point(
            self.x + (length - _RIGHT_CENTER_OFFSET.x), self.y - _RIGHT_CENTER_OFFSET.y
        )

    def draw_background(self, graphics: Graphics) -> None:
        self.cylinder.draw(graphics, self.x, self.y, self.rotation)

    def draw_foreground(self, graphics: Graphics) -> None:
        """The shaft has nothing in the foreground."""

    def update_rotation(self, rotation: float) -> None:
        self.rotation = rotation
        self.source.set_rotation(rotation)

    def reset(self) -> None:
        self.rotation = 0.0