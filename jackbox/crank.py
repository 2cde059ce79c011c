"""A hand crank that starts the machine turning."""

from __future__ import annotations

import math

from jackbox.component import Component
from jackbox.cylinder import Cylinder
from jackbox.graphics import Colour, Graphics, Point
from jackbox.polygon import Polygon
from jackbox.rotation import RotationSource

_CRANK_WIDTH = 10
_CRANK_LENGTH = 50
_HANDLE_DIAMETER = 7
_HANDLE_LENGTH = 40
_CRANK_COLOUR = Colour(220, 220, 220)
_HANDLE_LINE_COLOUR = Colour(100, 100, 100)
_HANDLE_X_OFFSET = 150
_HANDLE_Y_OFFSET = -190
_CRANK_Y_OFFSET = -170
_CRANK_X_OFFSET = 5
_NUM_LINES = 4
_SPEED = 5.0
# Slows the first driven shaft relative to the crank.
_SPEED_MULTIPLIER = 0.2


class Crank(Component):
    """A crank whose handle turns over time and drives a rotation source."""

    def __init__(self, location: Point = Point(0, 0)) -> None:
        super().__init__(location)
        self.rotation = 0.0
        self.speed = _SPEED
        self.source = RotationSource()

        self.handle = Cylinder(colour=_CRANK_COLOUR)
        self.handle.set_size(_HANDLE_DIAMETER, _HANDLE_LENGTH)
        self.handle.set_lines(_HANDLE_LINE_COLOUR, 1, _NUM_LINES)

        self.arm = Polygon()
        self.arm.rectangle(
            self.x + _HANDLE_X_OFFSET, 0, _CRANK_WIDTH, _CRANK_LENGTH // 2
        )
        self.arm.set_colour(_CRANK_COLOUR)

    def draw_background(self, graphics: Graphics) -> None:
        """The crank has nothing in the background."""

    def draw_foreground(self, graphics: Graphics) -> None:
        handle_y = self.y + math.cos(self.rotation) * _CRANK_LENGTH
        self.handle.draw(
            graphics, _HANDLE_X_OFFSET, _HANDLE_Y_OFFSET + handle_y, self.rotation
        )

        scaler = 1.0 + (-handle_y) / (_CRANK_LENGTH // 2)
        self.arm.draw(graphics, _CRANK_X_OFFSET, _CRANK_Y_OFFSET)

        # A small overlap so the moving arm reaches over the handle.
        overlap = -0.6 if scaler < 0 else 0.3
        graphics.push_state()
        graphics.translate(0, _CRANK_Y_OFFSET)
        graphics.scale(1, scaler + overlap)
        self.arm.draw(graphics, _CRANK_X_OFFSET, 0)
        graphics.pop_state()

    def reset(self) -> None:
        self.rotation = 0.0

    def advance(self, increase: float) -> None:
        super().advance(increase)
        self.rotation += increase * self.speed
        self.source.set_rotation(self.rotation * _SPEED_MULTIPLIER)