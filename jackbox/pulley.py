"""A pulley that turns with its source and can drive another pulley by a belt."""

from __future__ import annotations

from jackbox.component import Component, RotationSink
from jackbox.cylinder import Cylinder
from jackbox.graphics import BLACK, Colour, Graphics, Point
from jackbox.polygon import Polygon
from jackbox.rotation import RotationSource

_HUB_WIDTH = 3
_PULLEY_COLOUR = Colour(205, 250, 5)
_HUB_LINE_COLOUR = Colour(139, 168, 7)
_HUB_LINE_WIDTH = 4
_HUB_LINE_COUNT_DIVISOR = 6.0
_HUB_DISTANCE = 12
_BELT_WIDTH = 10
_BELT_X_OFFSET = 4


class Pulley(Component, RotationSink):
    """A pulley attached to a shaft; a belt can carry its rotation to another pulley."""

    def __init__(self, diameter: float, location: Point) -> None:
        super().__init__(location)
        self.rotation = 0.0
        self.source = RotationSource()
        self.diameter = int(diameter)
        self.hubs = (Cylinder(colour=_PULLEY_COLOUR), Cylinder(colour=_PULLEY_COLOUR))
        for hub in self.hubs:
            hub.set_size(diameter, _HUB_WIDTH)
            hub.set_lines(
                _HUB_LINE_COLOUR, _HUB_LINE_WIDTH, diameter / _HUB_LINE_COUNT_DIVISOR
            )
        self.belt: Polygon | None = None
        self.belt_pulley: Pulley | None = None

    @property
    def radius(self) -> int:
        """Radius in whole pixels, as used for belt geometry and speed ratios."""
        return self.diameter // 2

    def draw_background(self, graphics: Graphics) -> None:
        """The pulley has nothing in the background."""

    def draw_foreground(self, graphics: Graphics) -> None:
        first, second = self.hubs
        first.draw(graphics, self.x, self.y, self.rotation)
        second.draw(graphics, self.x + _HUB_DISTANCE, self.y, self.rotation)

        other = self.belt_pulley
        if other is None or self.belt is None:
            return
        belt_x = self.x + _HUB_DISTANCE // _BELT_X_OFFSET
        if self.y > other.y:
            self.belt.draw(graphics, belt_x, self.y + self.radius)
        else:
            self.belt.draw(graphics, belt_x, other.y + other.radius)

    def reset(self) -> None:
        self.rotation = 0.0

    def update_rotation(self, rotation: float) -> None:
        """Turn, drive this pulley's sinks and any belted pulley."""
        self.rotation = rotation
        self.source.set_rotation(rotation)
        if self.belt_pulley is not None:
            ratio = self.radius / self.belt_pulley.radius
            self.belt_pulley.update_rotation(rotation * ratio)

    def belt_to(self, pulley: Pulley) -> None:
        """Connect a belt from this pulley to another one, which it then drives."""
        self.belt_pulley = pulley
        height = int(abs(self.y - pulley.y) + self.radius + pulley.radius - 1)
        belt = Polygon()
        belt.rectangle(0, 0, _BELT_WIDTH, height)
        belt.set_colour(BLACK)
        self.belt = belt