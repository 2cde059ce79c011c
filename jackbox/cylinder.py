"""A cylinder that shows its rotation with moving lines."""

from __future__ import annotations

import math
from dataclasses import dataclass

from jackbox.graphics import BLACK, TRANSPARENT, WHITE, Colour, Graphics


@dataclass
class Cylinder:
    """A rod drawn side-on, with lines that move as it turns."""

    diameter: int = 0
    length: int = 0
    colour: Colour = WHITE
    border_colour: Colour = BLACK
    line_colour: Colour = BLACK
    line_width: int = 1
    num_lines: int = 0
    offset: float = 0.0

    def set_size(self, diameter: float, length: float) -> None:
        self.diameter = int(diameter)
        self.length = int(length)

    def set_lines(self, colour: Colour, width: float, num: float) -> None:
        self.line_colour = colour
        self.line_width = int(width)
        self.num_lines = int(num)

    def draw(self, graphics: Graphics, x: float, y: float, rotation: float) -> None:
        """Draw with the left end centred at (x, y); rotation is in turns."""
        graphics.set_brush(self.colour)
        if self.border_colour != TRANSPARENT:
            graphics.set_pen(self.border_colour)
        else:
            graphics.set_pen(None)

        graphics.draw_rectangle(x, y - self.diameter / 2.0, self.length, self.diameter)

        angle = (rotation + self.offset) * math.pi * 2.0
        if self.num_lines <= 0:
            return

        graphics.set_pen(self.line_colour, self.line_width)
        step = math.pi * 2 / self.num_lines
        for _ in range(self.num_lines):
            if math.cos(angle) > 0:
                y2 = y - math.sin(angle) * (self.diameter - self.line_width) / 2
                graphics.stroke_line(x + 1, y2, x + self.length, y2)
            angle += step