"""Stand-in machine drawings for laying out a program before a real machine exists."""

from __future__ import annotations

import math

from jackbox.graphics import BLACK, TRANSPARENT, WHITE, Colour, Graphics, Point
from jackbox.machine_system import MachineSystemInterface

_STANDIN_WIDTH = 300
_STANDIN_HEIGHT = 200
_FRAME_COLOUR = Colour(139, 69, 19)
_GEAR_COLOUR = Colour(0, 128, 0)
_COORD_FONT_SIZE = 10
_LINE_SIZE = 18
_LINE_SPACING = 22
_OUTER_RADIUS = 90
_INNER_RADIUS = 80
_NUM_TEETH = 20
_GEAR_X = 0
_GEAR_Y = -_STANDIN_HEIGHT // 2


class MachineStandin:
    """Draws a placeholder outline, a gear and the machine state as text."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.frame = 0
        self.machine = 1

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @location.setter
    def location(self, location: Point) -> None:
        self.x = int(location.x)
        self.y = int(location.y)

    def draw_machine(self, graphics: Graphics) -> None:
        """Draw the placeholder with its root at the current location."""
        x, y = self.x, self.y

        graphics.set_pen(_FRAME_COLOUR, 1)
        graphics.set_brush(TRANSPARENT)
        graphics.draw_rectangle(
            x - _STANDIN_WIDTH // 2, y - _STANDIN_HEIGHT, _STANDIN_WIDTH, _STANDIN_HEIGHT
        )

        graphics.set_pen(BLACK)
        graphics.stroke_line(x - 10, y - 10, x + 10, y + 10)
        graphics.stroke_line(x + 10, y - 10, x - 10, y + 10)

        graphics.set_font(_COORD_FONT_SIZE, WHITE)
        graphics.draw_text(f"({x},{y})", x + 15, y - 10)

        self._draw_gear(graphics, x + _GEAR_X, y + _GEAR_Y)

        text_y = int(y - _LINE_SIZE * 3.5)
        for line in (
            "Machine goes here!",
            f"Machine: {self.machine}",
            f"Frame: {self.frame}",
        ):
            self._centered_string(graphics, line, x, text_y, _LINE_SIZE)
            text_y -= _LINE_SPACING

    @staticmethod
    def _draw_gear(graphics: Graphics, cx: float, cy: float) -> None:
        graphics.set_pen(_GEAR_COLOUR)

        def at(radius: float, angle: float) -> tuple[float, float]:
            return cx + radius * math.cos(angle), cy + radius * math.sin(angle)

        for i in range(_NUM_TEETH):
            angle1 = i * 2 * math.pi / _NUM_TEETH
            angle2 = (i + 0.5) * 2 * math.pi / _NUM_TEETH
            angle3 = (i + 1.0) * 2 * math.pi / _NUM_TEETH
            outline = [
                at(_OUTER_RADIUS, angle1),
                at(_OUTER_RADIUS, angle2),
                at(_INNER_RADIUS, angle2),
                at(_INNER_RADIUS, angle3),
                at(_OUTER_RADIUS, angle3),
            ]
            for (x1, y1), (x2, y2) in zip(outline, outline[1:]):
                graphics.stroke_line(x1, y1, x2, y2)

    @staticmethod
    def _centered_string(
        graphics: Graphics, text: str, x: int, y: int, dy: int
    ) -> None:
        """Draw text with its bottom centre at (x, y) and a height of dy."""
        y -= dy
        graphics.set_font(dy, WHITE)
        width, _ = graphics.get_text_extent(text)
        graphics.draw_text(text, x - width / 2, y)


class MachineSystemStandin(MachineSystemInterface):
    """A machine system that shows only the stand-in drawing."""

    def __init__(self) -> None:
        self.standin = MachineStandin()
        self.frame_rate = 0.0
        self.flag = 0

    @property
    def location(self) -> Point:  # type: ignore[override]
        return self.standin.location

    @location.setter
    def location(self, location: Point) -> None:
        self.standin.location = location

    @property
    def machine_number(self) -> int:
        return self.standin.machine

    @property
    def machine_time(self) -> float:
        """The stand-in does not animate, so its time is always zero."""
        return 0.0

    def draw_machine(self, graphics: Graphics) -> None:
        self.standin.draw_machine(graphics)

    def set_machine_frame(self, frame: int) -> None:
        self.standin.frame = frame

    def choose_machine(self, machine: int) -> None:
        self.standin.machine = machine