"""A toy on a spring that pops out of the box."""

from __future__ import annotations

import math
import os
from typing import Union

from jackbox.component import Component, KeyResponder
from jackbox.graphics import Graphics, Path
from jackbox.polygon import Polygon

# Seconds the toy takes to pop up.
_POPUP_TIME = 0.25
# Longest the spring stretches, as a multiple of its starting length.
MAX_SPRING_LENGTH_MULT = 3.5
_SPRING_SPEED = 140
_LINK_SEPARATION_DIVISOR = 800
_BOUNCE_HEIGHT = 8
_BOUNCE_WIDTH = 3
_BOUNCE_SPEED = 3
_TOY_BOTTOM_Y = -90
_SPRING_COMPRESS_DIVISOR = 4


class Sparty(Component, KeyResponder):
    """A toy on a spring; it springs up once the key drops."""

    def __init__(
        self,
        image: Union[str, os.PathLike[str]],
        size: int,
        spring_length: int,
        spring_width: int,
        num_links: int,
        bouncy: bool,
        spring_x: int,
    ) -> None:
        super().__init__()
        self.spring_x = spring_x
        self.bouncy = bouncy
        self.spring_start_length = spring_length // _SPRING_COMPRESS_DIVISOR
        self.spring_width = spring_width
        self.spring_links = num_links
        self.is_sprung = False
        self.spring_increase = 0.0
        self.bounce_time = 0.0

        self.toy = Polygon()
        self.toy.rectangle(int(-size / 2), _TOY_BOTTOM_Y, size, size)
        self.toy.set_image(image)

    def reset(self) -> None:
        self.spring_increase = 0.0
        self.is_sprung = False

    def advance(self, increase: float) -> None:
        """Advance time; a sprung toy extends its spring up to the limit."""
        if self.is_sprung:
            super().advance(increase)
            limit = self.spring_start_length * MAX_SPRING_LENGTH_MULT
            self.spring_increase = min(
                self.spring_increase + _SPRING_SPEED * increase / _POPUP_TIME, limit
            )
            if self.spring_increase < 0:
                self.spring_increase = 0.0
        self.bounce_time += increase

    def draw_background(self, graphics: Graphics) -> None:
        self.draw_spring(
            graphics,
            self.spring_x,
            0,
            self.spring_start_length + self.spring_increase,
            self.spring_width,
            int(self.spring_links - self.spring_increase / _LINK_SEPARATION_DIVISOR),
        )

        dx = float(self.spring_x)
        dy = self.spring_start_length - self.spring_increase
        if self.is_sprung and self.bouncy:
            dy += _BOUNCE_HEIGHT * math.sin(self.bounce_time * _BOUNCE_SPEED)
            dx += _BOUNCE_WIDTH * math.sin(self.bounce_time * _BOUNCE_SPEED / 2)

        graphics.push_state()
        graphics.translate(dx, dy)
        self.toy.draw(graphics, 0, 0)
        graphics.pop_state()

    def draw_foreground(self, graphics: Graphics) -> None:
        """The toy has nothing in the foreground."""

    def draw_spring(
        self,
        graphics: Graphics,
        x: int,
        y: int,
        length: float,
        width: float,
        num_links: int,
    ) -> None:
        """Stroke a spring whose bottom centre is at (x, y), extending upward."""
        path = Path()
        y1 = float(y)
        right = x + width / 2
        left = x - width / 2
        path.move_to_point(x, y1)
        if num_links > 0:
            link_length = length / num_links
            for _ in range(num_links):
                y2 = y1 - link_length
                y3 = y2 - link_length / 2
                path.add_curve_to_point(right, y1, right, y3, x, y3)
                path.add_curve_to_point(left, y3, left, y2, x, y2)
                y1 = y2
        graphics.stroke_path(path)

    def on_key_drop(self) -> None:
        self.is_sprung = True