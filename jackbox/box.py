"""The box whose lid swings open when the cam key drops."""

from __future__ import annotations

import math
import os
from pathlib import Path as FilePath
from typing import Union

from jackbox.component import Component, KeyResponder
from jackbox.graphics import Graphics, Point
from jackbox.polygon import Polygon

_BACKGROUND_IMAGE = "box-background.png"
_FOREGROUND_IMAGE = "box-foreground.png"
_LID_IMAGE = "box-lid.png"

# Vertical scale of the lid while it is closed.
LID_ZERO_ANGLE_SCALE = 0.02
# Seconds the lid takes to open fully.
LID_OPENING_TIME = 0.25
# Vertical position of the lid while it is closed.
_LID_CLOSE_OFFSET = -12500

_OPEN_ANGLE = math.pi / 2


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


class Box(Component, KeyResponder):
    """A box with a lid that opens once the key has dropped."""

    def __init__(
        self, images_dir: Union[str, os.PathLike[str]], box_size: int, lid_size: int
    ) -> None:
        super().__init__()
        images = FilePath(images_dir)
        self.lid_angle = 0.0
        self.is_open = False

        self.background = Polygon()
        self.background.rectangle(_half(-box_size), 0, box_size, box_size)
        self.background.set_image(images / _BACKGROUND_IMAGE)

        self.lid_start = Point(_half(-lid_size), -box_size)
        self.lid = Polygon()
        self.lid.rectangle(self.lid_start.x, _LID_CLOSE_OFFSET, lid_size, lid_size)
        self.lid.set_image(images / _LID_IMAGE)

        self.face = Polygon()
        self.face.rectangle(_half(-box_size), 0, box_size, box_size)
        self.face.set_image(images / _FOREGROUND_IMAGE)

    @property
    def lid_scale(self) -> float:
        """Vertical scale applied to the lid at its current angle."""
        return LID_ZERO_ANGLE_SCALE + (1.0 - LID_ZERO_ANGLE_SCALE) * math.sin(
            self.lid_angle
        )

    def draw_background(self, graphics: Graphics) -> None:
        self.background.draw(graphics, self.x, self.y)

        if self.lid_angle > 0:
            offset = Point(0, -_LID_CLOSE_OFFSET + self.lid_start.y)
        else:
            offset = Point(0, 0)
        graphics.push_state()
        graphics.translate(offset.x, offset.y)
        graphics.scale(1, self.lid_scale)
        self.lid.draw(graphics, 0, 0)
        graphics.pop_state()

    def draw_foreground(self, graphics: Graphics) -> None:
        self.face.draw(graphics, self.x, self.y)

    def advance(self, increase: float) -> None:
        """Advance time; an open box swings its lid toward fully open."""
        super().advance(increase)
        if self.is_open and self.lid_angle < _OPEN_ANGLE:
            self.lid_angle = min(
                self.lid_angle + _OPEN_ANGLE * increase / LID_OPENING_TIME,
                _OPEN_ANGLE,
            )

    def reset(self) -> None:
        self.lid_angle = 0.0

    def on_key_drop(self) -> None:
        self.is_open = True