"""A cam whose key drops into a hole and sets off the key responders."""

from __future__ import annotations

import math
import os
from pathlib import Path as FilePath
from typing import Union

from jackbox.component import Component, KeyResponder, RotationSink
from jackbox.cylinder import Cylinder
from jackbox.graphics import BLACK, WHITE, Graphics, Point
from jackbox.polygon import Polygon

_CAM_WIDTH = 17
_CAM_DIAMETER = 55
_HOLE_SIZE = 8
_KEY_IMAGE = "key.png"
_KEY_IMAGE_SIZE = 20
_SCALE_MULT = 4.5
_HOLE_X_OFFSET = 4
_HOLE_Y_OFFSET = 5
# Slows the hole so it appears to move with the driving shaft.
_HOLE_ROTATION_DIVISOR = 3


class Cam(Component, RotationSink):
    """A rotating cam; when its hole reaches the key, all responders are told."""

    def __init__(
        self, images_dir: Union[str, os.PathLike[str]], location: Point
    ) -> None:
        super().__init__(location)
        self.rotation = 0.0
        self.responders: list[KeyResponder] = []

        self.cylinder = Cylinder(colour=WHITE)
        self.cylinder.set_size(_CAM_DIAMETER, _CAM_WIDTH)

        self.key = Polygon()
        self.key.set_image(FilePath(images_dir) / _KEY_IMAGE)
        self.key.rectangle(-_KEY_IMAGE_SIZE / 2, 0, _KEY_IMAGE_SIZE, _KEY_IMAGE_SIZE)

    def draw_background(self, graphics: Graphics) -> None:
        """The cam has nothing in the background."""

    def draw_foreground(self, graphics: Graphics) -> None:
        self.cylinder.draw(graphics, self.x, self.y, 0)
        graphics.set_brush(BLACK)

        start_x = self.x + _CAM_WIDTH / _HOLE_X_OFFSET
        start_y = self.y + _CAM_DIAMETER / 2 - _HOLE_Y_OFFSET
        end_y = self.y - _CAM_DIAMETER / 2 - 2

        hole_rotation = self.rotation / _HOLE_ROTATION_DIVISOR
        current_y = start_y + (end_y - start_y) * hole_rotation
        vertical_scaler = 1.0 + math.sin(hole_rotation * math.pi)
        scaled_height = _SCALE_MULT * vertical_scaler
        y_offset = _SCALE_MULT * (vertical_scaler - 1.0) / 2.0

        key_x = self.x + _HOLE_X_OFFSET * 2
        if current_y > end_y:
            graphics.draw_ellipse(
                start_x, current_y - y_offset, _HOLE_SIZE, scaled_height
            )
            self.key.draw(graphics, key_x, self.y - _CAM_DIAMETER / 2)
        else:
            self.key.draw(graphics, key_x, self.y - _KEY_IMAGE_SIZE)
            self.cylinder.draw(graphics, self.x, self.y, 0)
            self.hole_under_key()

    def reset(self) -> None:
        self.rotation = 0.0

    def update_rotation(self, rotation: float) -> None:
        self.rotation = rotation

    def add_responder(self, responder: KeyResponder) -> None:
        self.responders.append(responder)

    def hole_under_key(self) -> None:
        """Tell every responder that the key has dropped."""
        for responder in self.responders:
            responder.on_key_drop()