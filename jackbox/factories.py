"""Factories that assemble the two jack-in-the-box machines."""

from __future__ import annotations

import os
from pathlib import Path as FilePath
from typing import Optional, Union

from jackbox.box import Box
from jackbox.cam import Cam
from jackbox.crank import Crank
from jackbox.graphics import Point
from jackbox.machine import Machine
from jackbox.musicbox import MusicBox, Player
from jackbox.pulley import Pulley
from jackbox.shaft import SHAFT_DIAMETER, Shaft
from jackbox.sparty import Sparty

_IMAGES_DIRECTORY = "images"
_BOX_SIZE = 250
_LID_SIZE = 240
_TOY_SIZE = 212
_SPRING_LENGTH = 260
_SPRING_WIDTH = 15
_SONG = "songs/pop.xml"

PathLike = Union[str, os.PathLike[str]]


def _build_drive(machine: Machine, box: Box, images_dir: FilePath) -> tuple[Shaft, Cam]:
    """Add the crank, shafts, pulleys and cam shared by both machines.

    Returns the upper right shaft and the cam.
    """
    crank = Crank()
    machine.add_component(crank)

    shaft = Shaft()
    machine.add_component(shaft)
    crank.source.add_sink(shaft)

    pulley1 = Pulley(40, shaft.left_center)
    machine.add_component(pulley1)
    shaft.source.add_sink(pulley1)

    shaft2 = Shaft(8, 230, Point(-115, -65))
    machine.add_component(shaft2)
    pulley2 = Pulley(95, shaft2.right_center)
    machine.add_component(pulley2)
    pulley1.belt_to(pulley2)
    pulley2.source.add_sink(shaft2)

    pulley3 = Pulley(20, shaft2.left_center)
    machine.add_component(pulley3)
    shaft2.source.add_sink(pulley3)

    shaft3 = Shaft(SHAFT_DIAMETER, 50, Point(-115, -185))
    machine.add_component(shaft3)
    pulley4 = Pulley(80, shaft3.left_center)
    pulley4.source.add_sink(shaft3)
    pulley3.belt_to(pulley4)
    machine.add_component(pulley4)

    cam = Cam(images_dir, shaft3.right_center)
    machine.add_component(cam)
    pulley3.source.add_sink(cam)
    cam.add_responder(box)
    return shaft, cam


class MachineCFactory:
    """Builds machine 1: a box with Sparty on a spring."""

    def __init__(self, resources_dir: PathLike) -> None:
        self.images_dir = FilePath(resources_dir) / _IMAGES_DIRECTORY

    def create(self) -> Machine:
        machine = Machine()

        box = Box(self.images_dir, _BOX_SIZE, _LID_SIZE)
        machine.add_component(box)

        sparty = Sparty(
            self.images_dir / "sparty.png",
            _TOY_SIZE,
            _SPRING_LENGTH,
            80,
            _SPRING_WIDTH,
            False,
            0,
        )
        machine.add_component(sparty)

        _, cam = _build_drive(machine, box, self.images_dir)
        cam.add_responder(sparty)
        return machine


class Machine2Factory:
    """Builds machine 2: three bouncing trolls and a music box."""

    def __init__(self, resources_dir: PathLike, player: Optional[Player] = None) -> None:
        self.resources_dir = FilePath(resources_dir)
        self.images_dir = self.resources_dir / _IMAGES_DIRECTORY
        self.player = player

    def create(self) -> Machine:
        machine = Machine()

        box = Box(self.images_dir, _BOX_SIZE, _LID_SIZE)
        machine.add_component(box)

        trolls = [
            Sparty(
                self.images_dir / "pinkTroll.png",
                _TOY_SIZE,
                _SPRING_LENGTH,
                55,
                _SPRING_WIDTH,
                True,
                spring_x,
            )
            for spring_x in (0, 65, -65)
        ]
        for troll in trolls:
            machine.add_component(troll)

        shaft, cam = _build_drive(machine, box, self.images_dir)
        for troll in trolls:
            cam.add_responder(troll)

        music = MusicBox(self.resources_dir, _SONG, self.player)
        machine.add_component(music)
        shaft.source.add_sink(music)
        return machine