"""The machine system: selects, animates and draws a machine."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path as FilePath
from typing import Optional, Union

from jackbox.factories import Machine2Factory, MachineCFactory
from jackbox.graphics import Graphics, Point
from jackbox.machine import Machine
from jackbox.musicbox import Player

PathLike = Union[str, os.PathLike[str]]


class MachineSystemInterface(ABC):
    """What a program needs from a machine system.

    Implementations also carry the attributes ``location`` (a Point),
    ``frame_rate`` (frames per second) and ``flag``.
    """

    location: Point
    frame_rate: float
    flag: int

    @abstractmethod
    def draw_machine(self, graphics: Graphics) -> None:
        """Draw the machine at its location."""

    @abstractmethod
    def set_machine_frame(self, frame: int) -> None:
        """Move the animation to the given frame."""

    @abstractmethod
    def choose_machine(self, machine: int) -> None:
        """Select the machine with the given number."""

    @property
    @abstractmethod
    def machine_number(self) -> int:
        """The number of the selected machine."""

    @property
    @abstractmethod
    def machine_time(self) -> float:
        """The current machine time in seconds."""


class MachineSystem(MachineSystemInterface):
    """Builds machines from the resources directory and steps them frame by frame."""

    def __init__(self, resources_dir: PathLike, player: Optional[Player] = None) -> None:
        self.resources_dir = FilePath(resources_dir)
        self.player = player
        self.location = Point(0, 0)
        self.machine: Optional[Machine] = None
        self._machine_number = 0
        self.frame_rate = 0.0
        self._time = 0.0
        self.current_frame = 0
        self.flag = 0
        self.choose_machine(1)

    @property
    def machine_number(self) -> int:
        return self._machine_number

    @property
    def machine_time(self) -> float:
        return self._time

    def _require_machine(self) -> Machine:
        if self.machine is None:
            raise RuntimeError("no machine has been chosen")
        return self.machine

    def draw_machine(self, graphics: Graphics) -> None:
        machine = self._require_machine()
        graphics.push_state()
        graphics.translate(self.location.x, self.location.y)
        machine.draw(graphics)
        graphics.pop_state()

    def reset(self) -> None:
        """Return to frame zero, clearing the time and the frame rate."""
        self.current_frame = 0
        self.frame_rate = 0.0
        self._time = 0.0
        self._require_machine().reset()

    def set_machine_frame(self, frame: int) -> None:
        """Step the machine forward or backward one frame at a time to frame."""
        if frame == self.current_frame:
            return
        if self.frame_rate <= 0:
            raise ValueError("the frame rate must be set before changing frames")
        machine = self._require_machine()
        step = 1 if frame > self.current_frame else -1
        while self.current_frame != frame:
            self.current_frame += step
            self._time = self.current_frame / self.frame_rate
            machine.advance(step / self.frame_rate)
            machine.set_time(self._time)

    def choose_machine(self, machine: int) -> None:
        """Select machine 1 or 2; other numbers leave the current machine in place."""
        if self.machine is not None:
            self.reset()
        if machine == 1:
            created = MachineCFactory(self.resources_dir).create()
        elif machine == 2:
            created = Machine2Factory(self.resources_dir, self.player).create()
        else:
            return
        created.machine_system = self
        self.machine = created
        self._machine_number = machine


class MachineSystemFactory:
    """Creates machine systems that load from one resources directory."""

    def __init__(self, resources_dir: PathLike) -> None:
        self.resources_dir = FilePath(resources_dir)

    def create_machine_system(self) -> MachineSystemInterface:
        return MachineSystem(self.resources_dir)