"""Base classes for machine parts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from jackbox.graphics import Graphics, Point


class Component(ABC):
    """A drawable, animated part of a machine."""

    def __init__(self, location: Point = Point(0, 0)) -> None:
        self.location = location
        self.time = 0.0

    @property
    def x(self) -> float:
        return self.location.x

    @property
    def y(self) -> float:
        return self.location.y

    @abstractmethod
    def draw_background(self, graphics: Graphics) -> None:
        """Draw the parts that lie behind everything else."""

    @abstractmethod
    def draw_foreground(self, graphics: Graphics) -> None:
        """Draw the parts that lie in front."""

    @abstractmethod
    def reset(self) -> None:
        """Return the component to its starting state."""

    def advance(self, increase: float) -> None:
        """Advance the animation time by increase seconds."""
        self.time += increase


class KeyResponder(ABC):
    """Something that reacts when the cam key drops into its hole."""

    @abstractmethod
    def on_key_drop(self) -> None:
        """React to the key drop."""


class RotationSink(ABC):
    """Something that receives rotation from a rotation source."""

    @abstractmethod
    def update_rotation(self, rotation: float) -> None:
        """Receive a new rotation in turns."""