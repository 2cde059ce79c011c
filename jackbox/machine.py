"""A machine: a collection of components animated and drawn together."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from jackbox.component import Component
from jackbox.graphics import Graphics

if TYPE_CHECKING:
    from jackbox.machine_system import MachineSystem


class Machine:
    """Holds the components of one machine and keeps their time in step."""

    def __init__(self) -> None:
        self.components: list[Component] = []
        self.machine_system: Optional[MachineSystem] = None
        self.time = 0.0

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def draw(self, graphics: Graphics) -> None:
        """Draw every background, then every foreground, in insertion order."""
        for component in self.components:
            component.draw_background(graphics)
        for component in self.components:
            component.draw_foreground(graphics)

    def set_time(self, time: float) -> None:
        """Set the time of the machine and all of its components."""
        self.time = time
        for component in self.components:
            component.time = time

    def advance(self, increase: float) -> None:
        """Advance the machine and all of its components by increase seconds."""
        self.time += increase
        for component in self.components:
            component.advance(increase)

    def reset(self) -> None:
        """Return the machine and its components to time zero."""
        self.time = 0.0
        for component in self.components:
            component.reset()