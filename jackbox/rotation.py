"""Rotation sources that drive rotation sinks."""

from __future__ import annotations

from jackbox.component import RotationSink


class RotationSource:
    """Passes rotation on to every sink attached to it."""

    def __init__(self) -> None:
        self.rotation = 0.0
        self.sinks: list[RotationSink] = []

    def add_sink(self, sink: RotationSink) -> None:
        self.sinks.append(sink)

    def set_rotation(self, rotation: float) -> None:
        """Set the rotation in turns and pass it to every sink."""
        self.rotation = rotation
        for sink in self.sinks:
            sink.update_rotation(rotation)