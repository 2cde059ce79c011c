"""A music box that plays a song as its drum turns."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ElementTree
from collections.abc import Callable
from pathlib import Path as FilePath
from typing import NamedTuple, Optional, Union

from jackbox.component import Component, RotationSink
from jackbox.cylinder import Cylinder
from jackbox.graphics import Colour, Graphics
from jackbox.polygon import Polygon

_MECHANISM_IMAGE = FilePath("images") / "mechanism.png"
_IMAGE_SIZE = 120
_DRUM_COLOUR = Colour(248, 242, 191)
_DRUM_LINE_COLOUR = Colour(20, 20, 20)
_DRUM_WIDTH = 40
_DRUM_DIAMETER = 33
_DRUM_LINE_WIDTH = 2
_DRUM_LINE_COUNT = 6
_AUDIO_DIRECTORY = "audio"
_DRUM_ROTATION_DIVISOR = 4
_DRUM_X_DIVISOR = 6.5
_DRUM_Y_DIVISOR = 1.65
_IMAGE_Y_DIVISOR = 10

PathLike = Union[str, os.PathLike[str]]
Player = Callable[[FilePath], None]


class Note(NamedTuple):
    """A note name and the absolute beat on which it plays."""

    name: str
    beat: float


def _to_int(text: Optional[str]) -> int:
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def _to_float(text: Optional[str]) -> float:
    try:
        return float((text or "").strip())
    except ValueError:
        return 0.0


def _under(base: PathLike, relative: PathLike) -> FilePath:
    return FilePath(base) / os.fspath(relative).lstrip("/\\")


class MusicBox(Component, RotationSink):
    """Plays the notes of a song as its rotation passes their beats."""

    def __init__(
        self,
        resources_dir: PathLike,
        song_path: PathLike,
        player: Optional[Player] = None,
    ) -> None:
        super().__init__()
        self.resources_dir = FilePath(resources_dir)
        self.player = player
        self.rotation = 0.0
        self.muted = False
        self.beats_per_measure = 0
        self.sounds: dict[str, FilePath] = {}
        self.notes: list[Note] = []
        self.note_index = 0

        self.mechanism = Polygon()
        self.mechanism.rectangle(0, 0, _IMAGE_SIZE, _IMAGE_SIZE)
        self.mechanism.set_image(self.resources_dir / _MECHANISM_IMAGE)

        self.drum = Cylinder(colour=_DRUM_COLOUR)
        self.drum.set_size(_DRUM_DIAMETER, _DRUM_WIDTH)
        self.drum.set_lines(_DRUM_LINE_COLOUR, _DRUM_LINE_WIDTH, _DRUM_LINE_COUNT)

        self.load_song(_under(self.resources_dir, song_path))

    def load_song(self, xml_path: PathLike) -> None:
        """Read the song's beats, sound files and notes from an XML file."""
        root = ElementTree.parse(xml_path).getroot()
        self.beats_per_measure = _to_int(root.get("beats"))
        audio = self.resources_dir / _AUDIO_DIRECTORY

        for section in root.iterfind("sounds"):
            for sound in section.iterfind("sound"):
                self.sounds[sound.get("note", "")] = audio / sound.get("file", "")

        for section in root.iterfind("notes"):
            for note in section.iterfind("note"):
                measure = _to_int(note.get("measure"))
                beat = _to_float(note.get("beat"))
                absolute = (measure - 1) * self.beats_per_measure + (beat - 1)
                self.notes.append(Note(note.get("note", ""), absolute))

    def play_note(self, note: str) -> None:
        """Play the sound file for a note unless muted."""
        if self.muted or self.player is None:
            return
        sound = self.sounds.get(note)
        if sound is not None:
            self.player(sound)

    def update_rotation(self, rotation: float) -> None:
        """Turn the drum and play every note whose beat has been reached."""
        self.rotation = rotation
        beat = rotation * self.beats_per_measure / 2
        while self.note_index < len(self.notes) and beat >= self.notes[self.note_index].beat:
            self.play_note(self.notes[self.note_index].name)
            self.note_index += 1

    def draw_background(self, graphics: Graphics) -> None:
        self.mechanism.draw(
            graphics,
            self.x - _IMAGE_SIZE // 2,
            self.y - _IMAGE_SIZE // _IMAGE_Y_DIVISOR,
        )
        self.drum.draw(
            graphics,
            self.x - _IMAGE_SIZE / _DRUM_X_DIVISOR,
            self.y - _IMAGE_SIZE / _DRUM_Y_DIVISOR,
            self.rotation / _DRUM_ROTATION_DIVISOR,
        )

    def draw_foreground(self, graphics: Graphics) -> None:
        """The music box has nothing in the foreground."""

    def reset(self) -> None:
        self.rotation = 0.0
        self.note_index = 0