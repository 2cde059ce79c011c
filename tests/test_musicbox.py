import xml.etree.ElementTree as ElementTree

import pytest
from PIL import Image

from jackbox.graphics import Graphics
from jackbox.musicbox import MusicBox

SONG = """<song beats="4">
  <sounds>
    <sound note="C4" file="c4.wav"/>
    <sound note="E4" file="e4.wav"/>
  </sounds>
  <notes>
    <note measure="1" beat="1" note="C4"/>
    <note measure="1" beat="3" note="E4"/>
    <note measure="2" beat="1.5" note="C4"/>
    <note measure="3" beat="1" note="G9"/>
  </notes>
</song>
"""


@pytest.fixture
def resources(tmp_path):
    (tmp_path / "images").mkdir()
    Image.new("RGB", (8, 8), (1, 2, 3)).save(tmp_path / "images" / "mechanism.png")
    (tmp_path / "songs").mkdir()
    (tmp_path / "songs" / "song.xml").write_text(SONG)
    return tmp_path


@pytest.fixture
def played():
    return []


@pytest.fixture
def music(resources, played):
    return MusicBox(resources, "/songs/song.xml", played.append)


def test_beats_per_measure(music):
    assert music.beats_per_measure == 4


def test_sounds_resolve_to_audio_directory(music, resources):
    assert music.sounds == {
        "C4": resources / "audio" / "c4.wav",
        "E4": resources / "audio" / "e4.wav",
    }


def test_notes_in_document_order(music):
    assert [note.name for note in music.notes] == ["C4", "E4", "C4", "G9"]
    assert music.notes[0].beat == 0
    assert music.notes[2].beat == pytest.approx(4.5)
    beats = [note.beat for note in music.notes]
    assert beats == sorted(beats)


def test_first_note_plays_at_zero(music, played, resources):
    music.update_rotation(0)
    assert music.note_index == 1
    assert played == [resources / "audio" / "c4.wav"]


def test_notes_play_once_each(music, played, resources):
    music.update_rotation(0)
    music.update_rotation(1)
    music.update_rotation(1)
    assert music.note_index == 2
    assert played == [resources / "audio" / "c4.wav", resources / "audio" / "e4.wav"]


def test_note_waits_for_its_beat(music, played):
    music.update_rotation(2.2)
    assert music.note_index == 2
    assert len(played) == 2
    music.update_rotation(2.25)
    assert music.note_index == 3
    assert len(played) == 3


def test_unknown_note_is_skipped_but_consumed(music, played):
    music.update_rotation(100)
    assert len(played) == 3
    assert music.note_index == len(music.notes)


def test_muted_plays_nothing(music, played):
    music.muted = True
    music.update_rotation(100)
    assert played == []
    assert music.note_index == len(music.notes)


def test_reset_replays(music, played):
    music.update_rotation(100)
    music.reset()
    assert music.rotation == 0
    assert music.note_index == 0
    music.update_rotation(100)
    assert len(played) == 6


def test_without_player(resources):
    music = MusicBox(resources, "songs/song.xml")
    music.update_rotation(1)
    assert music.note_index == 2


def test_draw_background(music):
    graphics = Graphics()
    music.draw_background(graphics)
    assert len(graphics.calls_named("draw_image")) == 1
    assert len(graphics.calls_named("draw_rectangle")) == 1


def test_draw_foreground_is_empty(music):
    graphics = Graphics()
    music.draw_foreground(graphics)
    assert graphics.calls == []


def test_bad_xml_raises(resources):
    (resources / "songs" / "bad.xml").write_text("<song beats=")
    with pytest.raises(ElementTree.ParseError):
        MusicBox(resources, "songs/bad.xml")


def test_missing_song_raises(resources):
    with pytest.raises(OSError):
        MusicBox(resources, "songs/none.xml")