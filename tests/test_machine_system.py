import pytest
from PIL import Image

from jackbox.graphics import Graphics, Point
from jackbox.machine_system import (
    MachineSystem,
    MachineSystemFactory,
    MachineSystemInterface,
)

_IMAGES = [
    "box-background.png",
    "box-foreground.png",
    "box-lid.png",
    "sparty.png",
    "pinkTroll.png",
    "key.png",
    "mechanism.png",
]

_SONG = (
    '<song beats="4"><sounds><sound note="C4" file="c4.wav"/></sounds>'
    '<notes><note measure="1" beat="1" note="C4"/></notes></song>'
)


@pytest.fixture
def resources(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    for name in _IMAGES:
        Image.new("RGBA", (4, 4), (200, 100, 50, 255)).save(images / name)
    songs = tmp_path / "songs"
    songs.mkdir()
    (songs / "pop.xml").write_text(_SONG)
    return tmp_path


def test_starts_with_machine_one(resources):
    system = MachineSystem(resources)
    assert system.machine_number == 1
    assert system.machine.machine_system is system
    assert system.machine_time == 0


def test_choose_machine_two_and_invalid(resources):
    system = MachineSystem(resources)
    system.choose_machine(2)
    assert system.machine_number == 2
    current = system.machine
    system.choose_machine(7)
    assert system.machine_number == 2
    assert system.machine is current


def test_frames_forward_and_back(resources):
    system = MachineSystem(resources)
    system.frame_rate = 30
    system.set_machine_frame(30)
    assert system.machine_time == pytest.approx(1.0)
    assert system.machine.time == pytest.approx(1.0)
    system.set_machine_frame(15)
    assert system.machine_time == pytest.approx(0.5)
    system.set_machine_frame(0)
    assert system.machine_time == 0


def test_frame_change_without_rate_raises(resources):
    system = MachineSystem(resources)
    with pytest.raises(ValueError):
        system.set_machine_frame(3)


def test_reset_clears_frame_state(resources):
    system = MachineSystem(resources)
    system.frame_rate = 10
    system.set_machine_frame(5)
    system.reset()
    assert system.current_frame == 0
    assert system.frame_rate == 0
    assert system.machine_time == 0


def test_draw_machine_at_location(resources):
    system = MachineSystem(resources)
    system.location = Point(100, 200)
    graphics = Graphics()
    system.draw_machine(graphics)
    assert graphics.calls
    assert graphics.calls[0].transform.apply(0, 0) == pytest.approx((100, 200))
    assert graphics.transform.apply(0, 0) == (0, 0)


def test_factory_creates_system(resources):
    system = MachineSystemFactory(resources).create_machine_system()
    assert isinstance(system, MachineSystemInterface)
    assert system.machine_number == 1


def test_machine_two_plays_through_system(resources):
    played = []
    system = MachineSystem(resources, played.append)
    system.choose_machine(2)
    system.frame_rate = 30
    system.set_machine_frame(2)
    assert played == [resources / "audio" / "c4.wav"]