import pytest
from PIL import Image

from jackbox.cam import Cam
from jackbox.component import KeyResponder
from jackbox.graphics import Graphics, Point
from jackbox.polygon import PolygonError


class RecordingResponder(KeyResponder):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_key_drop(self):
        self.log.append(self.name)


@pytest.fixture
def images_dir(tmp_path):
    Image.new("RGBA", (20, 20), (200, 150, 50, 255)).save(tmp_path / "key.png")
    return tmp_path


@pytest.fixture
def cam(images_dir):
    return Cam(images_dir, Point(-40, -187))


def test_missing_key_image_raises(tmp_path):
    with pytest.raises(PolygonError):
        Cam(tmp_path / "missing", Point(0, 0))


def test_update_rotation_and_reset(cam):
    cam.update_rotation(1.5)
    assert cam.rotation == 1.5
    cam.reset()
    assert cam.rotation == 0.0


def test_hole_under_key_notifies_all_in_order(cam):
    log = []
    cam.add_responder(RecordingResponder("box", log))
    cam.add_responder(RecordingResponder("toy", log))
    cam.hole_under_key()
    assert log == ["box", "toy"]


def test_draw_at_start_shows_hole_without_drop(cam):
    log = []
    cam.add_responder(RecordingResponder("box", log))
    graphics = Graphics()
    cam.draw_foreground(graphics)
    ellipses = graphics.calls_named("draw_ellipse")
    assert len(ellipses) == 1
    assert ellipses[0].args[2] == 8
    assert ellipses[0].args[3] == pytest.approx(4.5)
    assert len(graphics.calls_named("draw_image")) == 1
    assert log == []


def test_hole_moves_up_as_cam_turns(cam):
    graphics = Graphics()
    cam.draw_foreground(graphics)
    start = graphics.calls_named("draw_ellipse")[0].args[1]

    cam.update_rotation(1.5)
    graphics = Graphics()
    cam.draw_foreground(graphics)
    later = graphics.calls_named("draw_ellipse")[0].args[1]
    assert later < start


def test_full_turn_drops_key(cam):
    log = []
    cam.add_responder(RecordingResponder("box", log))
    cam.update_rotation(3.0)
    graphics = Graphics()
    cam.draw_foreground(graphics)
    assert graphics.calls_named("draw_ellipse") == []
    assert len(graphics.calls_named("draw_rectangle")) == 2
    assert log == ["box"]


def test_draw_background_draws_nothing(cam):
    graphics = Graphics()
    cam.draw_background(graphics)
    assert graphics.calls == []