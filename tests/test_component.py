import pytest

from jackbox.component import Component, KeyResponder, RotationSink
from jackbox.graphics import Graphics, Point


class Marker(Component):
    def __init__(self, location=Point(0, 0)):
        super().__init__(location)
        self.resets = 0

    def draw_background(self, graphics):
        graphics.draw_rectangle(self.x, self.y, 1, 1)

    def draw_foreground(self, graphics):
        graphics.draw_ellipse(self.x, self.y, 1, 1)

    def reset(self):
        self.resets += 1


def test_components_are_abstract():
    with pytest.raises(TypeError):
        Component()
    with pytest.raises(TypeError):
        KeyResponder()
    with pytest.raises(TypeError):
        RotationSink()


def test_default_location_and_time():
    marker = Marker()
    assert marker.location == Point(0, 0)
    assert (marker.x, marker.y) == (0, 0)
    assert marker.time == 0


def test_location_exposes_coordinates():
    marker = Marker(Point(-115, -65))
    assert (marker.x, marker.y) == (-115, -65)
    marker.location = Point(3, 4)
    assert (marker.x, marker.y) == (3, 4)


def test_advance_accumulates_and_rewinds():
    marker = Marker(Point(0, 0))
    Component.advance(marker, 0.5)
    Component.advance(marker, 0.25)
    assert marker.time == pytest.approx(0.75)
    Component.advance(marker, -0.75)
    assert marker.time == pytest.approx(0)


def test_subclass_draws_at_its_location():
    g = Graphics()
    Marker(Point(8, 9)).draw_background(g)
    (call,) = g.calls
    assert call.args[:2] == (8, 9)