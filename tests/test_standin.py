import pytest

from jackbox.graphics import Graphics, Point
from jackbox.standin import MachineStandin, MachineSystemStandin


def _texts(graphics):
    return [call.args[0] for call in graphics.calls_named("draw_text")]


def test_standin_defaults_to_machine_one_frame_zero():
    standin = MachineStandin()
    graphics = Graphics()
    standin.draw_machine(graphics)
    texts = _texts(graphics)
    assert "Machine: 1" in texts
    assert "Frame: 0" in texts
    assert "Machine goes here!" in texts


def test_standin_outline_rectangle_at_origin():
    graphics = Graphics()
    MachineStandin().draw_machine(graphics)
    (rect,) = graphics.calls_named("draw_rectangle")
    assert rect.args == (-150, -200, 300, 200)


def test_standin_outline_follows_location():
    origin = Graphics()
    MachineStandin().draw_machine(origin)
    moved_standin = MachineStandin()
    moved_standin.location = Point(100, 40)
    moved = Graphics()
    moved_standin.draw_machine(moved)
    (a,) = origin.calls_named("draw_rectangle")
    (b,) = moved.calls_named("draw_rectangle")
    assert b.args[0] - a.args[0] == 100
    assert b.args[1] - a.args[1] == 40
    assert b.args[2:] == a.args[2:]


def test_standin_coordinate_label():
    standin = MachineStandin()
    standin.location = Point(12, 34)
    graphics = Graphics()
    standin.draw_machine(graphics)
    assert "(12,34)" in _texts(graphics)


def test_standin_gear_and_cross_line_count():
    graphics = Graphics()
    MachineStandin().draw_machine(graphics)
    # two cross lines plus four lines for each of twenty teeth
    assert len(graphics.calls_named("stroke_line")) == 2 + 4 * 20


def test_standin_gear_is_closed_outline():
    graphics = Graphics()
    MachineStandin().draw_machine(graphics)
    gear = graphics.calls_named("stroke_line")[2:]
    for first, second in zip(gear, gear[1:]):
        assert second.args[0] == pytest.approx(first.args[2])
        assert second.args[1] == pytest.approx(first.args[3])
    assert gear[-1].args[2] == pytest.approx(gear[0].args[0])
    assert gear[-1].args[3] == pytest.approx(gear[0].args[1])


def test_standin_text_is_centred_on_x():
    standin = MachineStandin()
    standin.location = Point(50, 0)
    graphics = Graphics()
    standin.draw_machine(graphics)
    for call in graphics.calls_named("draw_text")[1:]:
        width, _ = graphics.get_text_extent(call.args[0])
        assert call.args[1] + width / 2 == pytest.approx(50)


def test_standin_text_lines_go_upward():
    graphics = Graphics()
    MachineStandin().draw_machine(graphics)
    ys = [call.args[2] for call in graphics.calls_named("draw_text")[1:]]
    assert len(ys) == 3
    assert ys == sorted(ys, reverse=True)


def test_system_standin_choose_machine_and_frame():
    system = MachineSystemStandin()
    system.choose_machine(2)
    system.set_machine_frame(17)
    assert system.machine_number == 2
    graphics = Graphics()
    system.draw_machine(graphics)
    texts = _texts(graphics)
    assert "Machine: 2" in texts
    assert "Frame: 17" in texts


def test_system_standin_time_is_zero_after_frames():
    system = MachineSystemStandin()
    system.frame_rate = 30
    system.set_machine_frame(100)
    assert system.machine_time == 0.0


def test_system_standin_location_round_trip():
    system = MachineSystemStandin()
    system.location = Point(7, -9)
    assert system.location == Point(7, -9)
    assert system.standin.location == Point(7, -9)


def test_system_standin_default_machine_number():
    assert MachineSystemStandin().machine_number == 1