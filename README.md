# jackbox

A small simulation of a mechanical jack-in-the-box. A hand crank turns a
shaft, belts and pulleys carry the rotation down and back up to a cam, and
when the cam's key drops into its hole the box lid swings open and the toy
springs out on its spring. A second machine has three bouncing toys and a
music box that steps through a song read from an XML file as its drum turns.

Drawing goes to a `Graphics` object from `jackbox.graphics`, which records
every drawing call it receives (`graphics.calls`, or `graphics.calls_named(name)`
for one kind of call) together with the transform, brush, pen and opacity in
effect at the time. Machines can therefore be inspected and tested without a
window system, and a renderer can replay the recorded calls.

## Installing

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Resources

Machines load their pictures with Pillow from a resources directory laid
out like this:

    resources/
        images/
            box-background.png  box-foreground.png  box-lid.png
            key.png  sparty.png  pinkTroll.png  mechanism.png
        songs/
            pop.xml             (machine 2 only)
        audio/                  (sound files named by the song)

A picture that cannot be loaded raises `jackbox.polygon.PolygonError`.

A song file has a `beats` attribute (beats per measure) on its root element,
a `<sounds>` section of `<sound note="..." file="..."/>` entries naming files
under `audio/`, and a `<notes>` section of
`<note measure="..." beat="..." note="..."/>` entries.

## Using it

```python
from jackbox.graphics import Graphics, Point
from jackbox.machine_system import MachineSystemFactory

system = MachineSystemFactory("resources").create_machine_system()
system.location = Point(400, 500)
system.frame_rate = 30
system.set_machine_frame(60)      # two seconds into the animation

graphics = Graphics()
system.draw_machine(graphics)
print(system.machine_number, system.machine_time)
print(len(graphics.calls_named("draw_image")))
```

A `MachineSystem` starts on machine 1. `choose_machine(1)` selects the
single-toy machine and `choose_machine(2)` the machine with three toys and
the music box; any other number leaves the current machine in place.
Choosing a machine resets the frame, the time and the frame rate to zero, so
set `frame_rate` again before the next `set_machine_frame`. Changing frame
with no frame rate set raises `ValueError`. Frames are stepped one at a time,
forward or backward, to the requested frame.

The building blocks can be used on their own: `Crank`, `Shaft`, `Pulley`
(with `belt_to`) and `Cam` pass rotation along `RotationSource` objects
(`jackbox.rotation`); `Box` and `Sparty` respond to the cam's key drop;
`MusicBox` plays notes as its rotation passes their beats; `Machine`
(`jackbox.machine`) holds components, advances them together and draws all
backgrounds before all foregrounds. `MachineCFactory` and `Machine2Factory`
in `jackbox.factories` assemble the two complete machines.

`MachineSystemStandin` from `jackbox.standin` draws a simple placeholder
machine (an outline, a gear and its machine number and frame as text),
useful while wiring up the code that hosts a machine.

## What it does not do

- It opens no window and renders no pixels: drawing is only recorded on a
  `Graphics` object. Turning those calls into an image is left to the caller.
- It plays no sound by itself. `MusicBox`, `Machine2Factory` and
  `MachineSystem` take an optional `player`, a callable that is given the
  path of each sound file as its note comes up; without one, notes are
  tracked but nothing is heard. Systems made by `MachineSystemFactory` have
  no player.
- It has no command-line program and no dialog for choosing a machine; call
  `choose_machine` directly.