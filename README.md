# pixelhunt

A small arcade game. You steer a cursor with a joystick and land it on a
randomly placed target. Each hit adds a point, and the target then moves
to a new spot. The playfield is drawn into the frame buffer of a simulated
128x64 SSD1306 monochrome display. A simulated 5x5 LED matrix shows an
arrow that points toward the quadrant where the target sits.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing from the command line

```
pixelhunt [script] [--seed N] [--show]
```

The command plays the game from a script of inputs. `script` is a file
path. If it is left out or given as `-`, the script is read from standard
input. The command takes these options:

- `--seed N` seeds the random target placement, so a run can be repeated.
- `--show` prints the final screen as text, with `#` for a lit pixel and
  `.` for a dark one.

Each line of the script is one of the following. Text after `#` is
ignored, and so are blank lines.

- `X Y`: a pair of joystick readings, each from 0 to 4095. It plays one
  frame and advances the simulated clock by 1 ms.
- `A`, `B` or `JOY`: a button press at the current simulated time. Case
  does not matter.
- `wait MS`: advances the simulated clock by `MS` milliseconds.

For every full simulated second, the command writes a status report. The
report gives the joystick readings, the score, and `JOGANDO` (playing) or
`PAUSADO` (paused). At the end the command prints `final score: N`. If the
script cannot be read or contains a malformed line, the command writes the
error to standard error and exits with status 2.

Example:

```
# hold the stick to the right for a second, then pause
3000 2048
wait 1000
B
```

## How the game works

- Joystick axes are 12-bit ADC readings. A dead zone snaps readings from
  1900 to 2194 to the centre value 2048 (`apply_deadzone`).
- `choice_display_x` and `choice_display_y` map a reading to a pixel
  offset from the cursor's centre position (59, 27). The Y axis is
  inverted.
- The target is placed at x in 35–85 and y in 4–54 (`Game.new_target`).
- `Game.handle_button` handles the buttons:
  - Button A resets the score and moves the target.
  - Button B toggles pause.
  - `JOY` is accepted but changes nothing else.
  - A press is ignored when it comes no more than 200 ms after the last
    accepted press. The clock starts at 0, so presses in the first 200 ms
    are also ignored.
- `Game.step(vrx, vry)` plays one frame. While the game is paused it does
  not read the joystick. In every frame it shows the direction arrow for
  the target on the LED matrix. It returns `True` on a hit.
- `Game.alert_frames()` runs the alert for a hit. The LED matrix blinks
  fully on and off five times. The generator yields the PWM level of each
  toggle: 300 for on, 0 for off. The current level is kept in
  `Game.alert_level`.
- `Game.render()` draws the whole screen and sends it over the display's
  bus:
  - the 64x64 playfield frame, the target and the cursor;
  - the left panel: `SCR`, the score in two digits (`score_text`), then
    `RST <-`;
  - the right panel: `STS`, a play or pause glyph, then `PSE ->`.
- `Game.status_report()` returns the text of one status report.

## Using the pieces as a library

- `pixelhunt.font`: an 8x8 bitmap font with digits, letters and a few
  symbols. `glyph_index(char)` gives a character's glyph number; unknown
  characters map to the blank glyph. `glyph(char)` gives its eight column
  bytes.
- `pixelhunt.ssd1306`:
  - `SSD1306` is a display driver that keeps a page-organised frame
    buffer. It sends commands and data through a bus object that has a
    `write(address, data)` method.
  - `MemoryBus` is such a bus. It records every write in `writes`.
  - `Command` lists the controller's command bytes.
  - `config()` sends the power-up sequence. `send_data()` pushes the
    frame buffer.
  - Drawing methods: `pixel`, `fill`, `rect`, `line`, `hline`, `vline`,
    `draw_char` and `draw_string`. Drawing outside the display raises
    `IndexError`.
  - Reading back: `get_pixel` reads one pixel, and `render_text` returns
    the frame buffer as text.
- `pixelhunt.led_matrix`:
  - `LedMatrix` drives a 5x5 matrix wired in serpentine order.
    `update(pattern)` takes 25 on/off values in reading order and passes
    one 32-bit word per LED to its sink callable, last LED first.
  - `serpentine(pattern)` does the row reordering on its own. It raises
    `ValueError` unless the pattern has 25 entries.
  - `urgb_u32(r, g, b)` packs a colour into the GRB word the LEDs expect.
- `pixelhunt.game`: `Game`, `Button`, `direction_pattern` and the helper
  functions described above.
- `pixelhunt.cli`:
  - `parse_inputs(lines)` turns script lines into events.
  - `run(game, inputs, out)` plays the events and returns the score.
  - `main(argv)` is the command.

## What it does not do

- It does not talk to real hardware. The display, the LED matrix and the
  joystick exist only in memory.
- There is no live, real-time play. The game runs from a prepared script
  on a simulated clock.
- The screen is never shown while a game is running. You can only see it
  with `--show`, as text, after the script has finished.
- There is no sound output. The alert is the matrix blink and the PWM
  levels that `Game.alert_frames` yields.