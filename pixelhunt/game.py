"""Game rules for the joystick target-hunting game."""

from __future__ import annotations

import random
from collections.abc import Iterator
from enum import IntEnum
from typing import Protocol

from .led_matrix import LedMatrix
from .ssd1306 import SSD1306

ADC_MID = 2048
ADC_HALF = 2047
_STEP = ADC_HALF // 27
DEADZONE_LOW = 1900
DEADZONE_HIGH = 2194
DEBOUNCE_US = 200_000
CENTER_X = 59
CENTER_Y = 27
TARGET_X_MIN = 35
TARGET_Y_MIN = 4
TARGET_SPAN = 51
ALERT_LEVEL = 300
ALERT_TOGGLES = 10


def _pattern(rows: str) -> tuple[bool, ...]:
    return tuple(ch == "1" for ch in rows if ch in "01")


MATRIX_OFF = _pattern("00000 00000 00000 00000 00000")
MATRIX_ON = _pattern("11111 11111 11111 11111 11111")
MATRIX_UPPER_RIGHT = _pattern("00111 00011 00101 01000 10000")
MATRIX_UPPER_LEFT = _pattern("11100 11000 10100 00010 00001")
MATRIX_BOTTOM_RIGHT = _pattern("10000 01000 00101 00011 00111")
MATRIX_BOTTOM_LEFT = _pattern("00001 00010 10100 11000 11100")


class Button(IntEnum):
    """Input buttons, valued by the GPIO pin they sit on."""

    A = 5
    B = 6
    JOYSTICK = 22


class RandomSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


def choice_display_x(joy_input: int) -> int:
    """Map an X axis reading to a horizontal offset from the centre."""
    if joy_input < ADC_MID:
        return -((ADC_HALF - joy_input) // _STEP)
    return (joy_input - ADC_MID) // _STEP


def choice_display_y(joy_input: int) -> int:
    """Map a Y axis reading to a vertical offset from the centre (inverted)."""
    if joy_input < ADC_MID:
        return (ADC_HALF - joy_input) // _STEP
    return -((joy_input - ADC_MID) // _STEP)


def apply_deadzone(value: int) -> int:
    """Snap readings near the middle of the range to the exact middle."""
    if DEADZONE_LOW <= value <= DEADZONE_HIGH:
        return ADC_MID
    return value


def score_text(num: int) -> str:
    """Format a score as two characters, zero-padded below ten."""
    if num < 9:
        return "0" + chr(ord("0") + num)
    return chr(ord("0") + num // 10) + chr(ord("0") + num % 10)


def direction_pattern(pos_x: int, pos_y: int) -> tuple[bool, ...]:
    """Return the matrix arrow pointing towards the target's quadrant."""
    upper = pos_y <= 31
    if pos_x <= 63:
        return MATRIX_UPPER_LEFT if upper else MATRIX_BOTTOM_LEFT
    return MATRIX_UPPER_RIGHT if upper else MATRIX_BOTTOM_RIGHT


class Game:
    """State of one game: target, cursor, score and pause flag."""

    def __init__(
        self,
        display: SSD1306,
        matrix: LedMatrix,
        rng: RandomSource | None = None,
    ) -> None:
        self.display = display
        self.matrix = matrix
        self.rng = rng if rng is not None else random.Random()
        self.paused = False
        self.score = 0
        self.last_press_us = 0
        self.vrx = 0
        self.vry = 0
        self.cursor_x = 0
        self.cursor_y = 0
        self.alert_level = 0
        self.pos_x = TARGET_X_MIN
        self.pos_y = TARGET_Y_MIN
        self.new_target()

    def _random_offset(self) -> int:
        return (self.rng.getrandbits(32) & 0xFF) % TARGET_SPAN

    def new_target(self) -> tuple[int, int]:
        """Place the target at a fresh random position and return it."""
        self.pos_x = TARGET_X_MIN + self._random_offset()
        self.pos_y = TARGET_Y_MIN + self._random_offset()
        return self.pos_x, self.pos_y

    def handle_button(self, button: Button, now_us: int) -> bool:
        """Handle a button press; return False if it was debounced away."""
        if ((now_us - self.last_press_us) & 0xFFFFFFFF) <= DEBOUNCE_US:
            return False
        self.last_press_us = now_us & 0xFFFFFFFF
        if button == Button.A:
            self.score = 0
            self.new_target()
        elif button == Button.B:
            self.paused = not self.paused
        return True

    def step(self, vrx: int, vry: int) -> bool:
        """Advance one frame with the given joystick readings; return True on a hit."""
        scored = False
        if not self.paused:
            self.vrx = apply_deadzone(vrx)
            self.vry = apply_deadzone(vry)
            self.cursor_x = CENTER_X + choice_display_x(self.vrx)
            self.cursor_y = CENTER_Y + choice_display_y(self.vry)
            if (self.cursor_x, self.cursor_y) == (self.pos_x, self.pos_y):
                self.score += 1
                scored = True
                self.new_target()
        self.matrix.update(direction_pattern(self.pos_x, self.pos_y))
        return scored

    def alert_frames(self) -> Iterator[int]:
        """Blink the matrix for a hit, yielding the PWM level of each toggle."""
        for count in range(ALERT_TOGGLES):
            on = count % 2 == 0
            self.alert_level = ALERT_LEVEL if on else 0
            self.matrix.update(MATRIX_ON if on else MATRIX_OFF)
            yield self.alert_level

    def status_report(self) -> str:
        """Return the periodic serial status text."""
        status = "PAUSADO" if self.paused else "JOGANDO"
        return (
            f"(JOYSTICK) X: {self.vrx} | Y: {self.vry}\n"
            f"(SCORE) {self.score}\n"
            f"(STATUS) {status}\n"
            "\n"
        )

    def render(self) -> None:
        """Draw the whole screen and push it to the display."""
        ssd = self.display
        ssd.fill(False)
        ssd.rect(0, 31, 64, 64, True, False)
        ssd.draw_char("*", self.pos_x, self.pos_y, False)
        ssd.draw_char("*", self.cursor_x, self.cursor_y, False)

        ssd.draw_string("SCR", 4, 4, False)
        ssd.draw_string(score_text(self.score), 4, 14, False)
        ssd.draw_string("RST", 4, 43, False)
        ssd.draw_string("<-", 8, 53, False)

        ssd.draw_string("STS", 99, 4, False)
        ssd.draw_char("," if self.paused else "+", 107, 14, False)
        ssd.draw_string("PSE", 99, 43, False)
        ssd.draw_string("->", 103, 53, False)

        ssd.send_data()