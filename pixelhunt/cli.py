"""Command line driver that plays the game from a script of inputs."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .game import Button, Game
from .led_matrix import LedMatrix
from .ssd1306 import SSD1306, MemoryBus

FRAME_US = 1_000
REPORT_US = 1_000_000

_BUTTON_NAMES = {"A": Button.A, "B": Button.B, "JOY": Button.JOYSTICK}


@dataclass(frozen=True)
class Move:
    vrx: int
    vry: int


@dataclass(frozen=True)
class Press:
    button: Button


@dataclass(frozen=True)
class Wait:
    ms: int


Event = Move | Press | Wait


def parse_inputs(lines: Iterable[str]) -> list[Event]:
    """Parse script lines: 'X Y' readings, 'A'/'B'/'JOY' presses, 'wait MS'."""
    events: list[Event] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        head = parts[0].upper()
        try:
            if len(parts) == 1 and head in _BUTTON_NAMES:
                events.append(Press(_BUTTON_NAMES[head]))
            elif len(parts) == 2 and head == "WAIT":
                ms = int(parts[1])
                if ms < 0:
                    raise ValueError("negative wait")
                events.append(Wait(ms))
            elif len(parts) == 2:
                vrx, vry = (int(p) for p in parts)
                if not (0 <= vrx <= 4095 and 0 <= vry <= 4095):
                    raise ValueError("reading out of range")
                events.append(Move(vrx, vry))
            else:
                raise ValueError("unrecognised input")
        except ValueError as exc:
            raise ValueError(f"line {number}: {raw.strip()!r}: {exc}") from None
    return events


def run(game: Game, inputs: Iterable[Event], out: TextIO) -> int:
    """Play the events, writing a status report each simulated second; return the score."""
    clock = 0
    next_report = REPORT_US

    def advance(us: int) -> None:
        nonlocal clock, next_report
        clock += us
        while clock >= next_report:
            out.write(game.status_report())
            next_report += REPORT_US

    for event in inputs:
        if isinstance(event, Press):
            game.handle_button(event.button, clock)
        elif isinstance(event, Wait):
            advance(event.ms * 1000)
        else:
            if game.step(event.vrx, event.vry):
                for _ in game.alert_frames():
                    pass
            game.render()
            advance(FRAME_US)
    return game.score


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pixelhunt", description="Play the target-hunting game from a script."
    )
    parser.add_argument("script", nargs="?", default="-", help="input script, '-' for stdin")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--show", action="store_true", help="print the final screen")
    args = parser.parse_args(argv)

    try:
        if args.script == "-":
            events = parse_inputs(sys.stdin)
        else:
            with open(args.script, encoding="utf-8") as handle:
                events = parse_inputs(handle)
    except (OSError, ValueError) as exc:
        print(f"pixelhunt: {exc}", file=sys.stderr)
        return 2

    words: list[int] = []
    game = Game(SSD1306(MemoryBus()), LedMatrix(words.append), random.Random(args.seed))
    score = run(game, events, sys.stdout)
    if args.show:
        game.render()
        print(game.display.render_text())
    print(f"final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())