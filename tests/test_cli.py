import io

import pytest

from pixelhunt.cli import Move, Press, Wait, main, parse_inputs, run
from pixelhunt.game import Button, Game
from pixelhunt.led_matrix import LedMatrix
from pixelhunt.ssd1306 import SSD1306, MemoryBus


class FixedRandom:
    def __init__(self, values):
        self.values = list(values)

    def getrandbits(self, k):
        return self.values.pop(0) if self.values else 0


def make_game(values):
    return Game(SSD1306(MemoryBus()), LedMatrix(lambda word: None), FixedRandom(values))


def test_parse_inputs():
    events = parse_inputs(["2048 2048", "a", "wait 300", "# comment", "", "JOY  # press"])
    assert events == [Move(2048, 2048), Press(Button.A), Wait(300), Press(Button.JOYSTICK)]


@pytest.mark.parametrize("line", ["hello", "1 2 3", "5000 10", "wait -1", "x y"])
def test_parse_inputs_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_inputs([line])


def test_run_scores_on_hit():
    game = make_game([24, 23, 0, 0])
    out = io.StringIO()
    score = run(game, [Move(2048, 2048), Move(2048, 2048)], out)
    assert score == 1
    assert out.getvalue() == ""


def test_run_reports_each_second():
    game = make_game([0, 0])
    out = io.StringIO()
    run(game, [Wait(2500)], out)
    assert out.getvalue().count("(SCORE) 0") == 2


def test_run_pause_button_blocks_scoring():
    game = make_game([24, 23])
    out = io.StringIO()
    score = run(game, [Wait(300), Press(Button.B), Move(2048, 2048), Wait(1000)], out)
    assert score == 0
    assert "(STATUS) PAUSADO" in out.getvalue()


def test_main_with_script(tmp_path, capsys):
    script = tmp_path / "moves.txt"
    script.write_text("2048 2048\nwait 1000\n", encoding="utf-8")
    assert main([str(script), "--seed", "1", "--show"]) == 0
    output = capsys.readouterr().out
    assert "(STATUS) JOGANDO" in output
    assert "final score:" in output
    screen_rows = [row for row in output.splitlines() if set(row) <= {"#", "."} and len(row) == 128]
    assert len(screen_rows) == 64


def test_main_bad_script(tmp_path, capsys):
    script = tmp_path / "bad.txt"
    script.write_text("nonsense here now\n", encoding="utf-8")
    assert main([str(script)]) == 2
    assert "line 1" in capsys.readouterr().err