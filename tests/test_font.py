import pytest

from pixelhunt.font import FONT, GLYPH_SIZE, glyph, glyph_index


def test_digit_zero_glyph():
    assert glyph("0") == bytes([0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00])


def test_filled_square_glyph():
    assert glyph("*") == bytes([0xFF] * 8)


def test_play_glyph():
    assert glyph("+") == bytes([0xFF, 0xFF, 0x7E, 0x7E, 0x3C, 0x3C, 0x18, 0x18])


@pytest.mark.parametrize(
    "char, index",
    [("A", 11), ("0", 1), ("a", 37), ("*", 63), ("!", 64), ("+", 71), (",", 70)],
)
def test_glyph_index_offsets(char, index):
    assert glyph_index(char) == index


@pytest.mark.parametrize("char", [" ", "?", "#"])
def test_unknown_characters_are_blank(char):
    assert glyph_index(char) == 0
    assert glyph(char) == bytes(GLYPH_SIZE)


def test_every_glyph_has_eight_bytes():
    chars = "ABCXYZabcxyz0123456789*!.:<>-,+"
    assert all(len(glyph(c)) == GLYPH_SIZE for c in chars)
    assert len(FONT) % GLYPH_SIZE == 0


def test_upper_and_lower_case_differ():
    assert glyph("g") != glyph("G")


@pytest.mark.parametrize("bad", ["", "AB"])
def test_glyph_index_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        glyph_index(bad)