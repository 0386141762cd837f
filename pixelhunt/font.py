"""8x8 bitmap font used by the OLED display.

Each glyph is eight column bytes; bit 0 of a byte is the top pixel.
"""

from __future__ import annotations

GLYPH_SIZE = 8

_GLYPHS: tuple[tuple[int, ...], ...] = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # blank
    (0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00),  # 0
    (0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00),  # 1
    (0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00),  # 2
    (0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00),  # 3
    (0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00, 0x00),  # 4
    (0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00),  # 5
    (0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00),  # 6
    (0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00),  # 7
    (0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00),  # 8
    (0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00),  # 9
    (0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00),  # A
    (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00),  # B
    (0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00),  # C
    (0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00),  # D
    (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00),  # E
    (0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00),  # F
    (0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00),  # G
    (0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00),  # H
    (0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00),  # I
    (0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00),  # J
    (0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00),  # K
    (0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00),  # L
    (0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00),  # M
    (0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00),  # N
    (0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00),  # O
    (0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00),  # P
    (0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00),  # Q
    (0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00),  # R
    (0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00),  # S
    (0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00),  # T
    (0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00),  # U
    (0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00),  # V
    (0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00),  # W
    (0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00),  # X
    (0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00),  # Y
    (0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00),  # Z
    (0x30, 0x4A, 0x4A, 0x4A, 0x4A, 0x4A, 0x3C, 0x00),  # a
    (0x7F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00),  # b
    (0x3C, 0x42, 0x42, 0x42, 0x42, 0x42, 0x42, 0x00),  # c
    (0x30, 0x48, 0x48, 0x48, 0x48, 0x48, 0x7F, 0x00),  # d
    (0x3C, 0x42, 0x4A, 0x4A, 0x4A, 0x4A, 0x44, 0x00),  # e
    (0x48, 0x7C, 0x4A, 0x02, 0x02, 0x02, 0x04, 0x00),  # f
    (0x4C, 0xBA, 0xAA, 0xAA, 0xAA, 0xAB, 0x45, 0x00),  # g
    (0x7F, 0x04, 0x02, 0x02, 0x02, 0x02, 0x7C, 0x00),  # h
    (0x00, 0x00, 0x00, 0x7D, 0x00, 0x00, 0x00, 0x00),  # i
    (0x20, 0x40, 0x40, 0x40, 0x44, 0x44, 0x3D, 0x00),  # j
    (0x00, 0x7E, 0x08, 0x14, 0x22, 0x40, 0x00, 0x00),  # k
    (0x00, 0x00, 0x42, 0x7E, 0x40, 0x00, 0x00, 0x00),  # l
    (0x02, 0x7C, 0x02, 0x7C, 0x02, 0x7C, 0x00, 0x00),  # m
    (0x00, 0x02, 0x7C, 0x02, 0x02, 0x7C, 0x00, 0x00),  # n
    (0x00, 0x3C, 0x42, 0x42, 0x42, 0x42, 0x3C, 0x00),  # o
    (0x02, 0x7E, 0x12, 0x12, 0x12, 0x12, 0x0C, 0x00),  # p
    (0x0C, 0x12, 0x12, 0x12, 0x12, 0x12, 0x7E, 0x00),  # q
    (0x02, 0x7E, 0x04, 0x02, 0x02, 0x02, 0x0C, 0x00),  # r
    (0x64, 0x4A, 0x4A, 0x4A, 0x4A, 0x4A, 0x30, 0x00),  # s
    (0x02, 0x3F, 0x42, 0x42, 0x42, 0x40, 0x20, 0x00),  # t
    (0x00, 0x3C, 0x40, 0x40, 0x40, 0x40, 0x3C, 0x00),  # u
    (0x00, 0x1C, 0x20, 0x40, 0x40, 0x20, 0x1C, 0x00),  # v
    (0x00, 0x3C, 0x40, 0x3C, 0x40, 0x3C, 0x00, 0x00),  # w
    (0x00, 0x44, 0x28, 0x10, 0x10, 0x28, 0x44, 0x00),  # x
    (0x00, 0x0C, 0x90, 0x90, 0x90, 0x90, 0xFC, 0x00),  # y
    (0x22, 0x52, 0x52, 0x52, 0x52, 0x4A, 0x44, 0x00),  # z
    (0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF),  # filled square
    (0x00, 0x00, 0x00, 0x5F, 0x5F, 0x00, 0x00, 0x00),  # !
    (0x00, 0x00, 0x30, 0x30, 0x00, 0x00, 0x00, 0x00),  # .
    (0x00, 0x00, 0x63, 0x63, 0x00, 0x00, 0x00, 0x00),  # :
    (0x18, 0x24, 0x42, 0x81, 0x81, 0x81, 0x81, 0x00),  # <
    (0x81, 0x81, 0x81, 0x81, 0x42, 0x24, 0x18, 0x00),  # >
    (0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x00),  # -
    (0x00, 0xFF, 0xFF, 0x00, 0x00, 0xFF, 0xFF, 0x00),  # pause
    (0xFF, 0xFF, 0x7E, 0x7E, 0x3C, 0x3C, 0x18, 0x18),  # play
)

FONT: bytes = bytes(b for g in _GLYPHS for b in g)

_SYMBOLS = {
    "*": 63,
    "!": 64,
    ".": 65,
    ":": 66,
    "<": 67,
    ">": 68,
    "-": 69,
    ",": 70,  # shown as the pause icon
    "+": 71,  # shown as the play icon
}


def glyph_index(char: str) -> int:
    """Return the glyph number for a character; unknown characters map to 0 (blank)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 11
    if "0" <= char <= "9":
        return ord(char) - ord("0") + 1
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 37
    return _SYMBOLS.get(char, 0)


def glyph(char: str) -> bytes:
    """Return the eight column bytes of a character's glyph."""
    start = glyph_index(char) * GLYPH_SIZE
    return FONT[start:start + GLYPH_SIZE]