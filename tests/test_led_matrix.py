import pytest

from pixelhunt.led_matrix import NUM_PIXELS, LedMatrix, serpentine, urgb_u32


def test_urgb_red_in_middle_byte():
    assert urgb_u32(10, 0, 0) == 0x000A00


def test_urgb_green_in_high_byte():
    assert urgb_u32(0, 255, 0) == 0xFF0000


def test_urgb_truncates_floats():
    assert urgb_u32(10.9, 0.2, 3.7) == urgb_u32(10, 0, 3)


def test_serpentine_reverses_odd_rows():
    result = serpentine([i % 2 == 0 for i in range(25)])
    source = list(range(25))
    order = [0, 1, 2, 3, 4, 9, 8, 7, 6, 5, 10, 11, 12, 13, 14, 19, 18, 17, 16, 15, 20, 21, 22, 23, 24]
    assert result == [source[i] % 2 == 0 for i in order]


def test_serpentine_is_an_involution():
    pattern = [(i * 7) % 3 == 0 for i in range(25)]
    assert serpentine(serpentine(pattern)) == pattern


@pytest.mark.parametrize("size", [0, 24, 26])
def test_serpentine_rejects_wrong_length(size):
    with pytest.raises(ValueError):
        serpentine([False] * size)


def test_update_sends_one_word_per_led():
    words = []
    matrix = LedMatrix(words.append, (10, 0, 0))
    matrix.update([True] * NUM_PIXELS)
    assert len(words) == NUM_PIXELS
    assert set(words) == {urgb_u32(10, 0, 0) << 8}


def test_all_off_sends_zeros():
    words = []
    LedMatrix(words.append).update([False] * NUM_PIXELS)
    assert words == [0] * NUM_PIXELS


def test_first_pixel_is_sent_last():
    words = []
    pattern = [False] * NUM_PIXELS
    pattern[0] = True
    LedMatrix(words.append).update(pattern)
    assert words[-1] > 0
    assert words[:-1] == [0] * (NUM_PIXELS - 1)


def test_update_stores_serpentine_buffer():
    pattern = [False] * NUM_PIXELS
    pattern[5] = True
    matrix = LedMatrix(lambda word: None)
    matrix.update(pattern)
    assert matrix.buffer == serpentine(pattern)
    assert matrix.buffer[9]


def test_set_leds_uses_given_colour():
    words = []
    matrix = LedMatrix(words.append)
    matrix.buffer = [True] * NUM_PIXELS
    matrix.set_leds(0, 0, 255)
    assert set(words) == {urgb_u32(0, 0, 255) << 8}
    assert all(word <= 0xFFFFFFFF for word in words)