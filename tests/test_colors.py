import pytest

from solong.colors import convert_color, lookup_color, mask_shifts, text_to_rgb

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == lookup_color("darkred")


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_text_hash_is_hexadecimal():
    assert text_to_rgb("#ff0000") == 0xFF0000
    assert text_to_rgb("#00FF00", None) == lookup_color("green")


def test_text_hash_stops_at_non_hex():
    assert text_to_rgb("#ffzz") == 0xFF
    assert text_to_rgb("#zz") == 0


def test_text_joins_suffix():
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")
    assert text_to_rgb("dark", "slate") == lookup_color("darkslategray")


def test_text_unknown_gives_zero():
    assert text_to_rgb("nothing") == 0
    assert text_to_rgb("nothing", "here") == 0


def test_text_none_is_transparent():
    assert text_to_rgb("None") == -1


def test_mask_shifts_bits_sum_to_depth():
    shifts = mask_shifts(*RGB565)
    assert shifts[1] + shifts[3] + shifts[5] == 16
    assert shifts[4] == 0


def test_mask_shifts_rejects_zero():
    with pytest.raises(ValueError):
        mask_shifts(0, 0x00FF00, 0x0000FF)


def test_deep_visual_keeps_color():
    shifts = mask_shifts(*RGB565)
    assert convert_color(0x123456, 24, shifts) == 0x123456
    assert convert_color(0xABCDEF, 32, shifts) == 0xABCDEF


def test_eight_bit_masks_are_identity():
    shifts = mask_shifts(*RGB888)
    for color in (0x000000, 0x123456, 0xFFFFFF, 0x80FF01):
        assert convert_color(color, 16, shifts) == color


def test_full_channels_fill_their_masks():
    shifts = mask_shifts(*RGB565)
    red, green, blue = RGB565
    assert convert_color(0xFFFFFF, 16, shifts) == red | green | blue
    assert convert_color(0xFF0000, 16, shifts) == red
    assert convert_color(0x00FF00, 16, shifts) == green
    assert convert_color(0x0000FF, 16, shifts) == blue
    assert convert_color(0x000000, 16, shifts) == 0


def test_converted_value_stays_within_masks():
    shifts = mask_shifts(*RGB565)
    combined = RGB565[0] | RGB565[1] | RGB565[2]
    for color in (0x123456, 0xABCDEF, 0x7F7F7F):
        assert convert_color(color, 16, shifts) & ~combined == 0