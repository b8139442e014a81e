import pytest

from treasure.colors import lookup_color, to_visual_color

RGB565 = (11, 5, 5, 6, 0, 5)
RGB555 = (10, 5, 5, 5, 0, 5)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("darkslateblue", 0x483D8B),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("NaVy") == 0x80
    assert lookup_color("NONE") == -1


def test_lookup_joins_qualifier_with_space():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("light", "gray") == 0xD3D3D3


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark", "slate") == 0x2F4F4F
    assert lookup_color("light", "slate") == 0x778899
    assert lookup_color("light", "goldenrod") == 0xFAFAD2


def test_lookup_unknown_name_is_zero():
    assert lookup_color("no such colour") == 0
    assert lookup_color("snow", "storm") == 0


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("#FF99FF", 0xFF99FF),
        ("#00ffff", 0x00FFFF),
        ("#0x1A", 0x1A),
        ("#zz", 0),
        ("#", 0),
        ("#FFFFFFFF", -1),
        ("#12ag", 0x12A),
    ],
)
def test_lookup_hex(spec, expected):
    assert lookup_color(spec) == expected


def test_hex_ignores_qualifier():
    assert lookup_color("#102030", "white") == 0x102030


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x0, 0xFFFFFF, -1])
def test_deep_visual_keeps_color(color):
    assert to_visual_color(color, 24, RGB565) == color
    assert to_visual_color(color, 32, RGB565) == color


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        (0xFFFFFF, 0xFFFF),
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
        (0x000000, 0x0000),
    ],
)
def test_rgb565(color, expected):
    assert to_visual_color(color, 16, RGB565) == expected


def test_rgb555_white():
    assert to_visual_color(0xFFFFFF, 15, RGB555) == 0x7FFF


def test_shallow_visual_channels_stay_in_masks():
    for color in (0x123456, 0xABCDEF, 0x7F7F7F):
        pixel = to_visual_color(color, 16, RGB565)
        assert 0 <= pixel <= 0xFFFF


def test_wrong_shift_count_raises():
    with pytest.raises(ValueError):
        to_visual_color(0xFFFFFF, 16, (11, 5, 5))


def test_channel_too_wide_raises():
    with pytest.raises(ValueError):
        to_visual_color(0xFFFFFF, 16, (0, 17, 0, 5, 0, 5))