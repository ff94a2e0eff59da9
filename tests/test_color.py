import pytest

from ptsd.color import Color, Colors


def test_from_name_red():
    assert Color.from_name(Colors.RED) == Color(255, 0, 0, 255)


def test_from_name_is_opaque_and_matches_hex_value():
    color = Color.from_name(Colors.STEEL_BLUE)
    assert color.a == 255
    assert Color.from_hex(int(Colors.STEEL_BLUE) << 8 | 0xFF) == color


def test_aliases_share_value():
    assert Color.from_name(Colors.CYAN) == Color.from_name(Colors.AQUA)
    assert Color.from_name(Colors.CYAN) == Color(0, 255, 255, 255)
    assert Color.from_name(Colors.MAGENTA) == Color.from_name(Colors.FUCHSIA)
    assert Color.from_name(Colors.MAGENTA) == Color(255, 0, 255, 255)


def test_from_hex_int_and_string_agree():
    assert Color.from_hex("12345678") == Color.from_hex(0x12345678)


@pytest.mark.parametrize("text", ["0x12345678", "  12345678", "12345678zz"])
def test_from_hex_string_prefix_forms(text):
    assert Color.from_hex(text) == Color.from_hex("12345678")


def test_from_hex_invalid_string():
    with pytest.raises(ValueError):
        Color.from_hex("zz")


@pytest.mark.parametrize("components", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_from_rgb_out_of_range(components):
    with pytest.raises(ValueError):
        Color.from_rgb(*components)


def test_from_rgb_keeps_components():
    assert tuple(Color.from_rgb(10, 20, 30, 40)) == (10, 20, 30, 40)


def test_default_alpha_is_opaque():
    assert Color.from_rgb(1, 2, 3).a == Color(1, 2, 3).a == 255


def test_to_sdl_color_round_trip():
    color = Color.from_rgb(12, 34, 56, 78)
    assert Color.from_rgb(*color.to_sdl_color()) == color


def test_string_form():
    assert str(Color(1, 2, 3, 4)) == "Color(1,2,3,4)"


def test_from_hsl_red():
    assert Color.from_hsl(0, 1, 0.5) == Color(255, 0, 0, 255)


def test_from_hsl_achromatic_is_gray():
    color = Color.from_hsl(0.7, 0, 0.4)
    assert color.r == color.g == color.b
    assert color.a == 255


def test_from_hsv_red():
    assert Color.from_hsv(0, 1, 1) == Color(255, 0, 0, 255)


def test_from_hsv_unsaturated_keeps_alpha_unscaled():
    color = Color.from_hsv(0.3, 0, 0.5, 1.0)
    assert color.r == color.g == color.b
    assert color.a == 1


def test_from_hsv_full_hue_wraps_to_zero():
    assert Color.from_hsv(1.0, 1, 1) == Color.from_hsv(0.0, 1, 1)


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        color.r = 5
    assert tuple(color) == (1, 2, 3, 255)