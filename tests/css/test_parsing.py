import pytest

from chromacss.css import to_rgb, to_hsl, to_alpha
from chromacss.css.parsing import paren_fields, parse_paren_value, parse_paren_channels, parse_hex_channels
from chromacss.errors import MalformedColorError, UnrecognizedFormatError


def test_paren_fields():
    assert paren_fields("hsla(100, 100%, 50%, 0.5)") == ["100", "100%", "50%", "0.5"]


def test_parse_paren_value_strips_percent():
    assert parse_paren_value("hsl(100, 40%, 50%)", 1) == 40.0
    assert parse_paren_value("rgba(1,2,3, 0.25 )", 3) == 0.25


def test_parse_paren_channels_truncates():
    assert parse_paren_channels("rgb(10.7, 20.2, 30.9)") == (10, 20, 30)
    assert parse_paren_channels("hsla(100, 100%, 50%, 0.5)") == (100, 100, 50)


def test_parse_hex_channels():
    assert parse_hex_channels("#1f77b4") == (31, 119, 180)
    assert parse_hex_channels("#FFFFFF") == (255, 255, 255)
    assert parse_hex_channels(" #000000 ") == (0, 0, 0)


def test_parse_hex_shorthand():
    assert parse_hex_channels("#fff") == (255, 255, 255)
    assert parse_hex_channels("#1a2") == (17, 170, 34)


def test_to_rgb():
    assert to_rgb("#ff0000") == (255, 0, 0)
    assert to_rgb("rgb(1,2,3)") == (1, 2, 3)
    assert to_rgb("rgba(4,5,6,0.5)") == (4, 5, 6)
    assert to_rgb("hsl(120,100%,50%)") == (0, 255, 0)
    assert to_rgb("hsla(240,100%,50%,0.1)") == (0, 0, 255)


def test_to_hsl():
    assert to_hsl("#ff0000") == (0, 100, 50)
    assert to_hsl("rgb(0,255,0)") == (120, 100, 50)
    assert to_hsl("rgba(0,0,255,0.5)") == (240, 100, 50)
    assert to_hsl("hsl(200,50%,40%)") == (200, 50, 40)
    assert to_hsl("hsla(10,20%,30%,0.4)") == (10, 20, 30)


def test_to_alpha():
    assert to_alpha("#ff0000") == 1.0
    assert to_alpha("rgb(1,2,3)") == 1.0
    assert to_alpha("hsl(1,2%,3%)") == 1.0
    assert to_alpha("rgba(1,2,3,0.3)") == 0.3
    assert to_alpha("hsla(1,2%,3%,0)") == 0.0


@pytest.mark.parametrize("color", [
    "rgb 1,2,3",
    "rgb)1,2,3(",
    "rgb(1,2,3",
    "rgb(1,2)",
    "rgb(a,b,c)",
    "hsl(1,2%,x%)",
    "rgb(nan,0,0)",
    "rgb(1_0,0,0)",
    "rgb(inf,0,0)",
    "rgb(infinity,0,0)",
    "rgb(\u0661,0,0)",
    "rgb(0x10,0,0)",
    "rgb(,0,0)",
    "#12",
    "#12345",
    "#gggggg",
    "#1234567",
    "#11223344",
])
def test_malformed_colors(color):
    with pytest.raises(MalformedColorError):
        to_rgb(color)


def test_missing_alpha_is_malformed():
    with pytest.raises(MalformedColorError, match="at least 4 values"):
        to_alpha("rgba(1,2,3)")


def test_malformed_keeps_color():
    with pytest.raises(MalformedColorError) as info:
        to_rgb("rgb(a,2,3)")
    assert info.value.color == "rgb(a,2,3)"


def test_overflowing_channel_keeps_cause():
    with pytest.raises(MalformedColorError) as info:
        to_rgb("rgb(1e400,0,0)")
    assert isinstance(info.value.__cause__, OverflowError)


@pytest.mark.parametrize("color", ["rgba(0,0,0,0_5)", "rgba(0,0,0,nan)", "hsla(0,0%,0%,1 0)"])
def test_malformed_alpha(color):
    with pytest.raises(MalformedColorError):
        to_alpha(color)


def test_number_syntax():
    assert to_rgb("rgb(+10,1.,.5e1)") == (10, 1, 5)
    assert to_alpha("rgba(0,0,0,5E-1)") == 0.5


def test_unrecognized_extraction_fails_fast():
    for extract in (to_rgb, to_hsl, to_alpha):
        with pytest.raises(UnrecognizedFormatError):
            extract("red")
