import pytest

from chromacss.css import format_alpha, format_hex, format_rgb, format_rgba, format_hsl, format_hsla
from chromacss.errors import InvalidArgumentError


def test_format_alpha():
    assert format_alpha(1) == "1.0"
    assert format_alpha(0.5) == "0.5"
    assert format_alpha(0.1) == "0.1"


def test_builders():
    assert format_hex(255, 0, 16) == "#ff0010"
    assert format_rgb(1, 2, 3) == "rgb(1,2,3)"
    assert format_rgba(0.5, 1, 2, 3) == "rgba(1,2,3,0.5)"
    assert format_hsl(10, 20, 30) == "hsl(10,20%,30%)"
    assert format_hsla(1, 10, 20, 30) == "hsla(10,20%,30%,1.0)"


def test_builders_accept_sequences():
    assert format_rgb((1, 2, 3)) == "rgb(1,2,3)"
    assert format_hsla(0.25, [10, 20, 30]) == "hsla(10,20%,30%,0.25)"


def test_builders_require_three_channels():
    with pytest.raises(InvalidArgumentError):
        format_rgb(1, 2)
    with pytest.raises(InvalidArgumentError):
        format_hsla(0.5)
