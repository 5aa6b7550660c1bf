import numpy as np
import pytest

from chromacss.css import CssFormat
from chromacss.errors import InvalidArgumentError, UnrecognizedFormatError, MalformedColorError
from chromacss.palettes import ColorPalette
from chromacss.scales import LinearScale


def test_from_list_keeps_order(five_colors):
    assert five_colors.colors == ("#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff")
    assert five_colors.size() == 5
    assert len(five_colors) == 5
    assert list(five_colors) == list(five_colors.colors)


def test_color_at_wraps(black_white):
    assert black_white.color_at(0) == "#000"
    assert black_white.color_at(1) == "#fff"
    assert black_white.color_at(2) == "#000"
    assert black_white.color_at(3) == "#fff"
    assert black_white.color_at(-1) == "#fff"
    assert black_white.color_at(-2) == "#000"
    assert black_white.color_at(10**12 + 1) == "#fff"


def test_color_at_rounds_halves_away_from_zero(five_colors):
    assert five_colors.color_at(1.4) == "#00ff00"
    assert five_colors.color_at(2.5) == "#ffff00"
    assert five_colors.color_at(-0.4) == "#ff0000"
    # -2.5 -> -3 -> 2
    assert five_colors.color_at(-2.5) == "#0000ff"


def test_color_at_with_scale(five_colors):
    scale = LinearScale().set_domain(0, 100).set_range(0, 4)
    assert five_colors.color_at(0, scale) == "#ff0000"
    assert five_colors.color_at(50, scale) == "#0000ff"
    assert five_colors.color_at(100, scale) == "#00ffff"
    # 31.25 -> 1.25 -> 1
    assert five_colors.color_at(31.25, scale) == "#00ff00"


def test_scale_for(five_colors):
    scale = five_colors.scale_for(0, 10)
    assert scale.domain == (0.0, 10.0)
    assert scale.range == (0.0, 4.0)
    assert five_colors.color_at(5, scale) == "#0000ff"
    assert five_colors.color_at(10, scale) == "#00ffff"


def test_color_at_non_finite(five_colors):
    with pytest.raises(InvalidArgumentError):
        five_colors.color_at(float("nan"))
    with pytest.raises(InvalidArgumentError):
        five_colors.color_at(float("inf"))


def test_empty_palette():
    palette = ColorPalette.from_list([])
    assert palette.size() == 0
    with pytest.raises(InvalidArgumentError):
        palette.color_at(0)


def test_rejects_bad_input():
    with pytest.raises(InvalidArgumentError):
        ColorPalette.from_list("#ffffff")
    with pytest.raises(InvalidArgumentError):
        ColorPalette.from_list(["#ffffff", 3])


def test_validate():
    ColorPalette.from_list(["#ffffff", "hsl(1,2%,3%)"], validate=True)
    with pytest.raises(UnrecognizedFormatError):
        ColorPalette.from_list(["#ffffff", "white"], validate=True)
    with pytest.raises(MalformedColorError):
        ColorPalette.from_list(["rgb(1,2)"], validate=True)
    # unchecked palettes accept anything until a color is converted
    assert ColorPalette.from_list(["white"]).color_at(0) == "white"


def test_from_hue_range():
    palette = ColorPalette.from_hue_range(0, 3, 100, 50)
    assert palette.colors == (
        "hsla(0,100%,50%,1.0)",
        "hsla(1,100%,50%,1.0)",
        "hsla(2,100%,50%,1.0)",
    )


def test_from_hue_range_descending():
    palette = ColorPalette.from_hue_range(5, 3, 100, 50, 1)
    assert palette.colors == ("hsla(5,100%,50%,1.0)", "hsla(4,100%,50%,1.0)")


def test_from_hue_range_alpha():
    palette = ColorPalette.from_hue_range(10, 11, 20, 30, 0.5)
    assert palette.colors == ("hsla(10,20%,30%,0.5)",)


def test_from_hue_range_empty_warns():
    with pytest.warns(UserWarning, match="empty"):
        palette = ColorPalette.from_hue_range(7, 7, 100, 50)
    assert palette.size() == 0


def test_immutable(black_white):
    with pytest.raises(AttributeError):
        black_white._colors = ()
    with pytest.raises(AttributeError):
        black_white.extra = 1
    assert black_white.colors == ("#000", "#fff")


def test_reverse(five_colors):
    reversed_palette = five_colors.reverse()
    assert reversed_palette.colors == five_colors.colors[::-1]
    assert five_colors.colors[0] == "#ff0000"


def test_convert(black_white):
    assert black_white.convert(CssFormat.HEX).colors == ("#000000", "#ffffff")
    assert black_white.convert("rgba").colors == ("rgba(0,0,0,1.0)", "rgba(255,255,255,1.0)")


def test_to_rgb_array(black_white):
    arr = black_white.to_rgb_array()
    assert arr.shape == (2, 3)
    np.testing.assert_array_equal(arr, [[0, 0, 0], [255, 255, 255]])


def test_to_rgb_array_empty():
    assert ColorPalette.from_list([]).to_rgb_array().shape == (0, 3)


def test_equality_and_hash(black_white):
    same = ColorPalette.from_list(("#000", "#fff"))
    assert same == black_white
    assert hash(same) == hash(black_white)
    assert black_white != black_white.reverse()
    assert len({same, black_white}) == 1


def test_repr(black_white):
    assert repr(black_white) == "ColorPalette(['#000', '#fff'])"


def test_color_at_rounds_without_float_drift():
    assert ColorPalette.from_list(["a", "b", "c"]).color_at(0.49999999999999994) == "a"
    assert ColorPalette.from_list(["a", "b"]).color_at(float(2**52 + 1)) == "b"
