import pytest

from chromacss.palettes import ColorPalette
from chromacss.scales import LinearScale


@pytest.fixture
def black_white():
    return ColorPalette.from_list(["#000", "#fff"])


@pytest.fixture
def five_colors():
    return ColorPalette.from_list(["#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff"])


@pytest.fixture
def scale():
    return LinearScale().set_domain(10, 20).set_range(0, 5)
