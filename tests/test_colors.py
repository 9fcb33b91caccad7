import pytest

from gamekit import colors
from gamekit.colors import get_b, get_g, get_r


def test_red_constant_channels():
    assert (get_r(colors.RED), get_g(colors.RED), get_b(colors.RED)) == (255, 0, 0)


def test_green_and_blue_constants():
    assert (get_r(colors.GREEN), get_g(colors.GREEN), get_b(colors.GREEN)) == (0, 255, 0)
    assert (get_r(colors.BLUE), get_g(colors.BLUE), get_b(colors.BLUE)) == (0, 0, 255)


def test_white_and_black():
    assert {get_r(colors.WHITE), get_g(colors.WHITE), get_b(colors.WHITE)} == {255}
    assert {get_r(colors.BLACK), get_g(colors.BLACK), get_b(colors.BLACK)} == {0}


@pytest.mark.parametrize("r,g,b", [(1, 2, 3), (200, 100, 50), (0, 255, 17)])
def test_round_trip_packed(r, g, b):
    packed = 0xFF000000 | (r << 16) | (g << 8) | b
    assert (get_r(packed), get_g(packed), get_b(packed)) == (r, g, b)


def test_alpha_is_ignored():
    assert get_r(0x00AB0000) == get_r(0xFFAB0000)