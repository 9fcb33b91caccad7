"""Packed 0xAARRGGBB colour constants and channel helpers."""

WHITE = 0xFFFFFFFF
BLACK = 0x00000000
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF


def get_r(color: int) -> int:
    """Return the red channel (0-255) of a packed colour."""
    return (color >> 16) & 0xFF


def get_g(color: int) -> int:
    """Return the green channel (0-255) of a packed colour."""
    return (color >> 8) & 0xFF


def get_b(color: int) -> int:
    """Return the blue channel (0-255) of a packed colour."""
    return color & 0xFF