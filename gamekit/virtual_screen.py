"""Fixed-size virtual screen scaled onto a window of any size."""

from __future__ import annotations

import enum
from typing import Optional, Tuple

from gamekit.vector2 import Vector2


class ScalingMode(enum.Enum):
    """How the virtual screen fits the window."""

    STRETCH_TO_FILL = "stretch_to_fill"
    KEEP_ASPECT = "keep_aspect"


class VirtualScreen:
    """Scaling and coordinate mapping between a virtual screen and a window."""

    def __init__(
        self,
        width: int,
        height: int,
        mode: ScalingMode = ScalingMode.KEEP_ASPECT,
        background_color: int = 0x00FFFF,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid virtual screen size {width}x{height}")
        self.width = width
        self.height = height
        self.mode = mode
        self.background_color = background_color
        self.window_size: Optional[Tuple[int, int]] = None
        self.draw_offset = Vector2(0, 0)
        self.scale_ratio = Vector2(1.0, 1.0)

    def update_scaling(self, window_width: int, window_height: int) -> bool:
        """Recompute scale and offset for a window size; False if unchanged."""
        if self.window_size == (window_width, window_height):
            return False
        self.window_size = (window_width, window_height)

        sx = window_width / self.width
        sy = window_height / self.height
        if self.mode is ScalingMode.STRETCH_TO_FILL:
            self.scale_ratio = Vector2(sx, sy)
            self.draw_offset = Vector2(0, 0)
        else:
            scale = min(sx, sy)
            self.scale_ratio = Vector2(scale, scale)
            draw_w = int(self.width * scale)
            draw_h = int(self.height * scale)
            self.draw_offset = Vector2(
                int((window_width - draw_w) / 2), int((window_height - draw_h) / 2)
            )
        return True

    def draw_size(self) -> Tuple[int, int]:
        """Size in window pixels of the scaled virtual screen."""
        return (
            int(self.width * self.scale_ratio.x),
            int(self.height * self.scale_ratio.y),
        )

    def to_virtual(self, x: int, y: int) -> Tuple[int, int]:
        """Map a window position to virtual screen coordinates."""
        rel_x = x - self.draw_offset.x
        rel_y = y - self.draw_offset.y
        return int(rel_x / self.scale_ratio.x), int(rel_y / self.scale_ratio.y)

    def to_screen(self, x: int, y: int) -> Tuple[int, int]:
        """Map a virtual position to window coordinates."""
        return (
            int(self.draw_offset.x + x * self.scale_ratio.x),
            int(self.draw_offset.y + y * self.scale_ratio.y),
        )