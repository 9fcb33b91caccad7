"""Concrete UI widgets: panels, buttons, text and images."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from gamekit.colors import WHITE
from gamekit.transform2d import Transform2D
from gamekit.ui_element import UIElement, UIRenderer
from gamekit.vector2 import Vector2


class _SpriteCommand(NamedTuple):
    path: str
    transform: Transform2D


class _TextCommand(NamedTuple):
    text: str
    position: Vector2
    color: int
    font_size: int


class UIPanel(UIElement):
    """Groups child elements; children are drawn in z-order."""

    def __init__(self) -> None:
        super().__init__()
        self._children: List[UIElement] = []
        self._z_order_dirty = False

    @property
    def children(self) -> Tuple[UIElement, ...]:
        """The child elements, in their current order."""
        return tuple(self._children)

    def add_child(self, child: Optional[UIElement]) -> None:
        """Append a child; ``None`` is ignored."""
        if child is not None:
            self._children.append(child)
            self._z_order_dirty = True

    def update_logic(self, delta_time: float) -> None:
        """Update own logic, then each child's, while visible."""
        if not self.visible:
            return
        super().update_logic(delta_time)
        for child in self._children:
            child.update_logic(delta_time)

    def update_interaction(self) -> None:
        """Update own interaction, then each child's, while visible."""
        if not self.visible:
            return
        super().update_interaction()
        for child in self._children:
            child.update_interaction()

    def draw(self) -> List[Any]:
        """Draw self, then the children sorted by z-order."""
        if not self.visible:
            return []
        results = super().draw()
        if self._z_order_dirty:
            self._children.sort(key=lambda child: child.z_order)
            self._z_order_dirty = False
        for child in self._children:
            results.extend(child.draw())
        return results

    def set_visible(self, visible: bool) -> None:
        """Show or hide the panel and all of its children."""
        super().set_visible(visible)
        for child in self._children:
            child.set_visible(visible)


class ButtonState(enum.Enum):
    """Visual state of a button."""

    NORMAL = "normal"
    HOVERED = "hovered"
    PRESSED = "pressed"


class _ButtonRenderer(UIRenderer):
    def __init__(self, normal_path: str, hover_path: str, pressed_path: str) -> None:
        self.paths = {
            ButtonState.NORMAL: normal_path,
            ButtonState.HOVERED: hover_path,
            ButtonState.PRESSED: pressed_path,
        }
        self.normal_size = Vector2(0.0, 0.0)

    def sprite_path(self, state: ButtonState) -> str:
        return self.paths[state] or self.paths[ButtonState.NORMAL]

    def draw(self, owner: UIElement) -> _SpriteCommand:
        state = getattr(owner, "state", ButtonState.NORMAL)
        return _SpriteCommand(self.sprite_path(state), dataclasses.replace(owner.transform))


class UIButton(UIElement):
    """A clickable button drawn from up to three sprites."""

    def __init__(self, normal_path: str, hover_path: str = "", pressed_path: str = "") -> None:
        super().__init__()
        self.state = ButtonState.NORMAL
        self._on_click: Optional[Callable[[], None]] = None
        self.renderer = _ButtonRenderer(normal_path, hover_path, pressed_path)

    def set_on_click(self, callback: Optional[Callable[[], None]]) -> None:
        """Set the function called when the button is clicked."""
        self._on_click = callback

    def invoke_on_click(self) -> None:
        """Call the click callback, if one is set."""
        if self._on_click is not None:
            self._on_click()

    def bounding_size(self) -> Vector2:
        """Size of the normal sprite, as reported by the renderer."""
        if isinstance(self.renderer, _ButtonRenderer):
            return self.renderer.normal_size
        return Vector2(0.0, 0.0)


class _TextRenderer(UIRenderer):
    def draw(self, owner: UIElement) -> _TextCommand:
        return _TextCommand(
            text=getattr(owner, "text", ""),
            position=owner.transform.position,
            color=getattr(owner, "color", WHITE),
            font_size=getattr(owner, "font_size", 20),
        )


class UIText(UIElement):
    """A line of text with a colour and a pixel font size."""

    def __init__(self, text: str = "", color: int = WHITE, font_size: int = 20) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.font_size = font_size
        self.renderer = _TextRenderer()


class _ImageRenderer(UIRenderer):
    def __init__(self, image_path: str) -> None:
        self.image_path = image_path

    def draw(self, owner: UIElement) -> _SpriteCommand:
        return _SpriteCommand(self.image_path, dataclasses.replace(owner.transform))


class UIImage(UIElement):
    """A static image."""

    def __init__(self, image_path: str) -> None:
        super().__init__()
        self.image_path = image_path
        self.renderer = _ImageRenderer(image_path)