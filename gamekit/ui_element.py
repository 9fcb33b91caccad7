"""Base UI element and the pluggable behaviours it delegates to."""

from __future__ import annotations

import abc
from typing import Any, List, Optional

from gamekit.transform2d import Transform2D
from gamekit.vector2 import Vector2


class UIRenderer(abc.ABC):
    """Decides how an element is drawn."""

    @abc.abstractmethod
    def draw(self, owner: "UIElement") -> Any:
        """Draw ``owner`` and return whatever the backend produced."""


class UIInteractor(abc.ABC):
    """Decides how an element reacts to user input."""

    @abc.abstractmethod
    def update_interaction(self, owner: "UIElement") -> None:
        """Process input for ``owner``."""


class UIAnimator(abc.ABC):
    """Drives an element's animation logic."""

    @abc.abstractmethod
    def update(self, owner: "UIElement", transform: Transform2D, delta_time: float) -> None:
        """Advance the animation by ``delta_time`` seconds, editing ``transform``."""


class UIElement:
    """A UI element whose drawing, input and animation are pluggable parts."""

    def __init__(self) -> None:
        self.transform = Transform2D()
        self._visible = True
        self.name = ""
        self.z_order = 0
        self.renderer: Optional[UIRenderer] = None
        self.interactor: Optional[UIInteractor] = None
        self.animator: Optional[UIAnimator] = None

    @property
    def visible(self) -> bool:
        """Whether the element is shown."""
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self.set_visible(value)

    def set_visible(self, visible: bool) -> None:
        """Show or hide the element."""
        self._visible = visible

    def update_logic(self, delta_time: float) -> None:
        """Run the animator, if any."""
        if self.animator is not None:
            self.animator.update(self, self.transform, delta_time)

    def update_interaction(self) -> None:
        """Run the interactor while visible."""
        if self._visible and self.interactor is not None:
            self.interactor.update_interaction(self)

    def draw(self) -> List[Any]:
        """Draw through the renderer while visible; returns the renderer results."""
        if self._visible and self.renderer is not None:
            return [self.renderer.draw(self)]
        return []

    def bounding_size(self) -> Vector2:
        """Size used for hit testing; zero unless a subclass knows better."""
        return Vector2(0.0, 0.0)

    def has_renderer(self) -> bool:
        """Whether a renderer is attached."""
        return self.renderer is not None