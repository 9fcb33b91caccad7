"""Layers of UI elements and a manager over named layers."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from gamekit.ui_element import UIElement
from gamekit.ui_widgets import UIPanel


class UISystem:
    """A layer of root UI elements, updated and drawn together."""

    def __init__(self) -> None:
        self._roots: List[UIElement] = []
        self.layer_depth = 0

    @property
    def elements(self) -> Tuple[UIElement, ...]:
        """The root elements."""
        return tuple(self._roots)

    def add_element(self, element: Optional[UIElement]) -> None:
        """Add a root element; ``None`` is ignored."""
        if element is not None:
            self._roots.append(element)

    def update(self, delta_time: float) -> None:
        """Update logic and interaction of each visible root element."""
        for element in self._roots:
            if element.visible:
                element.update_logic(delta_time)
                element.update_interaction()

    def _collect(self, element: UIElement) -> Iterator[UIElement]:
        if not element.visible:
            return
        if element.has_renderer():
            yield element
        if isinstance(element, UIPanel):
            for child in element.children:
                yield from self._collect(child)

    def render_list(self) -> List[UIElement]:
        """Visible elements with a renderer, panels expanded, sorted by z-order."""
        found = [item for root in self._roots for item in self._collect(root)]
        return sorted(found, key=lambda element: element.z_order)

    def draw(self) -> List[Any]:
        """Draw the render list in order; returns every renderer result."""
        results: List[Any] = []
        for element in self.render_list():
            results.extend(element.draw())
        return results

    def clear(self) -> None:
        """Remove all root elements."""
        self._roots.clear()


class UIManager:
    """Named UI layers drawn in order of layer depth."""

    def __init__(self) -> None:
        self._systems: Dict[str, UISystem] = {}

    def add_system(self, name: str, system: Optional[UISystem]) -> None:
        """Register or replace a layer; ``None`` is ignored."""
        if system is not None:
            self._systems[name] = system

    def get_system(self, name: str) -> Optional[UISystem]:
        """The layer called ``name``, or ``None``."""
        return self._systems.get(name)

    def remove_system(self, name: str) -> None:
        """Remove the layer called ``name`` if present."""
        self._systems.pop(name, None)

    def draw_all(self) -> List[Any]:
        """Draw every layer from lowest to highest depth."""
        results: List[Any] = []
        for system in sorted(self._systems.values(), key=lambda s: s.layer_depth):
            results.extend(system.draw())
        return results

    def update_all(self, delta_time: float) -> None:
        """Update every layer."""
        for system in self._systems.values():
            system.update(delta_time)

    def clear(self) -> None:
        """Remove all layers."""
        self._systems.clear()

    def __len__(self) -> int:
        return len(self._systems)