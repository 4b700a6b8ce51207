"""Application layers and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need.

    The default hooks keep simple bookkeeping: whether the layer is attached,
    the time it has been updated for, and how many frames and events it saw.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.frames_rendered = 0
        self.ui_frames_rendered = 0
        self.events_seen = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self.attached = False

    def on_update(self, dt: float) -> None:
        """Advance the layer by ``dt`` seconds."""
        self.elapsed += dt

    def on_render(self) -> None:
        """Draw the layer."""
        self.frames_rendered += 1

    def on_imgui_render(self) -> None:
        """Draw the layer's user-interface widgets."""
        self.ui_frames_rendered += 1

    def on_event(self, event: Any) -> None:
        """Handle an application event."""
        self.events_seen += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def _index_of(items: list[Layer], target: Layer, start: int, stop: int) -> int | None:
    for position, item in enumerate(items[start:stop], start):
        if item is target:
            return position
    return None


class LayerStack:
    """Ordered layers with overlays kept above all regular layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Insert a regular layer below every overlay and attach it."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Put an overlay on top of the stack and attach it."""
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove a regular layer; unknown layers are ignored."""
        position = _index_of(self._layers, layer, 0, self._insert_index)
        if position is None:
            return
        layer.on_detach()
        del self._layers[position]
        self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove an overlay; unknown overlays are ignored."""
        position = _index_of(self._layers, overlay, self._insert_index, len(self._layers))
        if position is None:
            return
        overlay.on_detach()
        del self._layers[position]

    def clear(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)