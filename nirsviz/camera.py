"""Base camera holding view and projection state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=np.float32)
WORLD_RIGHT = np.array([1.0, 0.0, 0.0], dtype=np.float32)
WORLD_FORWARD = np.array([0.0, 0.0, -1.0], dtype=np.float32)


class Camera(ABC):
    """Shared state for cameras; subclasses compute the matrices."""

    def __init__(
        self,
        fov: float = 90.0,
        aspect_ratio: float = 16.0 / 9.0,
        near_clip: float = 0.01,
        far_clip: float = 1000.0,
    ) -> None:
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.near_clip = near_clip
        self.far_clip = far_clip

        self.view_matrix = np.identity(4, dtype=np.float32)
        self.projection_matrix = np.identity(4, dtype=np.float32)

        self.position = np.zeros(3, dtype=np.float32)
        self.focal_point = np.zeros(3, dtype=np.float32)
        self.distance = 10.0

        self.viewport_width = 1280.0
        self.viewport_height = 720.0
        self.fixed_aspect_ratio = False

        self.front = WORLD_FORWARD.copy()
        self.up = WORLD_UP.copy()
        self.right = WORLD_RIGHT.copy()

    @abstractmethod
    def on_update(self, dt: float) -> None:
        """Advance the camera by ``dt`` seconds."""

    @abstractmethod
    def on_event(self, event: Any) -> None:
        """React to an input event."""

    @abstractmethod
    def update_view_matrix(self) -> None:
        """Recompute ``view_matrix``."""

    @abstractmethod
    def update_projection_matrix(self) -> None:
        """Recompute ``projection_matrix``."""

    def view_projection_matrix(self) -> np.ndarray:
        """Projection matrix multiplied by the view matrix."""
        return self.projection_matrix @ self.view_matrix

    def set_fixed_aspect_ratio(self, fixed: bool) -> None:
        """Keep the aspect ratio when the viewport is resized."""
        self.fixed_aspect_ratio = fixed

    def set_viewport_size(self, width: float, height: float) -> None:
        """Record the viewport size and, unless fixed, adopt its aspect ratio."""
        self.viewport_width = width
        self.viewport_height = height
        if not self.fixed_aspect_ratio:
            self.aspect_ratio = width / height