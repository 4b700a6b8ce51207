"""Registry of named assets, kept apart by asset kind."""

from __future__ import annotations

from typing import Any, Hashable


class AssetNotFoundError(LookupError):
    """Raised when no asset of the requested kind has the requested name."""


class AssetManager:
    """Stores shared assets by kind and name."""

    def __init__(self) -> None:
        self._containers: dict[Hashable, dict[str, Any]] = {}

    def init(self) -> None:
        """Prepare the manager for use with an empty store."""
        self._containers = {}

    def shutdown(self) -> None:
        """Release every stored asset."""
        self._containers.clear()

    def get(self, kind: Hashable, name: str) -> Any:
        """Return the asset of ``kind`` registered under ``name``."""
        try:
            return self._containers.get(kind, {})[name]
        except KeyError:
            raise AssetNotFoundError(
                f"AssetManager: Asset '{name}' not found for type."
            ) from None

    def register(self, kind: Hashable, name: str, asset: Any) -> None:
        """Store ``asset`` under ``name`` for ``kind``, replacing any earlier one."""
        self._containers.setdefault(kind, {})[name] = asset