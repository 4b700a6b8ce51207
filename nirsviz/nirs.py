"""Probe and landmark records for near-infrared spectroscopy layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

SOURCE_COLOR = (1.0, 0.0, 0.0, 1.0)
DETECTOR_COLOR = (0.0, 0.0, 1.0, 1.0)


class ProbeType(Enum):
    """Whether an optode emits light or detects it."""

    SOURCE = 0
    DETECTOR = 1


@dataclass
class Probe2D:
    """An optode placed on the flat layout."""

    position: tuple[float, float]
    type: ProbeType
    id: int = -1


@dataclass
class Probe3D:
    """An optode placed on the head surface."""

    position: tuple[float, float, float]
    type: ProbeType
    id: int = -1
    linked_probes: list[int] = field(default_factory=list)


@dataclass
class Landmark:
    """A named anatomical reference point."""

    name: str
    position: tuple[float, float, float]