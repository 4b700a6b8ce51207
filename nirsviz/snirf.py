"""Reading probe geometry from a SNIRF file's group tree.

Groups are mappings from names to sub-groups or datasets; datasets are
array-like values such as numpy arrays.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import numpy as np

from nirsviz.log import get_core_logger
from nirsviz.nirs import Landmark, Probe2D, Probe3D, ProbeType

_PRINT_LIMIT = 10


def probe_type_to_string(probe_type: Any) -> str:
    """Name of a probe type, or ``"INVALID"`` for anything else."""
    if isinstance(probe_type, ProbeType):
        return probe_type.name
    return "INVALID"


def dataset_shape(dataset: Any) -> str:
    """Shape of a dataset written as ``"(d0, d1, ...)"``."""
    return "(" + ", ".join(str(dim) for dim in np.shape(dataset)) + ")"


def _is_dataset(value: Any) -> bool:
    return isinstance(value, (np.ndarray, list, tuple)) or hasattr(value, "shape")


def walk_groups(group: Mapping[str, Any], path: str = "") -> list[tuple[str, str]]:
    """List every object below ``group`` as ``(kind, path)``, depth first.

    Kinds are ``"Group"``, ``"Dataset"`` and ``"Other"``; groups and other
    objects are also logged.
    """
    logger = get_core_logger()
    found: list[tuple[str, str]] = []
    for name, value in group.items():
        current = f"{path}/{name}"
        if isinstance(value, Mapping):
            logger.info("  [Group]  : %s", current)
            found.append(("Group", current))
            found.extend(walk_groups(value, current))
        elif _is_dataset(value):
            found.append(("Dataset", current))
        else:
            logger.info("  [Other] : %s", current)
            found.append(("Other", current))
    return found


def _matrix(group: Mapping[str, Any], name: str) -> np.ndarray:
    values = np.asarray(group[name], dtype=np.float64)
    if values.ndim != 2:
        raise ValueError(f"Dataset '{name}' must be two-dimensional, got shape {values.shape}")
    return values


def _label(value: Any) -> str:
    if isinstance(value, np.ndarray) and value.shape == ():
        value = value.item()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class Snirf:
    """Probe positions and landmarks loaded from a SNIRF file."""

    def __init__(self) -> None:
        self.filepath: str = ""
        self.probes_2d: list[Probe2D] = []
        self.probes_3d: list[Probe3D] = []
        self.landmarks: list[Landmark] = []

    def load(self, root: Mapping[str, Any], filepath: str | os.PathLike[str]) -> None:
        """Read the probe description from ``root``, the tree of ``filepath``."""
        path = os.fspath(filepath)
        if not os.path.exists(path):
            get_core_logger().error("File does not exist: %s", path)
            raise FileNotFoundError(f"File does not exist: {path}")

        self.filepath = path
        logger = get_core_logger()
        logger.info("Parsing HDF5 : %s", path)
        walk_groups(root, "")
        logger.info("END OF FILE : %s", path)

        nirs = root["nirs"]
        nirs["data1"]
        nirs["metaDataTags"]
        self.parse_probe(nirs["probe"])
        self.print_summary()

    def parse_probe(self, probe: Mapping[str, Any]) -> None:
        """Append the probe group's optodes and landmarks."""
        get_core_logger().info("PROBE : ")

        for x, y, *_ in _matrix(probe, "detectorPos2D"):
            self.probes_2d.append(Probe2D((float(x), float(y)), ProbeType.DETECTOR))
        for x, y, z, *_ in _matrix(probe, "detectorPos3D"):
            self.probes_3d.append(Probe3D((float(x), float(z), float(y)), ProbeType.DETECTOR))
        for x, y, *_ in _matrix(probe, "sourcePos2D"):
            self.probes_2d.append(Probe2D((float(x), float(y)), ProbeType.SOURCE))
        for x, y, z, *_ in _matrix(probe, "sourcePos3D"):
            self.probes_3d.append(Probe3D((float(x), float(z), float(y)), ProbeType.SOURCE))

        probe["wavelengths"]

        labels = [_label(label) for label in np.asarray(probe["landmarkLabels"]).ravel()]
        positions = _matrix(probe, "landmarkPos3D")
        if len(labels) < len(positions):
            raise ValueError("landmarkLabels has fewer entries than landmarkPos3D has rows")
        for label, (x, y, z, *_) in zip(labels, positions):
            self.landmarks.append(Landmark(label, (float(x), float(y), float(z))))

    def summary(self) -> list[str]:
        """Lines describing the first probes and landmarks."""
        lines = ["PROBES : 2D"]
        pairs = list(zip(self.probes_2d, self.probes_3d))[:_PRINT_LIMIT]
        for flat, solid in pairs:
            fx, fy = flat.position
            sx, sy, sz = solid.position
            lines.append(
                f"    {probe_type_to_string(flat.type)} : ( {_number(fx)}, {_number(fy)} )"
            )
            lines.append(
                f"    {probe_type_to_string(solid.type)} : "
                f"( {_number(sx)}, {_number(sy)}, {_number(sz)} )"
            )
        lines.append(f"Landmarks : {len(self.landmarks)}")
        for landmark in self.landmarks[:_PRINT_LIMIT]:
            x, y, z = landmark.position
            lines.append(f"    {landmark.name} : ( {_number(x)}, {_number(y)}, {_number(z)} )")
        return lines

    def print_summary(self) -> None:
        """Write the summary to the core logger."""
        logger = get_core_logger()
        for line in self.summary():
            logger.info("%s", line)

    def is_file_loaded(self) -> bool:
        """Whether a file has been loaded."""
        return bool(self.filepath)