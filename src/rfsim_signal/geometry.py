# src/rfsim_signal/geometry.py
import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coord:
    """
    A position in 3D space (metres), as supplied by the mobility subsystem.
    Immutable: analogue models only read coordinates, they never move anything.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def sqrdist(self, other: "Coord") -> float:
        """Squared Euclidean distance to `other`."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: "Coord") -> float:
        return math.sqrt(self.sqrdist(other))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)
