"""
Kernel: the decay a particle deposits onto its neighbors.

Each particle adds a Gaussian-like bump around itself:

    k(d²) = amplitude * exp(-d² / period) / period

The bump falls below epsilon * amplitude / period beyond a radius delta,
so only a (2·delta+1)² neighborhood is ever touched by a placement. The
values for every lattice offset inside that radius are cached once.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from islands.core.errors import InvalidParameter
from islands.core.hexgrid import distance

EPSILON = 0.001  # Negligibility threshold, relative to amplitude / period

# Reference cell for the cached offsets. It sits on an odd row, which is
# the stagger lattice_offset() corrects for.
ANCHOR = (0, 1)


def compute_delta(period: float, amplitude: float, epsilon: float = EPSILON) -> int:
    """
    Radius beyond which the kernel is negligible.

    delta = ceil(sqrt(period * ln(amplitude / (period * epsilon))))

    Collapses to 0 when the logarithm is not positive (the kernel never
    exceeds the threshold, so only the particle's own cell is updated).
    """
    log_ratio = math.log(amplitude / (period * epsilon))
    if log_ratio <= 0:
        return 0
    return int(math.ceil(math.sqrt(period * log_ratio)))


@dataclass
class KernelCache:
    """
    Precomputed kernel values indexed by lattice offset.

    table[dx, dy] is the contribution of a particle to a cell dx columns
    and dy rows away (after parity correction), for 0 <= dx, dy <= delta.
    """

    period: float
    amplitude: float
    epsilon: float = EPSILON

    delta: int = field(init=False)
    table: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        if self.period <= 0:
            raise InvalidParameter(f"period must be positive, got {self.period}")
        if self.amplitude <= 0:
            raise InvalidParameter(f"amplitude must be positive, got {self.amplitude}")
        if self.epsilon <= 0:
            raise InvalidParameter(f"epsilon must be positive, got {self.epsilon}")

        self.delta = compute_delta(self.period, self.amplitude, self.epsilon)

        size = self.delta + 1
        self.table = np.empty((size, size), dtype=np.float64)
        ax, ay = ANCHOR
        for dx in range(size):
            for dy in range(size):
                d2 = distance(ANCHOR, (ax + dx, ay + dy))
                self.table[dx, dy] = self.amplitude * math.exp(-d2 / self.period) / self.period

    @property
    def peak(self) -> float:
        """Kernel value on the particle's own cell."""
        return self.value(0, 0)

    def value(self, dx: int, dy: int) -> float:
        """Kernel value for a single parity-corrected offset."""
        return float(self.table[dx, dy])

    def lookup(self, dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
        """Vectorized kernel lookup for arrays of offsets."""
        return self.table[dx, dy]

    def radial_profile(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Kernel values against true distance, for every cached offset.

        Returns:
            (distances, values) sorted by distance
        """
        ax, ay = ANCHOR
        size = self.delta + 1
        dists = np.array([
            math.sqrt(distance(ANCHOR, (ax + dx, ay + dy)))
            for dx in range(size)
            for dy in range(size)
        ])
        values = self.table.ravel()
        order = np.argsort(dists, kind="stable")
        return dists[order], values[order]


def create_kernel(period: float, amplitude: float) -> KernelCache:
    """Factory for a kernel with the default negligibility threshold."""
    return KernelCache(period=period, amplitude=amplitude)
