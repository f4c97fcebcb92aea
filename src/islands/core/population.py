"""
Population: particles dropped one by one on a hexagonal lattice.

Each cell has a sampling weight, the chance a new particle lands in it.
A particle landing in a cell:
- removes that cell from future sampling (its weight drops to zero)
- adds a kernel bump to the weight of every nearby cell still in play
- adds the same bump to the density field, which is the heightmap

New particles are therefore drawn towards earlier ones and the density
field grows into clusters: islands in the sea.

Cells whose weight has reached zero never receive weight again, while
their density keeps growing with every nearby placement.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
import structlog

from islands.core.errors import InvalidParameter
from islands.core.hexgrid import HexGrid, lattice_offset
from islands.core.kernel import EPSILON, KernelCache
from islands.core.sampler import RandomSource, SumTree, default_random_source

logger = structlog.get_logger()

HEIGHT_SCALE = 5.0  # Exported heightmaps peak at this value


@dataclass
class PopulationConfig:
    """Configuration for a population."""

    width: int  # Grid width (columns)
    height: int  # Grid height (rows)
    period: float  # Spatial decay scale of a particle's influence
    amplitude: float  # Peak intensity of a particle's influence
    epsilon: float = EPSILON  # Kernel cutoff, relative to amplitude / period

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidParameter(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.period <= 0:
            raise InvalidParameter(f"period must be positive, got {self.period}")
        if self.amplitude <= 0:
            raise InvalidParameter(f"amplitude must be positive, got {self.amplitude}")
        if self.epsilon <= 0:
            raise InvalidParameter(f"epsilon must be positive, got {self.epsilon}")

    @property
    def n_cells(self) -> int:
        return self.width * self.height


class Population:
    """
    The placement engine.

    Owns the sum-tree sampler, the kernel cache and the density field.
    The random source is injected so that runs can be reproduced.
    """

    def __init__(self, config: PopulationConfig, rng: RandomSource | None = None):
        self.config = config
        self.grid = HexGrid(config.width, config.height)
        self.kernel = KernelCache(config.period, config.amplitude, config.epsilon)
        self.rng = rng if rng is not None else default_random_source()

        self.sampler = SumTree(self.grid.n_cells, self.rng, initial_weight=1.0)
        self._density = np.ones(self.grid.n_cells, dtype=np.float64)

        self.n_particles = 0
        self.last_position: tuple[int, int] | None = None

        logger.debug(
            "Population created",
            width=config.width,
            height=config.height,
            period=config.period,
            amplitude=config.amplitude,
            delta=self.delta,
        )

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        period: float,
        amplitude: float,
        rng: RandomSource | None = None,
    ) -> Population:
        """Build a population straight from its parameters."""
        return cls(PopulationConfig(width, height, period, amplitude), rng=rng)

    @property
    def delta(self) -> int:
        """Radius of the neighborhood updated by each particle."""
        return self.kernel.delta

    @property
    def density(self) -> np.ndarray:
        """Copy of the raw density field, in cell order."""
        return self._density.copy()

    def weights(self) -> np.ndarray:
        """Copy of the current sampling weights, in cell order."""
        return self.sampler.weights()

    def add_particle(self) -> None:
        """Drop one particle according to the current sampling weights."""
        cell = self.sampler.sample()
        px, py = self.grid.coords(cell)
        width, height = self.grid.shape
        delta = self.delta

        # Neighborhood of radius delta, clipped to the grid
        xs = np.arange(max(0, px - delta), min(width, px + delta + 1))
        ys = np.arange(max(0, py - delta), min(height, py + delta + 1))
        xx, yy = np.meshgrid(xs, ys, indexing="ij")
        xx = xx.ravel()
        yy = yy.ravel()

        dx, dy = lattice_offset(xx, yy, px, py)
        bump = self.kernel.lookup(dx, dy)
        cells = xx * height + yy

        # Sampling weights: the landing cell leaves play, live cells grow
        current = self.sampler.weights_at(cells)
        is_landing = cells == cell
        weight_deltas = np.where(
            is_landing,
            -current,
            np.where(current != 0, bump, 0.0),
        )
        self.sampler.update_many(cells, weight_deltas)

        # Density grows everywhere, including depleted cells
        self._density[cells] += bump

        self.n_particles += 1
        self.last_position = (px, py)

    def run(self, n_particles: int) -> dict:
        """
        Drop n particles.

        Args:
            n_particles: Number of particles to add

        Returns:
            Statistics dictionary
        """
        logger.debug("Adding particles", count=n_particles, already_placed=self.n_particles)

        for _ in range(n_particles):
            self.add_particle()

        weights = self.sampler.weights()
        stats = {
            "n_particles": n_particles,
            "total_particles": self.n_particles,
            "max_density": float(self._density.max()),
            "total_weight": self.sampler.total,
            "depleted_cells": int(np.count_nonzero(weights == 0)),
        }
        logger.info("Particles added", **stats)
        return stats

    def export_density(self) -> np.ndarray:
        """
        Density field scaled so that its maximum is HEIGHT_SCALE.

        Returns:
            Fresh flat array of length width*height, indexed x*height + y
        """
        peak = self._density.max()
        return self._density * (HEIGHT_SCALE / peak)

    def heightmap(self) -> np.ndarray:
        """export_density() as a (width, height) array."""
        return self.export_density().reshape(self.grid.shape)
