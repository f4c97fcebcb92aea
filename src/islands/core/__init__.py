"""
Core engine primitives.

This layer knows nothing about meshes, cameras or plots. It only knows:
- The offset hexagonal lattice and its distance
- The cached decay kernel a particle deposits around itself
- The sum-tree used to pick the next particle's cell
- The population tying them together into a growing density field
"""

from islands.core.errors import IslandsError, InvalidParameter, DegenerateSampler
from islands.core.hexgrid import HexGrid, distance, lattice_offset, to_cartesian
from islands.core.kernel import KernelCache, compute_delta, create_kernel
from islands.core.sampler import RandomSource, SumTree, default_random_source
from islands.core.population import HEIGHT_SCALE, Population, PopulationConfig
from islands.core.presets import PRESETS, IslandPreset, get_preset

__all__ = [
    "IslandsError",
    "InvalidParameter",
    "DegenerateSampler",
    "HexGrid",
    "distance",
    "lattice_offset",
    "to_cartesian",
    "KernelCache",
    "compute_delta",
    "create_kernel",
    "RandomSource",
    "SumTree",
    "default_random_source",
    "HEIGHT_SCALE",
    "Population",
    "PopulationConfig",
    "PRESETS",
    "IslandPreset",
    "get_preset",
]
