"""
Analysis layer: derived quantities on exported heightmaps.

IMPORTANT: The engine never sees this. One-way derivation only.

- hex_adjacency: neighbor graph of the offset-hex lattice
- label_islands: connected land regions above sea level
- island_statistics: island count, sizes and land fraction
"""

from islands.analysis.islands import (
    SEA_LEVEL,
    IslandStats,
    hex_adjacency,
    label_islands,
    island_statistics,
)

__all__ = [
    "SEA_LEVEL",
    "IslandStats",
    "hex_adjacency",
    "label_islands",
    "island_statistics",
]
