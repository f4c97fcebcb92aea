"""
Island detection on exported heightmaps.

A cell is land when its exported height is above SEA_LEVEL. Islands are
connected groups of land cells, where connectivity follows the six
hexagonal neighbors rather than the 4 or 8 neighbors of a square grid.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import connected_components

from islands.core.hexgrid import NEIGHBORS_EVEN_ROW, NEIGHBORS_ODD_ROW

SEA_LEVEL = 1.0  # Exported heights above this are land


@dataclass
class IslandStats:
    """Summary of the islands found in a heightmap."""

    n_islands: int
    land_fraction: float
    largest_island: int  # Cells in the biggest island
    mean_island_size: float
    max_height: float


def hex_adjacency(width: int, height: int) -> sparse.csr_matrix:
    """
    Adjacency matrix of the offset-hex lattice, in cell index order.

    Returns:
        Symmetric (N, N) boolean CSR matrix
    """
    xs, ys = np.divmod(np.arange(width * height), height)
    rows = []
    cols = []

    for parity, offsets in ((0, NEIGHBORS_EVEN_ROW), (1, NEIGHBORS_ODD_ROW)):
        on_row = ys % 2 == parity
        for dx, dy in offsets:
            nx = xs + dx
            ny = ys + dy
            valid = on_row & (nx >= 0) & (nx < width) & (ny >= 0) & (ny < height)
            rows.append((xs * height + ys)[valid])
            cols.append((nx * height + ny)[valid])

    rows = np.concatenate(rows)
    cols = np.concatenate(cols)
    data = np.ones(rows.shape[0], dtype=bool)
    n = width * height
    return sparse.csr_matrix((data, (rows, cols)), shape=(n, n))


def label_islands(
    heights: np.ndarray,
    width: int,
    height: int,
    sea_level: float = SEA_LEVEL,
) -> tuple[int, np.ndarray]:
    """
    Label connected land regions.

    Args:
        heights: Flat exported heightmap (length width*height) or its
            (width, height) reshape
        width, height: Grid dimensions
        sea_level: Cells strictly above this are land

    Returns:
        (n_islands, labels) - labels is flat, -1 for sea cells
    """
    heights = np.asarray(heights, dtype=np.float64).ravel()
    if heights.shape[0] != width * height:
        raise ValueError(
            f"Heightmap has {heights.shape[0]} cells, expected {width * height}"
        )

    labels = np.full(heights.shape[0], -1, dtype=np.int64)
    land = np.flatnonzero(heights > sea_level)
    if land.size == 0:
        return 0, labels

    adjacency = hex_adjacency(width, height)[land][:, land]
    n_islands, land_labels = connected_components(adjacency, directed=False)
    labels[land] = land_labels
    return int(n_islands), labels


def island_statistics(
    heights: np.ndarray,
    width: int,
    height: int,
    sea_level: float = SEA_LEVEL,
) -> IslandStats:
    """Count islands and measure how much of the map is land."""
    heights = np.asarray(heights, dtype=np.float64).ravel()
    n_islands, labels = label_islands(heights, width, height, sea_level)

    if n_islands == 0:
        return IslandStats(
            n_islands=0,
            land_fraction=0.0,
            largest_island=0,
            mean_island_size=0.0,
            max_height=float(heights.max()),
        )

    sizes = np.bincount(labels[labels >= 0], minlength=n_islands)
    return IslandStats(
        n_islands=n_islands,
        land_fraction=float(sizes.sum() / heights.shape[0]),
        largest_island=int(sizes.max()),
        mean_island_size=float(sizes.mean()),
        max_height=float(heights.max()),
    )
