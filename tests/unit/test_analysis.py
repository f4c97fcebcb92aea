"""Unit tests for analysis module."""

import numpy as np
import pytest

from islands.analysis.islands import (
    SEA_LEVEL,
    hex_adjacency,
    island_statistics,
    label_islands,
)
from islands.core.hexgrid import HexGrid
from islands.core.population import Population


def flat_map(width, height, land_cells, land_height=3.0):
    """Heightmap at 0.5 everywhere except the given (x, y) land cells."""
    heights = np.full(width * height, 0.5)
    for x, y in land_cells:
        heights[x * height + y] = land_height
    return heights


class TestHexAdjacency:
    """Tests for the lattice neighbor graph."""

    def test_shape_and_symmetry(self):
        adj = hex_adjacency(6, 5)
        assert adj.shape == (30, 30)
        assert (adj != adj.T).nnz == 0

    def test_matches_hexgrid_neighbors(self):
        grid = HexGrid(7, 6)
        adj = hex_adjacency(7, 6)
        for i in range(grid.n_cells):
            x, y = grid.coords(i)
            row = adj.indices[adj.indptr[i]:adj.indptr[i + 1]]
            expected = {grid.index(nx, ny) for nx, ny in grid.neighbors(x, y)}
            assert set(row.tolist()) == expected

    def test_interior_degree(self):
        adj = hex_adjacency(10, 10)
        degrees = np.asarray(adj.sum(axis=1)).ravel()
        assert degrees.max() == 6


class TestLabelIslands:
    """Tests for connected land detection."""

    def test_all_sea(self):
        n, labels = label_islands(np.full(20, 0.5), 4, 5)
        assert n == 0
        assert np.all(labels == -1)

    def test_single_island(self):
        heights = flat_map(8, 8, [(3, 3), (4, 3), (3, 4)])
        n, labels = label_islands(heights, 8, 8)
        assert n == 1
        assert np.count_nonzero(labels >= 0) == 3

    def test_two_islands(self):
        heights = flat_map(10, 10, [(1, 1), (2, 1), (7, 7), (8, 7)])
        n, labels = label_islands(heights, 10, 10)
        assert n == 2
        assert labels[1 * 10 + 1] == labels[2 * 10 + 1]
        assert labels[1 * 10 + 1] != labels[7 * 10 + 7]

    def test_hex_diagonal_connectivity(self):
        # On an even row, (x+1, y+1) is a hex neighbor
        heights = flat_map(8, 8, [(3, 2), (4, 3)])
        n, _ = label_islands(heights, 8, 8)
        assert n == 1

    def test_square_diagonal_not_connected(self):
        # On an odd row, (x+1, y+1) is not a hex neighbor
        heights = flat_map(8, 8, [(3, 3), (4, 4)])
        n, _ = label_islands(heights, 8, 8)
        assert n == 2

    def test_sea_level_is_strict(self):
        heights = np.full(16, SEA_LEVEL)
        n, _ = label_islands(heights, 4, 4)
        assert n == 0

    def test_accepts_2d_heightmap(self):
        heights = flat_map(5, 4, [(2, 2)]).reshape(5, 4)
        n, _ = label_islands(heights, 5, 4)
        assert n == 1

    def test_wrong_size(self):
        with pytest.raises(ValueError):
            label_islands(np.ones(10), 4, 4)


class TestIslandStatistics:
    """Tests for island summaries."""

    def test_counts(self):
        heights = flat_map(10, 10, [(1, 1), (2, 1), (7, 7)])
        stats = island_statistics(heights, 10, 10)
        assert stats.n_islands == 2
        assert stats.land_fraction == pytest.approx(0.03)
        assert stats.largest_island == 2
        assert stats.mean_island_size == pytest.approx(1.5)
        assert stats.max_height == pytest.approx(3.0)

    def test_no_land(self):
        stats = island_statistics(np.full(9, 0.2), 3, 3)
        assert stats.n_islands == 0
        assert stats.land_fraction == 0.0

    def test_on_population(self, rng):
        pop = Population.create(40, 40, period=3.0, amplitude=1000.0, rng=rng)
        pop.run(200)
        stats = island_statistics(pop.export_density(), 40, 40)
        assert stats.n_islands >= 1
        assert 0.0 < stats.land_fraction < 1.0
        assert stats.max_height == pytest.approx(5.0)
