"""Unit tests for heightmap triangulation."""

import numpy as np
import pytest

from islands.viz.mesh import heightmap_mesh, triangulate, vertex_positions


def edge_lengths(X, Y, triangles):
    pts = np.stack([X[triangles], Y[triangles]], axis=-1)
    ab = np.linalg.norm(pts[:, 0] - pts[:, 1], axis=1)
    bc = np.linalg.norm(pts[:, 1] - pts[:, 2], axis=1)
    ca = np.linalg.norm(pts[:, 2] - pts[:, 0], axis=1)
    return np.concatenate([ab, bc, ca])


class TestVertexPositions:
    """Tests for vertex placement."""

    def test_even_rows_shifted_right(self):
        X, Y = vertex_positions(3, 2)
        # Cells in index order: (0,0) (0,1) (1,0) (1,1) (2,0) (2,1)
        assert np.allclose(X, [0.5, 0.0, 1.5, 1.0, 2.5, 2.0])

    def test_rows_run_downwards(self):
        X, Y = vertex_positions(1, 3)
        assert np.allclose(Y, [0.0, -np.sqrt(3) / 2, -np.sqrt(3)])


class TestTriangulate:
    """Tests for the triangle list."""

    def test_triangle_count(self):
        # Every pair of rows holds 2 * (width - 1) triangles
        for width, height in [(2, 2), (5, 4), (6, 7)]:
            _, _, tri = triangulate(width, height)
            assert tri.shape == (2 * (width - 1) * (height - 1), 3)

    def test_indices_in_range(self):
        _, _, tri = triangulate(5, 6)
        assert tri.min() >= 0
        assert tri.max() < 30

    def test_equilateral(self):
        X, Y, tri = triangulate(6, 5)
        assert np.allclose(edge_lengths(X, Y, tri), 1.0)

    def test_no_duplicate_triangles(self):
        _, _, tri = triangulate(6, 5)
        assert len({tuple(sorted(t)) for t in tri.tolist()}) == tri.shape[0]

    def test_single_row(self):
        X, Y, tri = triangulate(4, 1)
        assert X.shape == (4,)
        assert tri.shape == (0, 3)

    def test_covers_area(self):
        """Triangle areas add up to the hull of the lattice."""
        width, height = 7, 6
        X, Y, tri = triangulate(width, height)
        pts = np.stack([X[tri], Y[tri]], axis=-1)
        v1 = pts[:, 1] - pts[:, 0]
        v2 = pts[:, 2] - pts[:, 0]
        areas = 0.5 * np.abs(v1[:, 0] * v2[:, 1] - v1[:, 1] * v2[:, 0])
        unit = np.sqrt(3) / 4
        assert areas.sum() == pytest.approx(unit * 2 * (width - 1) * (height - 1))


class TestHeightmapMesh:
    """Tests for the heightmap mesh."""

    def test_z_follows_heights(self):
        heights = np.arange(12, dtype=float)
        X, Y, Z, tri = heightmap_mesh(heights, 4, 3)
        assert np.array_equal(Z, heights)
        assert X.shape == Y.shape == Z.shape

    def test_accepts_2d(self):
        heights = np.arange(12, dtype=float).reshape(4, 3)
        _, _, Z, _ = heightmap_mesh(heights, 4, 3)
        assert Z[5] == heights[1, 2]

    def test_wrong_size(self):
        with pytest.raises(ValueError):
            heightmap_mesh(np.zeros(5), 4, 3)
