"""
Triangle mesh of a hexagonal heightmap.

One vertex per cell. Rows run downwards (Y = -sqrt(3)/2 * y) and even
rows sit half a column to the right of odd rows, so every pair of
adjacent rows is tiled by equilateral triangles.
"""

from __future__ import annotations

import numpy as np

from islands.core.hexgrid import ROW_SPACING


def vertex_positions(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """Planar (X, Y) position of every cell's vertex, in cell index order."""
    xs, ys = np.divmod(np.arange(width * height), height)
    X = xs + 0.5 * (ys % 2 == 0)
    Y = -ROW_SPACING * ys
    return X.astype(np.float64), Y.astype(np.float64)


def triangulate(width: int, height: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Triangulate the lattice.

    For a cell (x, y) and the row below it:
    - odd y: (x, y) (x+1, y) (x, y+1) and (x, y) (x, y+1) (x-1, y+1)
    - even y: (x, y) (x+1, y) (x+1, y+1) and (x, y) (x+1, y+1) (x, y+1)
    Triangles that would leave the grid are skipped.

    Returns:
        (X, Y, triangles) - triangles is an int array of shape (T, 3)
        indexing into the vertex arrays
    """
    X, Y = vertex_positions(width, height)
    if height < 2:
        return X, Y, np.empty((0, 3), dtype=np.int64)

    xs, ys = np.meshgrid(np.arange(width), np.arange(height - 1), indexing="ij")
    xs = xs.ravel()
    ys = ys.ravel()

    def idx(x, y):
        return x * height + y

    odd = ys % 2 == 1
    even = ~odd
    has_right = xs + 1 < width
    has_left = xs > 0

    triangles = []

    m = odd & has_right
    x, y = xs[m], ys[m]
    triangles.append(np.column_stack((idx(x, y), idx(x + 1, y), idx(x, y + 1))))

    m = odd & has_left
    x, y = xs[m], ys[m]
    triangles.append(np.column_stack((idx(x, y), idx(x, y + 1), idx(x - 1, y + 1))))

    m = even & has_right
    x, y = xs[m], ys[m]
    triangles.append(np.column_stack((idx(x, y), idx(x + 1, y), idx(x + 1, y + 1))))
    triangles.append(np.column_stack((idx(x, y), idx(x + 1, y + 1), idx(x, y + 1))))

    return X, Y, np.concatenate(triangles).astype(np.int64)


def heightmap_mesh(
    heights: np.ndarray,
    width: int,
    height: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Mesh of a heightmap, with the exported heights as Z.

    Returns:
        (X, Y, Z, triangles)
    """
    Z = np.asarray(heights, dtype=np.float64).ravel()
    if Z.shape[0] != width * height:
        raise ValueError(f"Heightmap has {Z.shape[0]} cells, expected {width * height}")
    X, Y, triangles = triangulate(width, height)
    return X, Y, Z, triangles
