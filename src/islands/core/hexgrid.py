"""
HexGrid: the offset hexagonal lattice the population lives on.

Odd rows are shifted half a column to the left, which approximates a
honeycomb with a plain 2D array:

    row 0:   o   o   o   o
    row 1: o   o   o   o
    row 2:   o   o   o   o

Cells are stored column-major: idx = x * height + y.
"""

from __future__ import annotations

import numpy as np

from islands.core.errors import InvalidParameter

ROW_SPACING = np.sqrt(3) / 2

# Neighbor offsets (dx, dy) depend on the parity of the row
NEIGHBORS_EVEN_ROW = ((-1, 0), (1, 0), (0, -1), (1, -1), (0, 1), (1, 1))
NEIGHBORS_ODD_ROW = ((-1, 0), (1, 0), (-1, -1), (0, -1), (-1, 1), (0, 1))


def to_cartesian(x, y):
    """
    Map lattice coordinates to Cartesian coordinates.

    Works on scalars or numpy arrays.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y)
    cx = x + 1 - 0.5 * (y % 2)
    cy = (y + 1) * ROW_SPACING
    return cx, cy


def distance(p1: tuple[int, int], p2: tuple[int, int]) -> float:
    """Squared Euclidean distance between two lattice points."""
    x1, y1 = to_cartesian(*p1)
    x2, y2 = to_cartesian(*p2)
    dx = x1 - x2
    dy = y1 - y2
    return float(dx * dx + dy * dy)


def lattice_offset(x, y, origin_x, origin_y):
    """
    Offset (dx, dy) of (x, y) relative to an origin cell, for kernel lookup.

    Rows at an odd distance from the origin are staggered by half a column,
    so the horizontal offset is one smaller on the side the row leans
    towards. Works on scalars or numpy arrays.
    """
    x = np.asarray(x)
    y = np.asarray(y)
    dx = np.abs(x - origin_x)
    dy = np.abs(y - origin_y)

    leaning = ((y % 2 == 1) & (x > origin_x)) | ((y % 2 == 0) & (origin_x > x))
    dx = dx - np.where((dy % 2 == 1) & leaning, 1, 0)
    return dx, dy


class HexGrid:
    """Index/coordinate bookkeeping for a width x height offset lattice."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidParameter(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height

    @property
    def n_cells(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> tuple[int, int]:
        """Return (width, height), the shape of a reshaped heightmap."""
        return self.width, self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of cell (x, y)."""
        return x * self.height + y

    def coords(self, idx: int) -> tuple[int, int]:
        """Lattice coordinates of flat index idx."""
        return idx // self.height, idx % self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """The (up to six) hexagonal neighbors of (x, y) inside the grid."""
        offsets = NEIGHBORS_ODD_ROW if y % 2 else NEIGHBORS_EVEN_ROW
        result = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self.contains(nx, ny):
                result.append((nx, ny))
        return result
