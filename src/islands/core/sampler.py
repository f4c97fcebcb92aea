"""
Weighted sampling over all lattice cells with a flat sum-tree.

The tree is a complete binary tree stored in a single array of 2N-1
slots (heap layout):

    parent(i) = (i - 1) // 2
    children(i) = 2i + 1, 2i + 2

Leaves occupy the last N slots, the leaf of cell i lives at N - 1 + i.
Every internal node holds the sum of its two children, so the root is
the total sampling mass. Picking a cell and updating a weight are both
O(log N).
"""

from __future__ import annotations
from typing import Protocol

import numpy as np

from islands.core.errors import DegenerateSampler, InvalidParameter


class RandomSource(Protocol):
    """Protocol for the uniform draws used by the sampler."""

    def uniform(self, low: float, high: float) -> float:
        """Draw a float uniformly in [low, high]."""
        ...


def default_random_source(seed: int | None = None) -> np.random.Generator:
    """A numpy Generator, which satisfies RandomSource."""
    return np.random.default_rng(seed)


class SumTree:
    """
    Per-cell sampling weights supporting weighted picks.

    Weights may be driven to zero (by subtracting the full weight) but
    the total mass must stay positive for sample() to be defined.
    """

    def __init__(
        self,
        n_leaves: int,
        rng: RandomSource,
        initial_weight: float = 1.0,
    ):
        if n_leaves < 1:
            raise InvalidParameter(f"SumTree needs at least one leaf, got {n_leaves}")

        self.n_leaves = n_leaves
        self.rng = rng
        self.tree = np.zeros(2 * n_leaves - 1, dtype=np.float64)
        self.tree[n_leaves - 1:] = initial_weight

        # Internal nodes, deepest first
        for i in range(n_leaves - 2, -1, -1):
            self.tree[i] = self.tree[2 * i + 1] + self.tree[2 * i + 2]

        # Leaves with a positive weight
        self.n_positive = n_leaves if initial_weight > 0 else 0

    @property
    def total(self) -> float:
        """Total sampling mass (the root)."""
        return float(self.tree[0])

    def leaf_index(self, cell: int) -> int:
        """Position of a cell's leaf in the tree array."""
        return self.n_leaves - 1 + cell

    def weight(self, cell: int) -> float:
        """Current sampling weight of a cell."""
        return float(self.tree[self.leaf_index(cell)])

    def weights(self) -> np.ndarray:
        """Copy of all leaf weights, in cell order."""
        return self.tree[self.n_leaves - 1:].copy()

    def weights_at(self, cells: np.ndarray) -> np.ndarray:
        """Current sampling weights of an array of cells."""
        return self.tree[np.asarray(cells, dtype=np.int64) + (self.n_leaves - 1)]

    def update(self, cell: int, delta: float) -> None:
        """Add delta to a cell's weight and to all of its ancestors."""
        j = self.leaf_index(cell)
        was_positive = self.tree[j] > 0
        while j:
            self.tree[j] += delta
            j = (j - 1) // 2
        self.tree[0] += delta
        self.n_positive += int(self.tree[self.leaf_index(cell)] > 0) - int(was_positive)

    def update_many(self, cells: np.ndarray, deltas: np.ndarray) -> None:
        """
        Batched update() for distinct cells.

        Ancestors shared by several cells accumulate every delta, one tree
        level per pass.
        """
        j = np.asarray(cells, dtype=np.int64) + (self.n_leaves - 1)
        d = np.asarray(deltas, dtype=np.float64)
        was_positive = np.count_nonzero(self.tree[j] > 0)
        self.tree[j] += d
        self.n_positive += np.count_nonzero(self.tree[j] > 0) - was_positive

        while j.size:
            inner = j > 0
            j = (j[inner] - 1) // 2
            d = d[inner]
            np.add.at(self.tree, j, d)

    def sample(self) -> int:
        """
        Pick a cell with probability proportional to its weight.

        Descends from the root: at each internal node draw a value in
        [0, node weight] and go to the right child if it exceeds the
        weight of the left child, to the left child otherwise.

        Raises:
            DegenerateSampler: if no cell has a positive weight left
        """
        if self.n_positive <= 0 or self.tree[0] <= 0:
            raise DegenerateSampler(
                f"Cannot sample: {self.n_positive} cells with positive weight, "
                f"total weight is {self.tree[0]}"
            )

        size = self.tree.shape[0]
        j = 0
        while 2 * j + 1 < size:
            # Subtraction drift can leave a node slightly negative
            value = self.rng.uniform(0.0, max(0.0, float(self.tree[j])))
            j = 2 * j + 1
            if value > self.tree[j]:
                j += 1

        if self.tree[j] <= 0:
            raise DegenerateSampler(
                f"Sampling reached cell {j - (self.n_leaves - 1)} with weight {self.tree[j]}"
            )
        return j - (self.n_leaves - 1)
