"""
Moore-neighborhood statistics on a bounded grid.

Cells outside the grid do not exist: there is no wraparound.
"""

from typing import NamedTuple

import numpy as np

from .board import DEAD


# Scan order: dy outer, dx inner, both ascending
OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


class NeighborInfo(NamedTuple):
    """Live-neighbor count and the colony bytes of those neighbors in scan order."""

    count: int
    types: tuple[int, ...]


def neighbor_info(cells: np.ndarray, x: int, y: int) -> NeighborInfo:
    """
    Collect live neighbors of cell (x, y).

    Args:
        cells: Cell bytes [H, W]
        x: Column
        y: Row

    Returns:
        NeighborInfo with the count and ordered neighbor types
    """
    height, width = cells.shape
    types = []

    for dx, dy in OFFSETS:
        nx = x + dx
        ny = y + dy
        if 0 <= nx < width and 0 <= ny < height:
            cell = int(cells[ny, nx])
            if cell != DEAD:
                types.append(cell)

    return NeighborInfo(count=len(types), types=tuple(types))


def neighbor_counts(cells: np.ndarray) -> np.ndarray:
    """
    Count live neighbors of every cell at once.

    The alive mask is zero-padded by one cell on each side, so border cells
    simply see fewer neighbors.

    Args:
        cells: Cell bytes [H, W]

    Returns:
        Neighbor counts [H, W] as int
    """
    H, W = cells.shape
    alive = np.pad((cells != DEAD).astype(np.int8), 1, mode="constant")

    counts = np.zeros((H, W), dtype=np.int8)
    for dx, dy in OFFSETS:
        counts += alive[1 + dy:1 + dy + H, 1 + dx:1 + dx + W]

    return counts.astype(int)
