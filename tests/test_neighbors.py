"""
Tests for neighbor statistics.
"""

import numpy as np

from colonylife.board import parse_board
from colonylife.colonies import NumpyRandomSource
from colonylife.neighbors import OFFSETS, neighbor_counts, neighbor_info
from colonylife.patterns import random_board


def cells_of(text: str) -> np.ndarray:
    return parse_board(text.encode()).cells


class TestNeighborInfo:
    """Tests for per-cell neighbor info."""

    def test_scan_order(self):
        """Offsets run row by row, left to right, skipping the center."""
        assert OFFSETS == [
            (-1, -1), (0, -1), (1, -1),
            (-1, 0), (1, 0),
            (-1, 1), (0, 1), (1, 1),
        ]

    def test_center_cell(self):
        """An interior cell sees all eight neighbors in scan order."""
        info = neighbor_info(cells_of("abc\ndef\nghi"), 1, 1)

        assert info.count == 8
        assert bytes(info.types) == b"abcdfghi"

    def test_corner_cell(self):
        """A corner cell only sees in-bounds neighbors."""
        info = neighbor_info(cells_of("abc\ndef\nghi"), 0, 0)

        assert info.count == 3
        assert bytes(info.types) == b"bde"

    def test_dead_neighbors_skipped(self):
        """Spaces are not counted."""
        info = neighbor_info(cells_of("X O\n   \n  Y"), 1, 1)

        assert info.count == 3
        assert bytes(info.types) == b"XOY"

    def test_no_wraparound(self):
        """Opposite edges are not neighbors."""
        cells = cells_of("O  \n   \n  O")

        assert neighbor_info(cells, 0, 0).count == 0
        assert neighbor_info(cells, 2, 2).count == 0


class TestNeighborCounts:
    """Tests for vectorized neighbor counts."""

    def test_full_block(self):
        """A full 3x3 block has 3 at corners, 5 on edges, 8 in the center."""
        counts = neighbor_counts(cells_of("OOO\nOOO\nOOO"))

        assert counts.tolist() == [[3, 5, 3], [5, 8, 5], [3, 5, 3]]

    def test_matches_neighbor_info(self):
        """Vectorized counts agree with the per-cell scan."""
        board = random_board(13, 9, density=0.45, cell_characters=" XYO", rng=NumpyRandomSource(7))
        cells = cells_of(board)
        counts = neighbor_counts(cells)

        for y in range(cells.shape[0]):
            for x in range(cells.shape[1]):
                assert counts[y, x] == neighbor_info(cells, x, y).count

    def test_single_row(self):
        """One-row boards only have horizontal neighbors."""
        counts = neighbor_counts(cells_of("OOO"))

        assert counts.tolist() == [[1, 2, 1]]
