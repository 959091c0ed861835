"""
Metrics and analysis utilities for colony Life boards.

All functions take board text and measure it the same way the generation
step parses it. A colony is a single byte: a multi-byte UTF-8 character
counts as one colony per byte. ASCII colonies are labelled by their
character, other bytes by a ``\\xNN`` escape.
"""

from typing import Optional

import numpy as np

from .board import BoardText, DEAD, parse_board, to_bytes


def _cells(board: BoardText) -> np.ndarray:
    parsed = parse_board(to_bytes(board))
    if parsed is None:
        return np.zeros((0, 0), dtype=np.uint8)
    return parsed.cells


def population(board: BoardText) -> int:
    """
    Count live cells.

    Args:
        board: Board text

    Returns:
        Number of non-space cells
    """
    return int(np.count_nonzero(_cells(board) != DEAD))


def colony_label(value: int) -> str:
    """Printable label of a colony byte."""
    if value < 128:
        return chr(value)
    return f"\\x{value:02x}"


def _byte_populations(board: BoardText) -> dict[int, int]:
    cells = _cells(board)
    values, counts = np.unique(cells[cells != DEAD], return_counts=True)
    return {int(v): int(c) for v, c in zip(values, counts)}


def colony_populations(board: BoardText) -> dict[str, int]:
    """
    Count live cells per colony byte.

    Args:
        board: Board text

    Returns:
        Dictionary from colony label to cell count, sorted by byte value
    """
    return {colony_label(v): c for v, c in _byte_populations(board).items()}


def live_density(board: BoardText) -> float:
    """Fraction of cells that are alive (0.0 for an unparseable board)."""
    cells = _cells(board)
    if cells.size == 0:
        return 0.0
    return float(np.mean(cells != DEAD))


def dominant_colony(board: BoardText) -> Optional[str]:
    """
    Most populous colony.

    Ties go to the smallest byte. None when nothing is alive.
    """
    populations = _byte_populations(board)
    if not populations:
        return None
    return colony_label(max(populations, key=lambda v: (populations[v], -v)))


def compute_all_metrics(board: BoardText) -> dict:
    """
    Compute all metrics for a board.

    Args:
        board: Board text

    Returns:
        Nested dictionary of metrics
    """
    cells = _cells(board)
    height, width = cells.shape
    populations = colony_populations(board)

    return {
        "size": {
            "width": width,
            "height": height,
            "cells": width * height,
        },
        "population": {
            "total": population(board),
            "density": live_density(board),
            "by_colony": populations,
        },
        "colonies": {
            "count": len(populations),
            "dominant": dominant_colony(board),
        },
    }


def print_metrics_summary(metrics: dict) -> None:
    """
    Print formatted metrics summary.

    Args:
        metrics: Output from compute_all_metrics
    """
    print("\n=== Colony Life Metrics Summary ===\n")

    size = metrics['size']
    print("Board:")
    print(f"  Size: {size['width']}x{size['height']} ({size['cells']} cells)")

    print("\nPopulation:")
    pop = metrics['population']
    print(f"  Total: {pop['total']}")
    print(f"  Density: {pop['density']:.4f}")
    for colony, count in pop['by_colony'].items():
        print(f"  {colony!r}: {count}")

    print("\nColonies:")
    colonies = metrics['colonies']
    print(f"  Count: {colonies['count']}")
    if colonies['dominant'] is not None:
        print(f"  Dominant: {colonies['dominant']!r}")

    print()
