"""
Colony Life - multi-colony Conway's Game of Life on text boards.

Newly born cells inherit the dominant colony of their neighbors; ties are
resolved with an injected random source.
"""

__version__ = "0.1.0"

from .config import Config
from .board import Board, parse_board, serialize_board
from .colonies import NumpyRandomSource, RandomSource, dominant_type
from .life import next_generation, step_grid

__all__ = [
    "Config",
    "Board",
    "parse_board",
    "serialize_board",
    "NumpyRandomSource",
    "RandomSource",
    "dominant_type",
    "next_generation",
    "step_grid",
    "__version__",
]
