"""
Generation step for multi-colony Life.

Standard B3/S23 rules on a bounded board. Survivors keep their colony byte;
births inherit the dominant colony of their neighbors.
"""

from typing import Optional

import numpy as np

from .board import MAX_BOARD_SIZE, Board, BoardText, DEAD, from_bytes, parse_board, serialize_board, to_bytes
from .colonies import NumpyRandomSource, RandomSource, dominant_type
from .config import Config
from .neighbors import neighbor_counts, neighbor_info


def step_grid(board: Board, rng: RandomSource) -> Board:
    """
    Compute the next generation of a parsed board.

    Update order:
        1. Count live neighbors of every cell
        2. Keep survivors (alive with 2 or 3 neighbors) with their own byte
        3. Resolve births (dead with exactly 3 neighbors) in row-major order

    Args:
        board: Current board
        rng: Random source for tied births

    Returns:
        New board with the same dimensions
    """
    cells = board.cells
    alive = cells != DEAD
    counts = neighbor_counts(cells)

    survivors = alive & ((counts == 2) | (counts == 3))
    births = ~alive & (counts == 3)

    new_cells = np.where(survivors, cells, DEAD).astype(np.uint8)

    # np.argwhere yields row-major order, so tie draws follow a plain scan
    for y, x in np.argwhere(births):
        info = neighbor_info(cells, int(x), int(y))
        new_cells[y, x] = dominant_type(info.types, rng)

    return Board(width=board.width, height=board.height, cells=new_cells)


def next_generation(
    board: BoardText,
    rng: Optional[RandomSource] = None,
    config: Optional[Config] = None,
) -> BoardText:
    """
    Calculate the next generation of a board.

    Board format: rows separated by newlines, space = dead, any other
    character = alive, belonging to the colony named by that character.
    Empty, oversized and dimensionless boards are returned unchanged.

    Args:
        board: Board text as str or bytes
        rng: Random source for tie-breaks (fresh unseeded source if not provided)
        config: Configuration providing the capacity bound

    Returns:
        Next board, of the same type as the input
    """
    max_board_size = config.max_board_size if config is not None else MAX_BOARD_SIZE

    data = to_bytes(board)
    parsed = parse_board(data, max_board_size)
    if parsed is None:
        return board

    if rng is None:
        rng = NumpyRandomSource()

    result = serialize_board(step_grid(parsed, rng))
    return from_bytes(result, board)
