"""
Board text parsing and serialization.

A board is a sequence of bytes: rows separated by a single newline, a space
for a dead cell and any other byte for a live cell whose colony is that byte.
Internally the board is a flat row-major grid of ``width * height`` bytes.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np


DEAD = ord(" ")
NEWLINE = ord("\n")

MAX_BOARD_SIZE = 100_000

BoardText = Union[str, bytes]


@dataclass
class Board:
    """
    Parsed board.

    Attributes:
        width: Cells per row
        height: Number of rows
        cells: Cell bytes, uint8 array of shape [height, width]
    """

    width: int
    height: int
    cells: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions (H, W)."""
        return (self.height, self.width)

    @property
    def alive(self) -> np.ndarray:
        """Boolean mask of live cells."""
        return self.cells != DEAD

    def clone(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(width=self.width, height=self.height, cells=self.cells.copy())


def to_bytes(board: BoardText) -> bytes:
    """Encode board text to bytes; every byte of a str survives the round trip."""
    if isinstance(board, str):
        return board.encode("utf-8", "surrogateescape")
    return bytes(board)


def from_bytes(data: bytes, like: BoardText) -> BoardText:
    """Return ``data`` as the same text type as ``like``."""
    if isinstance(like, str):
        return data.decode("utf-8", "surrogateescape")
    return data


def measure(data: bytes) -> tuple[int, int]:
    """
    Compute board dimensions from raw bytes.

    Width is the length of the first non-empty row. Height counts every
    newline plus a final row that lacks a trailing newline.

    Args:
        data: Board bytes

    Returns:
        (width, height), either of which may be 0
    """
    width = 0
    height = 0
    current_width = 0

    for b in data:
        if b == NEWLINE:
            if width == 0:
                width = current_width
            height += 1
            current_width = 0
        else:
            current_width += 1

    # Last row without trailing newline
    if current_width > 0:
        if width == 0:
            width = current_width
        height += 1

    return width, height


def parse_board(data: bytes, max_board_size: int = MAX_BOARD_SIZE) -> Optional[Board]:
    """
    Parse board bytes into a grid.

    Rows are not checked against the width: all non-newline bytes are laid
    into the grid in order, so a short or long row shifts every row after
    it. Cells left over when the input runs short hold 0x00 and count as
    alive.

    Args:
        data: Board bytes
        max_board_size: Capacity bound for both the input and the grid

    Returns:
        Parsed board, or None when the input should be passed through unchanged
    """
    if len(data) == 0 or len(data) > max_board_size:
        return None

    width, height = measure(data)
    if width == 0 or height == 0:
        return None

    size = width * height
    if size > max_board_size:
        return None

    content = np.frombuffer(data.replace(b"\n", b""), dtype=np.uint8)
    grid = np.zeros(size, dtype=np.uint8)
    n = min(len(content), size)
    grid[:n] = content[:n]

    return Board(width=width, height=height, cells=grid.reshape(height, width))


def serialize_board(board: Board) -> bytes:
    """Join rows of exactly ``width`` bytes with single newlines."""
    return b"\n".join(row.tobytes() for row in board.cells)
