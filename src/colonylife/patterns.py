"""
Pattern presets and board editing helpers.

Boards here are ``str`` rows joined by newlines; ``insert_pattern`` also
accepts the raw ``bytes`` boards the command line works with. Random choices go
through a random source with ``randrange`` (and ``random`` for densities),
so ``random.Random`` and ``NumpyRandomSource`` both work.
"""

from typing import Any, Optional, Union

from .colonies import NumpyRandomSource


PRESETS = {
    "glider": " O \n  O\nOOO",
    "lwss": " O  O\nO    \nO   O\nOOOO ",
    "blinker": "OOO",
    "block": "OO\nOO",
    "beacon": "OO  \nO   \n   O\n  OO",
    "toad": " OOO\nOOO ",
    "pulsar": (
        "  OOO   OOO  \n"
        "             \n"
        "O    O O    O\n"
        "O    O O    O\n"
        "O    O O    O\n"
        "  OOO   OOO  \n"
        "             \n"
        "  OOO   OOO  \n"
        "O    O O    O\n"
        "O    O O    O\n"
        "O    O O    O\n"
        "             \n"
        "  OOO   OOO  "
    ),
    "gun": (
        "                        O           \n"
        "                      O O           \n"
        "            OO      OO            OO\n"
        "           O   O    OO            OO\n"
        "OO        O     O   OO              \n"
        "OO        O   O OO    O O           \n"
        "          O     O       O           \n"
        "           O   O                    \n"
        "            OO                      "
    ),
}

ROTATIONS = (0, 90, 180, 270)


def get_pattern_names() -> list[str]:
    """Names of the available presets."""
    return list(PRESETS)


def get_pattern(name: str) -> str:
    """
    Look up a preset by name.

    Raises:
        KeyError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown pattern {name!r}, choose from {get_pattern_names()}") from None


def validate_cell_characters(value: str) -> Optional[str]:
    """
    Check that cell characters are plain ASCII.

    Returns:
        None if valid, otherwise an error message naming the first bad character
    """
    for c in value:
        if ord(c) > 127:
            return f'"{c}" is not supported. Please use only ASCII characters (A-Z, a-z, 0-9, symbols).'
    return None


def colony_characters(cell_characters: str) -> list[str]:
    """Non-space characters of ``cell_characters``."""
    return [c for c in cell_characters if c != " "]


def pattern_size(pattern: str) -> tuple[int, int]:
    """(width, height) of a pattern: widest row and row count."""
    rows = pattern.split("\n")
    return max(len(r) for r in rows), len(rows)


def rotate_pattern(pattern: str, degrees: int) -> str:
    """
    Rotate a pattern clockwise.

    Rows are right-padded with spaces to the widest row before rotating.

    Args:
        pattern: Pattern text
        degrees: One of 0, 90, 180, 270

    Returns:
        Rotated pattern text
    """
    if degrees not in ROTATIONS:
        raise ValueError(f"degrees must be one of {ROTATIONS}, got {degrees}")

    if degrees == 0:
        return pattern

    rows = pattern.split("\n")
    width, height = pattern_size(pattern)
    grid = [r.ljust(width) for r in rows]

    if degrees == 90:
        rotated = ["".join(grid[height - 1 - y][x] for y in range(height)) for x in range(width)]
    elif degrees == 180:
        rotated = [row[::-1] for row in reversed(grid)]
    else:
        rotated = ["".join(grid[y][width - 1 - x] for y in range(height)) for x in range(width)]

    return "\n".join(rotated)


def insert_pattern(
    board: Union[str, bytes],
    pattern: str,
    rng: Optional[Any] = None,
    cell_characters: str = " O",
) -> Union[str, bytes]:
    """
    Stamp a pattern onto a board at a random rotation and position.

    The pattern's live cells are all drawn in one colony picked at random
    from ``cell_characters``. Dead pattern cells leave the board untouched.
    A bytes board is edited byte by byte and returned as bytes.

    Args:
        board: Board text (str or bytes)
        pattern: Pattern text
        rng: Random source (fresh unseeded source if not provided)
        cell_characters: Candidate colony characters

    Returns:
        Board with the pattern inserted, of the same type as ``board``

    Raises:
        ValueError: If the board is empty or the pattern fits in no orientation
    """
    if not board:
        raise ValueError("cannot insert a pattern into an empty board")

    if isinstance(board, bytes):
        # latin-1 maps each byte to one character, so columns stay byte columns
        text = insert_pattern(board.decode("latin-1"), pattern, rng, cell_characters)
        return text.encode("latin-1")

    if rng is None:
        rng = NumpyRandomSource()

    board_rows = board.split("\n")
    board_height = len(board_rows)
    board_width = len(board_rows[0])

    valid_rotations = []
    for degrees in ROTATIONS:
        width, height = pattern_size(rotate_pattern(pattern, degrees))
        if width <= board_width and height <= board_height:
            valid_rotations.append(degrees)

    if not valid_rotations:
        width, height = pattern_size(pattern)
        raise ValueError(
            f"Pattern ({width}x{height}) too large for board "
            f"({board_width}x{board_height}) in any orientation"
        )

    rotation = valid_rotations[rng.randrange(len(valid_rotations))]
    pattern_rows = rotate_pattern(pattern, rotation).split("\n")
    pattern_width, pattern_height = pattern_size("\n".join(pattern_rows))

    start_x = rng.randrange(board_width - pattern_width + 1)
    start_y = rng.randrange(board_height - pattern_height + 1)

    chars = colony_characters(cell_characters)
    pattern_char = chars[rng.randrange(len(chars))] if chars else "O"

    new_rows = []
    for y, row in enumerate(board_rows):
        row_chars = list(row.ljust(board_width))
        py = y - start_y
        if 0 <= py < pattern_height:
            pattern_row = pattern_rows[py]
            for px, cell in enumerate(pattern_row):
                if cell != " ":
                    row_chars[start_x + px] = pattern_char
        new_rows.append("".join(row_chars))

    return "\n".join(new_rows)


def random_board(
    width: int,
    height: int,
    density: float = 0.3,
    cell_characters: str = " O",
    rng: Optional[Any] = None,
) -> str:
    """
    Generate a random board.

    Each cell is alive with probability ``density``; live cells get a colony
    chosen uniformly from the non-space ``cell_characters``.

    Args:
        width: Cells per row
        height: Number of rows
        density: Probability of a live cell
        cell_characters: Candidate colony characters
        rng: Random source (fresh unseeded source if not provided)

    Returns:
        Board text
    """
    if rng is None:
        rng = NumpyRandomSource()

    chars = colony_characters(cell_characters) or ["O"]
    rows = []
    for _ in range(height):
        row = []
        for _ in range(width):
            if rng.random() < density:
                row.append(chars[rng.randrange(len(chars))])
            else:
                row.append(" ")
        rows.append("".join(row))
    return "\n".join(rows)


def empty_board(width: int, height: int) -> str:
    """All-dead board."""
    return "\n".join(" " * width for _ in range(height))


def toggle_cell(board: str, row: int, col: int, brush: str = "O") -> str:
    """
    Flip one cell: dead becomes ``brush``, alive becomes dead.

    Raises:
        IndexError: If (row, col) is outside the board
    """
    rows = board.split("\n")
    if not 0 <= row < len(rows) or not 0 <= col < len(rows[row]):
        raise IndexError(f"cell ({row}, {col}) is outside the board")

    row_chars = list(rows[row])
    row_chars[col] = (brush or "O") if row_chars[col] == " " else " "
    rows[row] = "".join(row_chars)
    return "\n".join(rows)
