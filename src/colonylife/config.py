"""
Configuration dataclass for colony Life boards and runs.

The step function itself needs only the capacity bound; the remaining
parameters describe how random starting boards are generated.
"""

from dataclasses import dataclass, asdict
from typing import Any

from .board import MAX_BOARD_SIZE
from .patterns import colony_characters, validate_cell_characters


@dataclass
class Config:
    """
    Complete configuration for a colony Life run.

    Attributes:
        max_board_size: Largest board text (in bytes) accepted by the step
            function. Larger boards are passed through unchanged.

        # Random board generation
        width: Number of cells per row
        height: Number of rows
        density: Probability that a generated cell is alive
        cell_characters: Characters used for generated cells. Spaces are
            ignored; every other character is a colony.
    """

    # Capacity
    max_board_size: int = MAX_BOARD_SIZE

    # Board generation
    width: int = 20
    height: int = 20
    density: float = 0.3
    cell_characters: str = " O"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        if self.max_board_size < 1:
            raise ValueError(f"max_board_size must be >= 1, got {self.max_board_size}")

        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")

        if self.height < 1:
            raise ValueError(f"height must be >= 1, got {self.height}")

        if not 0 <= self.density <= 1:
            raise ValueError(f"density must be in [0, 1], got {self.density}")

        error = validate_cell_characters(self.cell_characters)
        if error is not None:
            raise ValueError(f"cell_characters: {error}")

    @property
    def board_text_size(self) -> int:
        """Bytes needed for a width x height board, newlines included."""
        return (self.width + 1) * self.height - 1

    @property
    def colonies(self) -> list[str]:
        """Colony characters, spaces removed."""
        return colony_characters(self.cell_characters)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)
