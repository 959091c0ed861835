"""
Multi-generation driver for colony Life.

Repeatedly applies the stateless generation step to a board and provides
hooks for visualization/analysis.
"""

from typing import Callable, Optional

from tqdm import tqdm

from .board import BoardText, from_bytes, to_bytes
from .config import Config
from .colonies import NumpyRandomSource
from .life import next_generation
from .patterns import random_board


class Simulation:
    """
    Colony Life simulation manager.

    Attributes:
        config: Simulation configuration
        board: Current board text (str for generated boards, bytes or str when given)
        generation: Number of steps executed
        seed: Seed for board generation and tie-breaks
        rng: Random source shared by board generation and steps
    """

    def __init__(
        self,
        config: Config,
        seed: Optional[int] = None,
        initial_board: Optional[BoardText] = None,
    ):
        """
        Initialize simulation.

        Args:
            config: Simulation configuration
            seed: Random seed for reproducibility
            initial_board: Optional starting board; a random board is generated otherwise

        Raises:
            ValueError: If a generated board would exceed config.max_board_size
        """
        self.config = config
        self.seed = seed if seed is not None else 42
        self.initial_board = initial_board
        self.reset()

    def _create_board(self) -> BoardText:
        if self.initial_board is not None:
            return self.initial_board
        if self.config.board_text_size > self.config.max_board_size:
            raise ValueError(
                f"width x height board needs {self.config.board_text_size} bytes, "
                f"more than max_board_size={self.config.max_board_size}"
            )
        return random_board(
            self.config.width,
            self.config.height,
            density=self.config.density,
            cell_characters=self.config.cell_characters,
            rng=self.rng,
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        self.previous_board = self.board
        self.board = next_generation(self.board, rng=self.rng, config=self.config)
        self.generation += 1

    def is_stable(self) -> bool:
        """True when the last step left the board unchanged."""
        return self.previous_board is not None and self.previous_board == self.board

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["Simulation"], None]] = None,
        callback_interval: int = 100,
        show_progress: bool = True,
        stop_when_stable: bool = False,
    ) -> None:
        """
        Run simulation for multiple generations.

        Args:
            steps: Number of generations to run
            callback: Optional function called periodically
            callback_interval: How often to call callback
            show_progress: Whether to show progress bar
            stop_when_stable: Stop early once a step changes nothing
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Simulating")

        for i in iterator:
            self.step()

            if callback is not None and (i + 1) % callback_interval == 0:
                callback(self)

            if stop_when_stable and self.is_stable():
                break

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset simulation to its initial board.

        Args:
            seed: New random seed (uses original if not provided)
        """
        if seed is not None:
            self.seed = seed

        self.rng = NumpyRandomSource(self.seed)
        self.board = self._create_board()
        self.previous_board: Optional[BoardText] = None
        self.generation = 0

    def get_state_dict(self) -> dict:
        """Get serializable state dictionary."""
        return {
            "generation": self.generation,
            "seed": self.seed,
            "config": self.config.to_dict(),
            "board": from_bytes(to_bytes(self.board), ""),
        }
