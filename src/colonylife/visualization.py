"""
Visualization utilities for colony Life.

Provides real-time display and image export for boards.
"""

from pathlib import Path
from typing import Optional

import matplotlib
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .board import BoardText, DEAD, parse_board, to_bytes


def colony_colors(types) -> dict[int, np.ndarray]:
    """
    Assign a color to each colony byte.

    Colonies are colored in sorted byte order from a qualitative colormap
    (tab10, or tab20 for more than ten colonies), cycling if needed.

    Args:
        types: Iterable of colony bytes

    Returns:
        Mapping from colony byte to RGB uint8 color
    """
    ordered = sorted({int(t) for t in types})
    cmap = matplotlib.colormaps["tab10" if len(ordered) <= 10 else "tab20"]
    colors = {}
    for i, t in enumerate(ordered):
        rgba = cmap(i % cmap.N)
        colors[t] = (np.array(rgba[:3]) * 255).astype(np.uint8)
    return colors


def board_to_rgb(board: BoardText) -> np.ndarray:
    """
    Convert a board to an RGB image.

    Dead cells are black; each colony gets its own color.

    Args:
        board: Board text

    Returns:
        RGB image [H, W, 3] as uint8 ([0, 0, 3] for an unparseable board)
    """
    parsed = parse_board(to_bytes(board))
    if parsed is None:
        return np.zeros((0, 0, 3), dtype=np.uint8)

    cells = parsed.cells
    rgb = np.zeros((*cells.shape, 3), dtype=np.uint8)
    for t, color in colony_colors(np.unique(cells[cells != DEAD])).items():
        rgb[cells == t] = color

    return rgb


class Visualizer:
    """
    Real-time visualization manager.

    Provides live display of a simulation using matplotlib.
    """

    def __init__(
        self,
        simulation: "Simulation",  # Forward reference
        fps: int = 10,
    ):
        """
        Initialize visualizer.

        Args:
            simulation: Simulation to visualize
            fps: Target frames per second
        """
        self.sim = simulation
        self.fps = fps

        self.fig, self.ax = plt.subplots(figsize=(6, 6))
        self.ax.set_axis_off()

        self.current_image = board_to_rgb(self.sim.board)
        self.im = self.ax.imshow(self.current_image, interpolation="nearest")

        self.text = self.ax.text(
            0.02, 0.98, f"Generation: {self.sim.generation}",
            transform=self.ax.transAxes,
            fontsize=10,
            verticalalignment='top',
            color='white',
            bbox=dict(boxstyle='round', facecolor='black', alpha=0.5)
        )

    def _animation_update(self, frame: int) -> list:
        """Update function for animation."""
        self.sim.step()

        self.current_image = board_to_rgb(self.sim.board)
        self.im.set_array(self.current_image)
        self.text.set_text(f"Generation: {self.sim.generation}")

        return [self.im, self.text]

    def show_live(self, steps: Optional[int] = None) -> None:
        """
        Display live animation.

        Args:
            steps: Number of generations to run (None for effectively infinite)
        """
        frames = steps if steps is not None else 10000
        interval = 1000 // self.fps

        anim = FuncAnimation(
            self.fig,
            self._animation_update,
            frames=frames,
            interval=interval,
            blit=True,
        )

        plt.show()

    def save_animation(
        self,
        path: str,
        steps: int = 100,
        fps: Optional[int] = None,
    ) -> None:
        """
        Save animation to file.

        Args:
            path: Output file path (mp4, gif, etc.)
            steps: Number of frames
            fps: Frames per second (uses self.fps if not provided)
        """
        if fps is None:
            fps = self.fps

        anim = FuncAnimation(
            self.fig,
            self._animation_update,
            frames=steps,
            interval=1000 // fps,
            blit=True,
        )

        # Determine writer from extension
        suffix = Path(path).suffix.lower()
        if suffix == ".gif":
            anim.save(path, writer="pillow", fps=fps)
        else:
            anim.save(path, writer="ffmpeg", fps=fps)

        print(f"Animation saved to {path}")


def save_board_image(
    board: BoardText,
    output_dir: str,
    prefix: str = "frame",
    step: int = 0,
    scale: int = 8,
) -> Path:
    """
    Save a board as a PNG image.

    Args:
        board: Board text
        output_dir: Output directory
        prefix: Filename prefix
        step: Generation number for filename
        scale: Pixels per cell

    Returns:
        Path of the written image
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    rgb = board_to_rgb(board)
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)

    path = output_path / f"{prefix}_{step:06d}.png"
    plt.imsave(path, rgb)
    return path
