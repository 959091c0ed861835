"""
Command-line interface for colony Life.

Usage:
    python -m colonylife.main --help
    python -m colonylife.main --board board.txt --steps 1 --print-board
    python -m colonylife.main --width 40 --height 30 --cell-characters " XO" --steps 200 --visualize
    python -m colonylife.main --pattern glider --pattern gun --save-frames output/
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .board import BoardText, to_bytes
from .config import Config
from .simulation import Simulation
from .patterns import get_pattern, get_pattern_names, insert_pattern
from .metrics import compute_all_metrics, print_metrics_summary, population
from .visualization import Visualizer, save_board_image


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="Colony Life - multi-colony Game of Life",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Basic options
    parser.add_argument(
        "--steps", type=int, default=1,
        help="Number of generations"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--board", type=str, default=None,
        help="Read the starting board from a file ('-' for stdin)"
    )
    parser.add_argument(
        "--pattern", action="append", default=[],
        help=f"Insert a preset pattern (repeatable): {', '.join(get_pattern_names())}"
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write the final board to a file"
    )
    parser.add_argument(
        "--stop-when-stable", action="store_true",
        help="Stop once a generation changes nothing"
    )

    # Board generation options
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--density", type=float, default=None)
    parser.add_argument(
        "--cell-characters", type=str, default=None, dest="cell_characters",
        help="Colony characters for generated boards and patterns"
    )
    parser.add_argument(
        "--max-board-size", type=int, default=None, dest="max_board_size",
        help="Largest board (bytes) the step function accepts"
    )

    # Visualization options
    parser.add_argument(
        "--visualize", action="store_true",
        help="Show live visualization"
    )
    parser.add_argument(
        "--fps", type=int, default=10,
        help="Frames per second for visualization"
    )
    parser.add_argument(
        "--save-frames", type=str, default=None,
        help="Directory to save frame images"
    )
    parser.add_argument(
        "--save-interval", type=int, default=1,
        help="Save frame every N generations"
    )
    parser.add_argument(
        "--save-animation", type=str, default=None,
        help="Path to save animation (mp4 or gif)"
    )

    # Analysis options
    parser.add_argument(
        "--print-board", action="store_true",
        help="Print the final board"
    )
    parser.add_argument(
        "--print-metrics", action="store_true",
        help="Print all metrics at end"
    )
    parser.add_argument(
        "--save-metrics", type=str, default=None,
        help="Save metrics to JSON file"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def read_board(path: str) -> bytes:
    """Read raw board bytes from a file or stdin, dropping one trailing newline."""
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(path).read_bytes()
    return data[:-1] if data.endswith(b"\n") else data


def write_board(board: BoardText) -> None:
    """Write a board to stdout as raw bytes followed by a newline."""
    sys.stdout.flush()
    sys.stdout.buffer.write(to_bytes(board) + b"\n")
    sys.stdout.buffer.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    initial_board = None
    if args.board is not None:
        try:
            initial_board = read_board(args.board)
        except OSError as e:
            print(f"Cannot read board: {e}", file=sys.stderr)
            return 1

    try:
        sim = Simulation(config, seed=args.seed, initial_board=initial_board)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    for name in args.pattern:
        try:
            sim.board = insert_pattern(
                sim.board,
                get_pattern(name),
                rng=sim.rng,
                cell_characters=config.cell_characters,
            )
        except KeyError as e:
            print(f"Cannot insert pattern: {e.args[0]}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Cannot insert pattern {name!r}: {e}", file=sys.stderr)
            return 1

    if not args.no_progress:
        print("Colony Life")
        if initial_board is None:
            print(f"  Board: {config.width}x{config.height} (density {config.density})")
        else:
            print(f"  Board: {args.board}")
        print(f"  Steps: {args.steps}")
        print(f"  Seed: {sim.seed}")
        print(f"  Population: {population(sim.board)}")
        print()

    # Visualization mode
    if args.visualize or args.save_animation:
        viz = Visualizer(sim, fps=args.fps)
        if args.visualize:
            viz.show_live(steps=args.steps)
        else:
            viz.save_animation(args.save_animation, steps=args.steps)
        return 0

    # Frame saving callback
    frame_callback = None
    if args.save_frames:
        output_dir = Path(args.save_frames)
        save_board_image(sim.board, str(output_dir), "frame", sim.generation)

        def frame_callback(s: Simulation) -> None:
            save_board_image(s.board, str(output_dir), "frame", s.generation)

    sim.run(
        args.steps,
        callback=frame_callback,
        callback_interval=args.save_interval,
        show_progress=not args.no_progress,
        stop_when_stable=args.stop_when_stable,
    )

    if args.stop_when_stable and sim.is_stable() and not args.no_progress:
        print(f"Board stable after {sim.generation} generation(s)")

    if args.print_board:
        write_board(sim.board)

    if args.output:
        Path(args.output).write_bytes(to_bytes(sim.board))

    if args.print_metrics or args.save_metrics:
        metrics = compute_all_metrics(sim.board)
        if args.print_metrics:
            print_metrics_summary(metrics)
        if args.save_metrics:
            with open(args.save_metrics, "w") as f:
                json.dump(metrics, f, indent=2)
            print(f"Metrics saved to {args.save_metrics}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
