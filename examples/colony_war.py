#!/usr/bin/env python3
"""
Colony war example.

This script demonstrates:
1. Generating a random board with several colonies
2. Stamping preset patterns onto it
3. Running the simulation while tracking colony populations
4. Saving the final board as an image
"""

from colonylife import Config
from colonylife.simulation import Simulation
from colonylife.patterns import get_pattern, insert_pattern
from colonylife.metrics import colony_populations, compute_all_metrics, print_metrics_summary
from colonylife.visualization import save_board_image


def main():
    print("=" * 60)
    print("Colony Life - Colony War Example")
    print("=" * 60)
    print()

    config = Config(
        width=60,
        height=40,
        density=0.25,
        cell_characters=" XOA",
    )

    print("Configuration:")
    print(f"  Board: {config.width}x{config.height}")
    print(f"  Density: {config.density}")
    print(f"  Colonies: {', '.join(config.colonies)}")
    print()

    sim = Simulation(config, seed=42)

    for name in ("gun", "pulsar", "glider"):
        sim.board = insert_pattern(sim.board, get_pattern(name), rng=sim.rng,
                                   cell_characters=config.cell_characters)

    print("Initial populations:")
    for colony, count in colony_populations(sim.board).items():
        print(f"  {colony!r}: {count}")
    print()

    print("Running simulation for 300 generations...")

    def progress_callback(s: Simulation):
        populations = colony_populations(s.board)
        summary = ", ".join(f"{c}={n}" for c, n in populations.items())
        print(f"  Generation {s.generation}: {summary or 'extinct'}")

    sim.run(
        steps=300,
        callback=progress_callback,
        callback_interval=50,
        show_progress=True,
    )
    print()

    metrics = compute_all_metrics(sim.board)
    print_metrics_summary(metrics)

    path = save_board_image(sim.board, "output", "colony_war", sim.generation)
    print(f"Final board saved to {path}")
    print()
    print("To visualize, run:")
    print("  python -m colonylife.main --cell-characters ' XOA' --visualize --steps 500")
    print()


if __name__ == "__main__":
    main()
