"""
Tests for the command-line interface.
"""

import json

from colonylife import NumpyRandomSource, next_generation
from colonylife.main import create_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Parser defaults to a single generation."""
        args = create_parser().parse_args([])

        assert args.steps == 1
        assert args.pattern == []
        assert args.width is None


class TestMain:
    """End-to-end CLI tests."""

    def test_board_file(self, tmp_path, capsys):
        """A board file is stepped and printed."""
        board = tmp_path / "board.txt"
        board.write_text("OOO\nOOO\nOOO\n")

        code = main(["--board", str(board), "--print-board", "--no-progress"])

        assert code == 0
        assert capsys.readouterr().out == "O O\n   \nO O\n"

    def test_output_and_metrics(self, tmp_path):
        """Final board and metrics are written to files."""
        board = tmp_path / "board.txt"
        board.write_text("     \n     \n XXX \n     \n     ")
        output = tmp_path / "next.txt"
        metrics_path = tmp_path / "metrics.json"

        code = main([
            "--board", str(board),
            "--steps", "3",
            "--output", str(output),
            "--save-metrics", str(metrics_path),
            "--no-progress",
        ])

        assert code == 0
        assert output.read_text() == "     \n  X  \n  X  \n  X  \n     "
        metrics = json.loads(metrics_path.read_text())
        assert metrics["population"]["by_colony"] == {"X": 3}

    def test_random_board_with_pattern(self, capsys):
        """Generated boards accept preset patterns."""
        code = main([
            "--width", "10", "--height", "8", "--density", "0",
            "--pattern", "block", "--steps", "2",
            "--seed", "5", "--print-board", "--no-progress",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("O") == 4

    def test_save_frames(self, tmp_path):
        """Frames are saved for the start and every interval."""
        frames = tmp_path / "frames"

        code = main([
            "--width", "6", "--height", "6", "--steps", "2",
            "--save-frames", str(frames), "--no-progress",
        ])

        assert code == 0
        assert sorted(p.name for p in frames.iterdir()) == [
            "frame_000000.png", "frame_000001.png", "frame_000002.png",
        ]

    def test_invalid_config(self, capsys):
        """Invalid configuration exits with status 1."""
        code = main(["--density", "2", "--no-progress"])

        assert code == 1
        assert "density" in capsys.readouterr().err

    def test_pattern_too_large(self, capsys):
        """Patterns that do not fit exit with status 1."""
        code = main(["--width", "3", "--height", "3", "--pattern", "gun", "--no-progress"])

        assert code == 1
        assert "too large" in capsys.readouterr().err

    def test_missing_board_file(self, tmp_path, capsys):
        """Unreadable board files exit with status 1."""
        code = main(["--board", str(tmp_path / "missing.txt"), "--no-progress"])

        assert code == 1
        assert "Cannot read board" in capsys.readouterr().err

    def test_multibyte_board(self, tmp_path, capsysbinary):
        """Non-ASCII boards are stepped and written back as raw bytes."""
        data = "     \n     \n ééé \n     \n     ".encode("utf-8")
        board = tmp_path / "board.txt"
        board.write_bytes(data)
        output = tmp_path / "next.txt"

        code = main([
            "--board", str(board), "--seed", "3",
            "--output", str(output), "--print-board", "--no-progress",
        ])

        expected = next_generation(data, NumpyRandomSource(3))
        assert code == 0
        assert output.read_bytes() == expected
        assert capsysbinary.readouterr().out == expected + b"\n"

    def test_board_file_with_small_capacity(self, tmp_path, capsys):
        """A small capacity only has to hold the supplied board."""
        board = tmp_path / "board.txt"
        board.write_text("OOO\nOOO\nOOO")

        code = main(["--board", str(board), "--max-board-size", "50", "--print-board", "--no-progress"])

        assert code == 0
        assert capsys.readouterr().out == "O O\n   \nO O\n"

    def test_generated_board_over_capacity(self, capsys):
        """Generated boards larger than the capacity exit with status 1."""
        code = main(["--max-board-size", "50", "--no-progress"])

        assert code == 1
        assert "max_board_size" in capsys.readouterr().err

    def test_unknown_pattern(self, capsys):
        """Unknown pattern names exit with status 1."""
        code = main(["--pattern", "nope", "--no-progress"])

        assert code == 1
        assert "unknown pattern 'nope'" in capsys.readouterr().err

    def test_pattern_on_board_file(self, tmp_path, capsys):
        """Patterns are stamped onto boards read from a file."""
        board = tmp_path / "board.txt"
        board.write_text("    \n    \n    \n    ")

        code = main([
            "--board", str(board), "--pattern", "block",
            "--steps", "1", "--print-board", "--no-progress",
        ])

        assert code == 0
        assert capsys.readouterr().out.count("O") == 4
