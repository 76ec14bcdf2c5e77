"""
Test script for the command line entry point.
"""
import io
import os
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root and src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute()))
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

import run
from othello.config import get_default_config


def write_config(tmp_dir):
    """Save a config that a human would play white with at depth 3."""
    config = get_default_config()
    config.search.depth = 3
    config.game.white = "human"
    config.game.black = "human"
    config.logging.verbose = False
    path = os.path.join(tmp_dir, "config.json")
    config.save(path)
    return path


def test_flags_override_config_file():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = write_config(tmp_dir)
        args = run.build_parser().parse_args(
            ["--config", path, "--white", "ai", "--depth", "1", "--log-level", "DEBUG"])
        config = run.load_config(args)

    assert config.game.white == "ai"
    assert config.game.black == "human", "Values without a flag come from the file"
    assert config.search.depth == 1
    assert config.logging.log_level == "DEBUG"
    assert config.logging.verbose is False


def test_missing_config_file_uses_defaults():
    with tempfile.TemporaryDirectory() as tmp_dir:
        args = run.build_parser().parse_args(["--config", os.path.join(tmp_dir, "nope.json")])
        out = io.StringIO()
        with redirect_stdout(out):
            config = run.load_config(args)

    assert "not found" in out.getvalue()
    assert config.to_dict() == get_default_config().to_dict()


def test_main_plays_computer_game_from_flags():
    """Flags turn a human-vs-human config file into a computer game that finishes."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = write_config(tmp_dir)
        argv = ["run.py", "--config", path, "--white", "ai", "--black", "ai", "--depth", "0"]
        out = io.StringIO()
        with patch.object(sys, "argv", argv), redirect_stdout(out):
            run.main()

    lines = out.getvalue().strip().splitlines()
    assert lines[0].startswith("White moves first!")
    assert lines[-1] == "Tie!" or " wins by " in lines[-1]
    print("CLI game test passed!")


def test_main_rejects_negative_depth():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = write_config(tmp_dir)
        argv = ["run.py", "--config", path, "--depth", "-1"]
        with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
            run.main()

    assert exc_info.value.code == 2, "parser.error exits with usage status"


if __name__ == "__main__":
    test_flags_override_config_file()
    test_missing_config_file_uses_defaults()
    test_main_plays_computer_game_from_flags()
    test_main_rejects_negative_depth()
    print("\nAll CLI tests passed!")
