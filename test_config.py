"""
Test script for configuration system.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.search.minimax import AlphaBetaSearch

CONFIG_DIR = Path(__file__).parent.absolute() / "configs"


def test_config_creation():
    """Test creating and saving a config."""
    config = get_default_config()
    assert config.project_name == "Othello"
    assert config.search.max_candidates == 8
    assert config.game.max_input_retries is None

    # Test saving and loading
    with tempfile.TemporaryDirectory() as tmp_dir:
        test_path = os.path.join(tmp_dir, "nested", "test_config.json")
        config.search.depth = 3
        config.search.trace_file = "trace.txt"
        config.save(test_path)
        loaded_config = Config.load(test_path)

    assert config.to_dict() == loaded_config.to_dict(), "Loaded config should match original"
    assert loaded_config.search.depth == 3
    print("Config test completed successfully!")


def test_default_config_file():
    """The shipped default config matches the built-in defaults."""
    config = Config.load(str(CONFIG_DIR / "default_config.json"))
    assert config.to_dict() == get_default_config().to_dict()
    config.validate()


def test_partial_config_uses_defaults():
    config = Config.from_dict({'search': {'depth': 2}, 'game': {'white': 'ai'}})
    assert config.search.depth == 2
    assert config.search.max_candidates == 8
    assert config.game.white == "ai" and config.game.black == "ai"
    assert config.logging.log_level == "INFO"


def test_validate_rejects_bad_values():
    config = get_default_config()
    config.game.black = "alien"
    with pytest.raises(ValueError):
        config.validate()

    config = get_default_config()
    config.search.depth = -2
    with pytest.raises(ValueError):
        config.validate()

    config = get_default_config()
    config.game.max_input_retries = 0
    with pytest.raises(ValueError):
        config.validate()


def test_search_from_config():
    config = get_default_config()
    config.search.depth = 2
    config.search.max_candidates = 3
    search = AlphaBetaSearch.from_config(config.search)
    assert search.depth == 2 and search.max_candidates == 3


if __name__ == "__main__":
    test_config_creation()
    test_default_config_file()
    test_partial_config_uses_defaults()
    test_validate_rejects_bad_values()
    test_search_from_config()
    print("\nAll config tests passed!")
