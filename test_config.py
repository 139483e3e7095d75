"""
Test script for configuration system.
"""
import json
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.config import Config, GameConfig, LoggingConfig, get_default_config


def test_default_config():
    config = get_default_config()
    assert config.project_name == "Reversi"
    assert config.game.show_hints
    assert config.game.announce_pass
    assert config.logging.log_level == "INFO"
    assert not config.logging.log_to_file


def test_config_save_and_load(tmp_path):
    """Test saving and loading a config."""
    config = get_default_config()
    config.game.show_hints = False
    config.logging.log_dir = str(tmp_path / "logs")

    test_path = tmp_path / "nested" / "config.json"
    config.save(str(test_path))
    assert test_path.exists()

    loaded_config = Config.load(str(test_path))
    assert loaded_config.to_dict() == config.to_dict()
    assert isinstance(loaded_config.game, GameConfig)
    assert isinstance(loaded_config.logging, LoggingConfig)


def test_partial_dict_uses_defaults():
    config = Config.from_dict({'logging': {'log_level': 'DEBUG'}})
    assert config.project_name == "Reversi"
    assert config.logging.log_level == "DEBUG"
    assert config.logging.log_dir == "logs"
    assert config.game == GameConfig()


def test_unknown_key_is_rejected():
    with pytest.raises(TypeError):
        Config.from_dict({'game': {'board_size': 10}})


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        Config.load(str(path))


if __name__ == "__main__":
    test_default_config()
    test_partial_dict_uses_defaults()
    print("Config test completed successfully!")
