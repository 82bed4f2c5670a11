"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_board():
    """Create an empty board."""
    from makhot.board import Board
    return Board()


@pytest.fixture
def initial_board():
    """Create an initial board."""
    from makhot.board import Board
    return Board.initial()


@pytest.fixture
def initial_game_state():
    """Create an initial game state."""
    from makhot.game_state import GameState
    return GameState.initial()


@pytest.fixture(autouse=True)
def default_weights():
    """Reset evaluation weights around every test."""
    from makhot.ai.eval import set_custom_weights
    set_custom_weights(None)
    yield
    set_custom_weights(None)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config loader at an empty temporary directory."""
    from makhot import config
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.setattr(config, "_config", None)
    return tmp_path / "makhot"
