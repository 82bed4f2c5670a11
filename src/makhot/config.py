"""Configuration management for Thai Checkers (Mak-Hot)."""

import os
import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from .types import Difficulty


logger = logging.getLogger(__name__)

# Log formats used by utils.setup_logger
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'makhot'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class AISettings:
    """Bot settings."""
    difficulty: str = "medium"  # easy, medium, hard
    medium_depth: int = 2
    hard_depth: int = 4
    seed: Optional[int] = None  # None = nondeterministic tie-breaking
    # Evaluation weights
    weight_man: int = 100
    weight_king: int = 300
    weight_advancement: int = 2

    def depth_for(self, difficulty: Difficulty) -> int:
        """Search depth in plies for a difficulty tier (0 = no search)."""
        if difficulty == Difficulty.HARD:
            return self.hard_depth
        if difficulty == Difficulty.MEDIUM:
            return self.medium_depth
        return 0

    def weights(self) -> Dict[str, int]:
        """Evaluation weights in the form expected by ai.eval.set_custom_weights."""
        return {
            'man': self.weight_man,
            'king': self.weight_king,
            'advancement': self.weight_advancement,
        }


@dataclass
class PlayerSettings:
    """Seat configuration."""
    red_type: str = "human"  # human, bot
    black_type: str = "bot"


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = ""  # empty = console only


@dataclass
class Config:
    """Main configuration class."""
    ai: AISettings = field(default_factory=AISettings)
    players: PlayerSettings = field(default_factory=PlayerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'ai': asdict(self.ai),
            'players': asdict(self.players),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'ai' in data:
            config.ai = AISettings(**data['ai'])

        if 'players' in data:
            config.players = PlayerSettings(**data['players'])

        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
                if data is None:
                    return cls()
                return cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def save_config() -> None:
    """Save the global configuration."""
    global _config
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config
