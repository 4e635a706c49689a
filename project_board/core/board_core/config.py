"""Configuration for the project board."""

import os
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .state import IdFactory, counter_ids, uuid_ids

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("uuid", "counter")


@dataclass
class BoardConfig:
    """Configuration for a board session."""
    id_strategy: str = "uuid"  # uuid, counter
    min_people: int = 1
    max_people: int = 5
    description_min_length: int = 2
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        """Create config from dictionary."""
        names = field_names()
        return cls(**{k: v for k, v in data.items() if k in names})

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith('_')
        }

    def id_factory(self) -> IdFactory:
        """Build the project id generator selected by ``id_strategy``."""
        if self.id_strategy == "uuid":
            return uuid_ids()
        elif self.id_strategy == "counter":
            return counter_ids()
        raise ValueError(
            f"Unsupported id strategy: {self.id_strategy} (expected one of {', '.join(ID_STRATEGIES)})"
        )


def field_names() -> set:
    """Names of the settings a config source may override."""
    return {f.name for f in fields(BoardConfig)}


def default_config_path() -> Path:
    return Path.home() / ".config" / "project-board" / "board.json"


def load_config(config_path: Optional[Path] = None) -> BoardConfig:
    """Load configuration from environment and files.

    Environment variables override defaults; the JSON config file, when
    present, overrides both.
    """
    config = BoardConfig()

    config.id_strategy = os.getenv("BOARD_ID_STRATEGY", config.id_strategy)
    config.log_level = os.getenv("BOARD_LOG_LEVEL", config.log_level)
    for key, env_name in (("min_people", "BOARD_MIN_PEOPLE"), ("max_people", "BOARD_MAX_PEOPLE")):
        raw = os.getenv(env_name)
        if raw is None:
            continue
        try:
            setattr(config, key, int(raw))
        except ValueError:
            logger.warning(f"Ignoring non-integer {env_name}={raw!r}")

    config_path = config_path or default_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
                for key, value in file_config.items():
                    if key in field_names():
                        setattr(config, key, value)
            logger.info(f"Loaded board config from {config_path}")
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")

    if not isinstance(logging.getLevelName(str(config.log_level).upper()), int):
        logger.warning(f"Unknown log level {config.log_level!r}, using WARNING")
        config.log_level = "WARNING"

    return config
