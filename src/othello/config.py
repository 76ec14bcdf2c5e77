"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

PLAYER_KINDS = ("human", "ai")


@dataclass
class SearchConfig:
    """Configuration for the alpha-beta search."""
    depth: int = 5
    max_candidates: int = 8  # Branching factor kept at every node
    trace_depth: int = 4  # Nesting recorded by a search trace
    trace_file: Optional[str] = None  # Write the last AI search outline here


@dataclass
class GameConfig:
    """Configuration for who plays each side."""
    white: str = "human"
    black: str = "ai"
    max_input_retries: Optional[int] = None  # None re-prompts forever


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> 'Config':
        """Raise ValueError if any setting is out of range."""
        for side in ("white", "black"):
            kind = getattr(self.game, side)
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind for {side}: {kind!r} (expected one of {PLAYER_KINDS})")
        if self.search.depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {self.search.depth}")
        if self.search.max_candidates < 1:
            raise ValueError(f"max_candidates must be at least 1, got {self.search.max_candidates}")
        retries = self.game.max_input_retries
        if retries is not None and retries < 1:
            raise ValueError(f"max_input_retries must be at least 1 or null, got {retries}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            search=SearchConfig(**config_dict.get('search', {})),
            game=GameConfig(**config_dict.get('game', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
