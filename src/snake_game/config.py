"""Session configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_game.difficulty import Difficulty
from snake_game.engine import DEFAULT_GROWTH
from snake_game.food import InitialPlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Settings used whenever a session starts a new game."""

    difficulty: Difficulty = Difficulty.NORMAL
    growth_per_food: int = DEFAULT_GROWTH
    initial_placement: InitialPlacement = InitialPlacement.RANDOM
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.growth_per_food < 0:
            raise ValueError("growth_per_food must be non-negative.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their values)."""
        d = asdict(self)
        d["difficulty"] = self.difficulty.value
        d["initial_placement"] = self.initial_placement.value
        return d

    @classmethod
    def from_dict(cls, raw: dict) -> SessionConfig:
        d = dict(raw)
        if "difficulty" in d:
            d["difficulty"] = Difficulty(d["difficulty"])
        if "initial_placement" in d:
            d["initial_placement"] = InitialPlacement(d["initial_placement"])
        return cls(**d)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SessionConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
