"""Difficulty tiers mapping to grid size and tick duration."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_game.engine import SnakeLogic


class Difficulty(enum.Enum):
    """Named difficulty tiers, in the order the settings menu cycles them."""

    VERY_EASY = "very_easy"
    EASY = "easy"
    NORMAL = "normal"
    INTERMEDIATE = "intermediate"
    HARD = "hard"
    EXPERT = "expert"
    EXTREME = "extreme"
    INSANE = "insane"
    BASIC = "basic"
    VERY_HARD = "very_hard"

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``"Very Easy"``."""
        return self.value.replace("_", " ").title()

    def next(self) -> Difficulty:
        tiers = list(Difficulty)
        return tiers[(tiers.index(self) + 1) % len(tiers)]

    def previous(self) -> Difficulty:
        tiers = list(Difficulty)
        return tiers[(tiers.index(self) - 1) % len(tiers)]


@dataclass(frozen=True)
class DifficultyProfile:
    """Grid size and timestep (seconds) for one difficulty tier."""

    width: int
    height: int
    timestep: float

    def __post_init__(self) -> None:
        if not SnakeLogic.size_is_valid(self.width, self.height):
            raise ValueError(
                f"Profile grid {self.width}x{self.height} is outside "
                "the supported engine bounds."
            )
        if self.timestep <= 0:
            raise ValueError("timestep must be positive.")


PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.VERY_EASY: DifficultyProfile(8, 8, 0.400),
    Difficulty.EASY: DifficultyProfile(15, 15, 0.200),
    Difficulty.NORMAL: DifficultyProfile(25, 25, 0.100),
    Difficulty.INTERMEDIATE: DifficultyProfile(45, 45, 0.060),
    Difficulty.HARD: DifficultyProfile(35, 35, 0.075),
    Difficulty.EXPERT: DifficultyProfile(100, 100, 0.010),
    Difficulty.EXTREME: DifficultyProfile(70, 70, 0.035),
    Difficulty.INSANE: DifficultyProfile(85, 85, 0.020),
    Difficulty.BASIC: DifficultyProfile(11, 11, 0.150),
    Difficulty.VERY_HARD: DifficultyProfile(55, 55, 0.030),
}


def profile_for(tier: Difficulty | str) -> DifficultyProfile:
    """Look up the profile for a tier, by enum member or value string."""
    if isinstance(tier, str):
        try:
            tier = Difficulty(tier)
        except ValueError:
            raise KeyError(f"Difficulty {tier!r} not found.") from None
    return PROFILES[tier]
