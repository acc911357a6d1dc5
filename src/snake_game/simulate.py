"""Headless autopilot games for smoke testing and throughput measurement."""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from snake_game.difficulty import Difficulty, profile_for
from snake_game.engine import DEFAULT_GROWTH, GameResult, SnakeLogic
from snake_game.snake import Direction

logger = logging.getLogger(__name__)

_MOVES = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


@dataclass
class SimulationResult:
    """Aggregate results of a batch of autopilot games."""

    total_games: int
    total_steps: int
    mean_score: float
    best_score: int
    wall_time_seconds: float
    outcomes: dict[str, int] = field(default_factory=dict)

    @property
    def steps_per_second(self) -> float:
        return self.total_steps / max(self.wall_time_seconds, 1e-9)

    def summary(self) -> str:
        outcome_text = ", ".join(
            f"{name}={count}" for name, count in sorted(self.outcomes.items())
        )
        return (
            f"Simulation: {self.total_games} games, {self.total_steps} steps "
            f"in {self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.1f}, best {self.best_score} | "
            f"{self.steps_per_second:.1f} steps/s | {outcome_text}"
        )


def choose_direction(logic: SnakeLogic, rng: np.random.Generator) -> Direction:
    """Pick a move that does not collide on the next step.

    Moves that close the distance to the food are preferred; ties and
    the remaining safe moves are broken randomly. Falls back to the
    current direction when every move is fatal.
    """
    head = logic.snake[-1]
    body = set(logic.snake)
    food_x, food_y = logic.food

    safe: list[tuple[int, float, Direction]] = []
    for move in _MOVES:
        if logic.direction is not Direction.NONE and move is logic.direction.opposite:
            continue
        cell = logic.grid.neighbor(head, move)
        if cell is None or cell in body:
            continue
        distance = abs(cell[0] - food_x) + abs(cell[1] - food_y)
        safe.append((distance, float(rng.random()), move))

    if not safe:
        return logic.direction
    return min(safe)[2]


def run_simulation(
    *,
    difficulty: Difficulty | str = Difficulty.EASY,
    num_games: int = 10,
    max_steps: int = 1_000,
    growth_per_food: int = DEFAULT_GROWTH,
    seed: int | None = 0,
) -> SimulationResult:
    """Play *num_games* autopilot games of at most *max_steps* steps each."""
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_steps < 1:
        raise ValueError("max_steps must be at least 1.")

    profile = profile_for(difficulty)
    rng = np.random.default_rng(seed)
    outcomes: Counter[str] = Counter()
    scores: list[int] = []
    total_steps = 0
    start = time.perf_counter()

    for _ in range(num_games):
        logic = SnakeLogic(
            profile.width,
            profile.height,
            growth_per_food=growth_per_food,
            seed=int(rng.integers(2**31)),
        )
        outcome = GameResult.NO_OP
        for _ in range(max_steps):
            logic.change_direction(choose_direction(logic, rng))
            outcome = logic.next_step()
            total_steps += 1
            if outcome.is_terminal:
                break
        outcomes[outcome.value if outcome.is_terminal else "truncated"] += 1
        scores.append(len(logic.snake))

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        total_games=num_games,
        total_steps=total_steps,
        mean_score=float(np.mean(scores)),
        best_score=max(scores),
        wall_time_seconds=elapsed,
        outcomes=dict(outcomes),
    )
    logger.info(result.summary())
    return result
