"""Headless simulation runs with a random steering policy."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from serpentine.config import EngineConfig
from serpentine.engine import GameEngine
from serpentine.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate outcome of a batch of simulated games."""

    games: int
    total_ticks: int
    wall_time_seconds: float
    scores: list[int] = field(default_factory=list)

    @property
    def best_score(self) -> int:
        return max(self.scores, default=0)

    @property
    def mean_score(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"best {self.best_score}, mean {self.mean_score:.1f}"
        )

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "total_ticks": self.total_ticks,
            "wall_time_seconds": self.wall_time_seconds,
            "scores": list(self.scores),
            "best_score": self.best_score,
            "mean_score": self.mean_score,
        }


def run_simulation(
    *,
    num_games: int = 10,
    max_ticks: int = 1_000,
    seed: int | None = None,
    config: EngineConfig | None = None,
) -> SimulationResult:
    """Play *num_games* games, steering at random every tick.

    A game ends when the snake dies or after *max_ticks* ticks. One
    engine is reused across games through :meth:`GameEngine.restart`.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")

    rng = np.random.default_rng(seed)
    engine = GameEngine(config=config, rng=rng)

    scores: list[int] = []
    total_ticks = 0
    start = time.perf_counter()

    for game in range(num_games):
        if game:
            engine.restart()
        snapshot = engine.current_state()
        for _ in range(max_ticks):
            engine.set_direction(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
            snapshot = engine.tick()
            total_ticks += 1
            if snapshot.game_over:
                break
        scores.append(snapshot.score)
        logger.debug("Game %d finished with score %d.", game, snapshot.score)

    result = SimulationResult(
        games=num_games,
        total_ticks=total_ticks,
        wall_time_seconds=time.perf_counter() - start,
        scores=scores,
    )
    logger.info(result.summary())
    return result
