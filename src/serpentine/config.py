"""Speed and placement tuning for the game engine."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Points awarded per food; every score is a multiple of this.
SCORE_PER_FOOD = 10


@dataclass(frozen=True)
class EngineConfig:
    """Tick interval progression and food sampler settings.

    Supports JSON serialization for reproducible runs.
    """

    initial_interval_ms: int = 200
    min_interval_ms: int = 50
    interval_step_ms: int = 5
    max_food_attempts: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.min_interval_ms < 1:
            raise ValueError("min_interval_ms must be at least 1.")
        if self.initial_interval_ms < self.min_interval_ms:
            raise ValueError(
                "initial_interval_ms must not be below min_interval_ms.",
            )
        if self.interval_step_ms < 0:
            raise ValueError("interval_step_ms must be >= 0.")
        if self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1.")

    def next_interval(self, interval_ms: int) -> int:
        """Return the tick interval after one food is eaten."""
        return max(self.min_interval_ms, interval_ms - self.interval_step_ms)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> EngineConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
