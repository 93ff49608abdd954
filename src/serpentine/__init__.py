"""Serpentine — fixed-tick snake game engine."""

from serpentine.config import SCORE_PER_FOOD, EngineConfig
from serpentine.controls import Command, apply_command, resolve_key
from serpentine.engine import GameEngine, GameState, GameStatus, Snapshot
from serpentine.grid import GRID_SIZE, Cell, CellType
from serpentine.loop import GameLoop
from serpentine.snake import Direction, Snake

__all__ = [
    "GRID_SIZE",
    "SCORE_PER_FOOD",
    "Cell",
    "CellType",
    "Command",
    "Direction",
    "EngineConfig",
    "GameEngine",
    "GameLoop",
    "GameState",
    "GameStatus",
    "Snake",
    "Snapshot",
    "apply_command",
    "resolve_key",
]
