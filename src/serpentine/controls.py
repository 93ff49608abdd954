"""Keyboard policy mapping key names to engine commands."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from serpentine.snake import Direction

if TYPE_CHECKING:
    from serpentine.engine import GameEngine, Snapshot


class Command(enum.Enum):
    """Discrete commands a driver can forward to the engine."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


_MOVES: dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

# Lower-cased key names, covering browser ``KeyboardEvent.key`` values
# as well as plain names.
_KEY_MOVES: dict[str, Command] = {
    "arrowup": Command.MOVE_UP,
    "up": Command.MOVE_UP,
    "w": Command.MOVE_UP,
    "arrowdown": Command.MOVE_DOWN,
    "down": Command.MOVE_DOWN,
    "s": Command.MOVE_DOWN,
    "arrowleft": Command.MOVE_LEFT,
    "left": Command.MOVE_LEFT,
    "a": Command.MOVE_LEFT,
    "arrowright": Command.MOVE_RIGHT,
    "right": Command.MOVE_RIGHT,
    "d": Command.MOVE_RIGHT,
}

_PAUSE_KEYS = frozenset({" ", "space", "spacebar"})
_RESTART_KEYS = frozenset({"enter", "return"})


def resolve_key(key: str, snapshot: Snapshot) -> Command | None:
    """Translate a key press into a command, or ``None`` to ignore it.

    Pause only applies to a live game and restart only to a finished one.
    """
    name = key if key == " " else key.strip().lower()
    if name in _KEY_MOVES:
        return _KEY_MOVES[name]
    if name in _PAUSE_KEYS:
        return None if snapshot.game_over else Command.TOGGLE_PAUSE
    if name in _RESTART_KEYS:
        return Command.RESTART if snapshot.game_over else None
    return None


def apply_command(engine: GameEngine, command: Command) -> Snapshot:
    """Forward *command* to the matching engine operation."""
    if command in _MOVES:
        return engine.set_direction(_MOVES[command])
    if command is Command.TOGGLE_PAUSE:
        return engine.toggle_pause()
    if command is Command.RESTART:
        return engine.restart()
    raise ValueError(f"Unknown command: {command!r}")
