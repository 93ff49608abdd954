"""Asyncio driver that ticks an engine on its own, changing, interval."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from serpentine.controls import apply_command, resolve_key
from serpentine.engine import GameEngine, GameStatus, Snapshot
from serpentine.snake import Direction

logger = logging.getLogger(__name__)

FrameCallback = Callable[[Snapshot], Awaitable[None] | None]


class GameLoop:
    """Runs :meth:`GameEngine.tick` on a timer and forwards commands.

    Every engine call happens under :attr:`lock`, so ticks and input
    commands never interleave. The timer is re-armed from the engine's
    current interval after each tick, which picks up speed changes. While
    the game is paused or over the loop parks instead of ticking and wakes
    on the next command.

    Each snapshot produced by a tick or command is passed to *on_frame*,
    which may be a plain function or a coroutine function.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_frame: FrameCallback | None = None,
    ) -> None:
        self.engine = engine
        self.on_frame = on_frame
        self.lock = asyncio.Lock()
        self.frames = 0
        self._wake = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Spawn the tick loop as a background task."""
        if self.active:
            raise RuntimeError("Game loop is already running.")
        self._task = asyncio.create_task(self._run())
        return self._task

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def set_direction(self, direction: Direction) -> Snapshot:
        return await self._command(self.engine.set_direction, direction)

    async def toggle_pause(self) -> Snapshot:
        return await self._command(self.engine.toggle_pause)

    async def restart(self) -> Snapshot:
        return await self._command(self.engine.restart)

    async def press(self, key: str) -> Snapshot | None:
        """Apply the command bound to *key*; ``None`` if the key is ignored."""
        async with self.lock:
            command = resolve_key(key, self.engine.current_state())
            if command is None:
                return None
            snapshot = apply_command(self.engine, command)
        self._wake.set()
        await self._publish(snapshot)
        return snapshot

    async def _command(self, operation: Callable[..., Snapshot], *args: Any) -> Snapshot:
        async with self.lock:
            snapshot = operation(*args)
        self._wake.set()
        await self._publish(snapshot)
        return snapshot

    async def _run(self) -> None:
        try:
            while True:
                async with self.lock:
                    snapshot = self.engine.current_state()
                if snapshot.status is not GameStatus.RUNNING:
                    self._wake.clear()
                    await self._wake.wait()
                    continue

                await asyncio.sleep(snapshot.interval_ms / 1000.0)
                async with self.lock:
                    # A command may have paused or ended the game mid-sleep.
                    if not self._live():
                        continue
                    snapshot = self.engine.tick()
                self.frames += 1
                await self._publish(snapshot)
                if snapshot.game_over:
                    logger.info(
                        "Game over after %d frames, score %d.",
                        self.frames, snapshot.score,
                    )
        except asyncio.CancelledError:
            logger.info("Game loop cancelled.")
        except Exception:
            logger.exception("Game loop stopped on error.")

    def _live(self) -> bool:
        return self.engine.current_state().status is GameStatus.RUNNING

    async def _publish(self, snapshot: Snapshot) -> None:
        if self.on_frame is None:
            return
        result = self.on_frame(snapshot)
        if inspect.isawaitable(result):
            await result
