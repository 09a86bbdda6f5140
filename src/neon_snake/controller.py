"""Game controller wiring engine, tick scheduler, input and renderers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from neon_snake.config import GameConfig
from neon_snake.engine import GameEngine, RunState, TickResult
from neon_snake.grid import grid_for_viewport
from neon_snake.input_adapter import is_confirm_key, key_to_direction, swipe_to_direction
from neon_snake.scheduler import TickScheduler
from neon_snake.scoring import BestScoreStore
from neon_snake.snake import Direction

logger = logging.getLogger(__name__)

FrameListener = Callable[[dict], Awaitable[None]]


class GameController:
    """Owns one :class:`GameEngine` and drives it from a :class:`TickScheduler`.

    Renderers subscribe with :meth:`add_listener` and receive a state
    snapshot (plus the tick's events) once right after :meth:`start` and
    after every tick. The scheduler is stopped as soon as a run ends.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.engine = GameEngine(self.config, store=store, seed=seed)
        self.scheduler = TickScheduler(
            self.config.tick_interval, on_error=self._on_loop_error,
        )
        self.stalled = False
        self._listeners: list[FrameListener] = []

    @property
    def state(self) -> RunState:
        return self.engine.state

    def add_listener(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: FrameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def start(self) -> None:
        """Start a new run and begin ticking.

        Raises ``ValueError`` when a run is already in progress.
        """
        self.engine.start()
        self.stalled = False
        self.scheduler.start(self._scheduled_tick)
        await self._publish(TickResult())

    async def confirm(self) -> bool:
        """Start a run, or resume one whose tick loop failed.

        Returns False when a run is already ticking normally.
        """
        if self.state is RunState.RUNNING:
            if not self.stalled:
                return False
            self.stalled = False
            self.scheduler.start(self._scheduled_tick)
            await self._publish(TickResult())
            logger.info("Resumed run at tick %d.", self.engine.tick_count)
            return True
        await self.start()
        return True

    def _on_loop_error(self, exc: Exception) -> None:
        if self.state is RunState.RUNNING:
            self.stalled = True
            logger.warning(
                "Run paused at tick %d after tick failure: %s",
                self.engine.tick_count, exc,
            )

    def submit(self, direction: Direction) -> bool:
        return self.engine.submit(direction)

    async def handle_key(self, key: str) -> bool:
        """Route a key name to either a confirm or a direction submit."""
        if is_confirm_key(key):
            return await self.confirm()
        direction = key_to_direction(key)
        if direction is None:
            return False
        return self.submit(direction)

    def handle_swipe(self, dx: float, dy: float) -> bool:
        if self.state is not RunState.RUNNING:
            return False
        direction = swipe_to_direction(dx, dy, self.engine.direction)
        if direction is None:
            return False
        return self.submit(direction)

    def resize(self, width: int, height: int) -> None:
        """Set the grid size in tiles; applied on the next run."""
        self.engine.resize(width, height)

    def resize_viewport(self, viewport_width: float, viewport_height: float) -> None:
        """Derive the grid size from a viewport in pixels."""
        dims = grid_for_viewport(
            viewport_width,
            viewport_height,
            tile_size=self.config.tile_size,
            margin=self.config.viewport_margin,
            minimum=self.config.min_tiles,
        )
        self.resize(dims.width, dims.height)

    async def tick(self) -> TickResult:
        """Advance one step and notify listeners."""
        result = self.engine.tick()
        if result.died:
            self.scheduler.stop()
        await self._publish(result)
        return result

    async def _scheduled_tick(self) -> None:
        if self.state is not RunState.RUNNING:
            self.scheduler.stop()
            return
        await self.tick()

    def snapshot(self, result: TickResult | None = None) -> dict:
        state = self.engine.get_state()
        state["events"] = [e.to_dict() for e in result.events] if result else []
        state["new_best"] = bool(result and result.new_best)
        return state

    async def _publish(self, result: TickResult) -> None:
        if not self._listeners:
            return
        frame = self.snapshot(result)
        for listener in list(self._listeners):
            try:
                await listener(frame)
            except Exception:
                logger.warning("Dropping renderer listener after send failure.")
                self.remove_listener(listener)

    async def close(self) -> None:
        """Stop ticking and wait for the loop to wind down."""
        await self.scheduler.aclose()
        self._listeners.clear()
