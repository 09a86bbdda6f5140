"""In-memory session registry and lifecycle management."""

from __future__ import annotations

import dataclasses
import logging
import time
import uuid
from dataclasses import dataclass, field

from neon_snake.config import GameConfig
from neon_snake.controller import GameController
from neon_snake.engine import RunState
from neon_snake.scoring import BestScoreStore, MemoryStore, ScoreBoard
from neon_snake.server.models import SessionSummary

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class Session:
    """One browser tab's game: a controller plus bookkeeping."""

    session_id: str
    controller: GameController
    created_at: float = field(default_factory=time.monotonic)
    connections: int = 0

    def summary(self) -> SessionSummary:
        engine = self.controller.engine
        return SessionSummary(
            session_id=self.session_id,
            state=engine.state,
            score=engine.score,
            best_score=engine.best_score,
            grid_width=engine.grid.width,
            grid_height=engine.grid.height,
            tick_rate_ms=self.controller.config.tick_rate_ms,
        )


class SessionManager:
    """Central registry of game sessions sharing one best-score store."""

    def __init__(
        self,
        store: BestScoreStore | None = None,
        config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self.store: BestScoreStore = store if store is not None else MemoryStore()
        self.config = config or GameConfig()
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    @property
    def best_score(self) -> int:
        return ScoreBoard(self.store, key=self.config.best_score_key).best

    def create_session(
        self,
        width: int | None = None,
        height: int | None = None,
        viewport_width: float | None = None,
        viewport_height: float | None = None,
        tick_rate_ms: int | None = None,
        seed: int | None = None,
    ) -> Session:
        """Create a new idle session and return it."""
        overrides: dict = {}
        if tick_rate_ms is not None:
            overrides["tick_rate_ms"] = tick_rate_ms
        config = dataclasses.replace(self.config, **overrides)

        self._evict_if_full()
        controller = GameController(config, store=self.store, seed=seed)
        _apply_size(controller, width, height, viewport_width, viewport_height)

        session_id = uuid.uuid4().hex[:12]
        session = Session(session_id=session_id, controller=controller)
        self._sessions[session_id] = session
        logger.info(
            "Session %s created (%dx%d requested).",
            session_id,
            controller.engine.dimensions.width,
            controller.engine.dimensions.height,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def require_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    async def start_session(self, session_id: str) -> Session:
        """Start a run. Raises ``ValueError`` if one is already running."""
        session = self.require_session(session_id)
        await session.controller.start()
        return session

    def resize_session(
        self,
        session_id: str,
        width: int | None = None,
        height: int | None = None,
        viewport_width: float | None = None,
        viewport_height: float | None = None,
    ) -> Session:
        session = self.require_session(session_id)
        _apply_size(
            session.controller, width, height, viewport_width, viewport_height,
        )
        return session

    def _evict_if_full(self) -> None:
        """Drop the oldest non-running session when the registry is full."""
        if len(self._sessions) < self._max_sessions:
            return
        candidates = sorted(
            (
                s for s in self._sessions.values()
                if s.controller.state is not RunState.RUNNING and s.connections == 0
            ),
            key=lambda s: s.created_at,
        )
        if not candidates:
            raise ValueError("Too many active sessions. Try again later.")
        stale = candidates[0]
        self._sessions.pop(stale.session_id, None)
        logger.info("Evicted idle session %s.", stale.session_id)

    async def cleanup(self) -> None:
        """Stop every tick loop."""
        for session in self._sessions.values():
            await session.controller.close()
        logger.info("SessionManager cleanup complete.")


def _apply_size(
    controller: GameController,
    width: int | None,
    height: int | None,
    viewport_width: float | None,
    viewport_height: float | None,
) -> None:
    if width is not None or height is not None:
        dims = controller.engine.dimensions
        controller.resize(width or dims.width, height or dims.height)
    elif viewport_width is not None and viewport_height is not None:
        controller.resize_viewport(viewport_width, viewport_height)
