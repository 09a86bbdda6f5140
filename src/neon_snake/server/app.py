"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from neon_snake.config import GameConfig
from neon_snake.scoring import BestScoreStore, JsonFileStore, MemoryStore
from neon_snake.server.routes import router, scores_router
from neon_snake.server.session_manager import SessionManager
from neon_snake.server.websocket import ws_router


def create_app(
    config: GameConfig | None = None,
    score_file: str | Path | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Best scores are kept in *score_file* when given, otherwise in memory.
    """
    store: BestScoreStore = (
        JsonFileStore(score_file) if score_file is not None else MemoryStore()
    )

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session_manager = SessionManager(store=store, config=config)
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(
        title="Neon Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(scores_router)
    app.include_router(ws_router)
    return app
