"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from snake_sim.persistence import JsonFileHighScoreStore, MemoryHighScoreStore
from snake_sim.server.routes import router
from snake_sim.server.session_manager import SessionManager
from snake_sim.server.websocket import ws_router


def create_app(high_score_path: str | Path | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    When *high_score_path* is given the high score is kept in that JSON
    file; otherwise it lives only as long as the process.
    """

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        store = (
            JsonFileHighScoreStore(high_score_path)
            if high_score_path is not None
            else MemoryHighScoreStore()
        )
        app.state.session_manager = SessionManager(store=store)
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(
        title="Snake Sim API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
