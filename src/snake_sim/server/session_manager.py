"""In-memory registry of live game sessions."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from snake_sim.config import GameConfig
from snake_sim.direction import TurnMode
from snake_sim.persistence import HighScoreStore, MemoryHighScoreStore
from snake_sim.server.models import SessionSummary
from snake_sim.session import GameSession

logger = logging.getLogger(__name__)

# Simple rate limit: max sessions created per IP within the window.
_RATE_LIMIT_WINDOW = 60.0  # seconds
_RATE_LIMIT_MAX = 10
_RATE_COMPACT_INTERVAL = 60.0  # seconds between stale-key sweeps
_MAX_SESSIONS = 100


class RateLimitError(Exception):
    """Raised when a client creates sessions too quickly."""


@dataclass
class SessionInstance:
    """A registered session and its bookkeeping."""

    session_id: str
    session: GameSession
    created_at: float = field(default_factory=time.monotonic)

    def summary(self) -> SessionSummary:
        state = self.session.state
        return SessionSummary(
            session_id=self.session_id,
            phase=state.phase.value,
            score=state.score,
            high_score=self.session.high_score,
            tick_interval_ms=state.tick_interval_ms,
        )


class SessionManager:
    """Creates, looks up, and retires game sessions.

    All sessions share one high-score store, so a record set in one
    session is seen by sessions created afterwards.
    """

    def __init__(
        self,
        store: HighScoreStore | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self.store: HighScoreStore = store if store is not None else MemoryHighScoreStore()
        self._sessions: dict[str, SessionInstance] = {}
        self._rate_limits: dict[str, list[float]] = {}
        self._last_rate_compact: float = 0.0
        self._max_sessions = max_sessions

    def _check_rate_limit(self, client_ip: str) -> bool:
        """Return True if the client is within rate limits."""
        now = time.monotonic()
        recent = [
            t for t in self._rate_limits.get(client_ip, [])
            if now - t < _RATE_LIMIT_WINDOW
        ]
        if recent:
            self._rate_limits[client_ip] = recent
        else:
            self._rate_limits.pop(client_ip, None)
        self._compact_rate_limits(now)
        return len(recent) < _RATE_LIMIT_MAX

    def _compact_rate_limits(self, now: float) -> None:
        """Drop clients whose creation timestamps have all aged out."""
        if now - self._last_rate_compact < _RATE_COMPACT_INTERVAL:
            return
        self._last_rate_compact = now
        stale = [
            ip for ip, stamps in self._rate_limits.items()
            if all(now - t >= _RATE_LIMIT_WINDOW for t in stamps)
        ]
        for ip in stale:
            del self._rate_limits[ip]
        if stale:
            logger.info("Compacted %d stale rate-limit entries.", len(stale))

    def create_session(
        self,
        grid_size: int = 20,
        turn_mode: str = "last_write",
        seed: int | None = None,
        client_ip: str = "unknown",
    ) -> SessionInstance:
        """Create and register a new idle session."""
        if not self._check_rate_limit(client_ip):
            raise RateLimitError("Rate limit exceeded. Try again later.")

        centre = grid_size // 2
        config = GameConfig(
            grid_size=grid_size,
            start=(centre, centre),
            initial_food=GameConfig.initial_food if grid_size > 15 else None,
            turn_mode=TurnMode(turn_mode),
            seed=seed,
        )
        self._evict_if_full()

        session_id = uuid.uuid4().hex[:12]
        instance = SessionInstance(
            session_id=session_id,
            session=GameSession(config, store=self.store),
        )
        self._sessions[session_id] = instance
        self._rate_limits.setdefault(client_ip, []).append(time.monotonic())
        logger.info("Session %s created (grid=%d).", session_id, grid_size)
        return instance

    def _evict_if_full(self) -> None:
        """Drop the oldest sessions so a new one fits under the cap."""
        overflow = len(self._sessions) - self._max_sessions + 1
        if overflow <= 0:
            return
        oldest = sorted(self._sessions.values(), key=lambda s: s.created_at)
        for stale in oldest[:overflow]:
            self.close_session(stale.session_id)
        logger.info(
            "Evicted %d sessions (retaining up to %d).",
            overflow, self._max_sessions,
        )

    def get_session(self, session_id: str) -> SessionInstance | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def close_session(self, session_id: str) -> bool:
        """Stop and forget a session. Returns False if it did not exist."""
        instance = self._sessions.pop(session_id, None)
        if instance is None:
            return False
        instance.session.close()
        logger.info("Session %s closed.", session_id)
        return True

    async def cleanup(self) -> None:
        """Stop every session and release rate-limit state."""
        for session_id in list(self._sessions):
            self.close_session(session_id)
        self._rate_limits.clear()
        logger.info("SessionManager cleanup complete.")
