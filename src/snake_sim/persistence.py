"""High-score persistence backends."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Somewhere a single best score survives between sessions."""

    def read_high_score(self) -> int: ...

    def write_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Process-local store, mostly useful for tests and ephemeral servers."""

    def __init__(self, initial: int = 0) -> None:
        self.value = initial
        self.writes = 0

    def read_high_score(self) -> int:
        return self.value

    def write_high_score(self, value: int) -> None:
        self.value = value
        self.writes += 1


class JsonFileHighScoreStore:
    """Stores the high score as ``{"high_score": n}`` in a JSON file.

    A missing or unreadable file reads as 0. Write failures are logged and
    swallowed; the caller never sees them.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, ValueError):
            logger.warning("Could not read high score from %s.", self.path)
            return 0
        value = raw.get("high_score", 0) if isinstance(raw, dict) else raw
        if type(value) is not int or value < 0:
            logger.warning("Ignoring invalid high score %r in %s.", value, self.path)
            return 0
        return value

    def write_high_score(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": value}))
        except OSError:
            logger.warning(
                "Failed writing high score %d to %s.", value, self.path,
                exc_info=True,
            )
            return
        logger.info("High score %d saved to %s", value, self.path)
