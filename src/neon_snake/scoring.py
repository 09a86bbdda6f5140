"""Score tracking and best-score persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_BEST_SCORE_KEY = "neon-snake-high-score"


class BestScoreStore(Protocol):
    """String-keyed scalar store used to persist the best score."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-local store; nothing survives a restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a flat JSON object on disk.

    The whole file is rewritten on every :meth:`set`; it only ever holds a
    handful of keys.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable score file %s.", self.path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed score file %s.", self.path)
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2))
        tmp.replace(self.path)


def _parse_score(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(float(raw))
    except (ValueError, OverflowError):
        logger.warning("Stored best score %r is not a number; using 0.", raw)
        return 0
    return max(value, 0)


class ScoreBoard:
    """Current-run score plus the persisted best score.

    The best score is read once at construction and written back only from
    :meth:`finalize`, which the engine calls exactly once per finished run.
    """

    def __init__(
        self,
        store: BestScoreStore | None = None,
        key: str = DEFAULT_BEST_SCORE_KEY,
    ) -> None:
        self.store: BestScoreStore = store if store is not None else MemoryStore()
        self.key = key
        self.score = 0
        self.best = _parse_score(self.store.get(key))

    def reset(self) -> None:
        self.score = 0

    def award(self, points: int) -> int:
        """Add *points* to the current score and return the new total."""
        if points < 0:
            raise ValueError("points must be >= 0.")
        self.score += points
        return self.score

    def refresh(self) -> int:
        """Re-read the stored best, keeping the higher of stored and cached."""
        self.best = max(self.best, _parse_score(self.store.get(self.key)))
        return self.best

    def finalize(self) -> bool:
        """Persist the current score if it beats the best. Returns True if so."""
        self.refresh()
        if self.score <= self.best:
            return False
        self.best = self.score
        self.store.set(self.key, str(self.best))
        logger.info("New best score: %d.", self.best)
        return True

    def to_dict(self) -> dict:
        return {"score": self.score, "best": self.best}
