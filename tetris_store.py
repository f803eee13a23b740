"""Best-score persistence"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from tetris_config import CONFIG

log = logging.getLogger(__name__)


class BestScoreStore:
    """get() -> int and set_if_greater(candidate); the stored value never decreases."""

    def get(self) -> int:
        raise NotImplementedError

    def set_if_greater(self, candidate: int) -> int:
        raise NotImplementedError


class MemoryBestScore(BestScoreStore):
    def __init__(self, best: int = 0):
        self.best = max(0, best)

    def get(self) -> int:
        return self.best

    def set_if_greater(self, candidate: int) -> int:
        if candidate > self.best:
            self.best = candidate
        return self.best


class JsonBestScore(BestScoreStore):
    """
    Keeps {key: best} in a small JSON file.

    The file is read once, on first use; a missing or broken file reads as 0.
    It is written only when a strictly greater score arrives, so calling
    set_if_greater() every frame is cheap.
    """

    def __init__(self, path: Union[str, Path, None] = None, key: Optional[str] = None):
        self.path = Path(path or CONFIG["HIGH_SCORE_PATH"]).expanduser()
        self.key = key or CONFIG["HIGH_SCORE_KEY"]
        self._best: Optional[int] = None

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("could not read best score from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring malformed best score file %s", self.path)
            return {}
        return data

    def _load(self) -> int:
        value = self._read().get(self.key, 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            log.warning("ignoring non-integer best score %r in %s", value, self.path)
            return 0

    def get(self) -> int:
        if self._best is None:
            self._best = self._load()
        return self._best

    def set_if_greater(self, candidate: int) -> int:
        best = self.get()
        if candidate <= best:
            return best
        self._best = candidate
        data = self._read()
        data[self.key] = candidate
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            log.warning("could not write best score to %s: %s", self.path, exc)
        else:
            log.info("new best score %d", candidate)
        return candidate
