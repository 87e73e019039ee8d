"""High score persistence"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from blockfall_config import CONFIG

log = logging.getLogger(__name__)


class MemoryHighScoreStore:
    def __init__(self, best: int = 0):
        self.best = best

    def get_high_score(self) -> int:
        return self.best

    def record_high_score(self, score: int) -> bool:
        if score > self.best:
            self.best = score
            return True
        return False


class JsonHighScoreStore(MemoryHighScoreStore):
    """Keeps the best score in a small JSON file, ``{"high_score": N}``."""
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or CONFIG["HIGHSCORE_FILE"]).expanduser()
        super().__init__(self._load())

    def _load(self) -> int:
        try:
            if self.path.exists():
                data = json.loads(self.path.read_text(encoding="utf-8"))
                return max(0, int(data.get("high_score", 0)))
        except (OSError, ValueError, AttributeError, TypeError) as e:
            log.warning("could not read high score from %s: %s", self.path, e)
        return 0

    def save(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": self.best}), encoding="utf-8")
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)

    def get_high_score(self) -> int:
        self.best = max(self.best, self._load())
        return self.best

    def record_high_score(self, score: int) -> bool:
        if super().record_high_score(score):
            self.save()
            return True
        return False
