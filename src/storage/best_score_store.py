"""
Best score persistence
"""

import json
import os
import tempfile
from pathlib import Path

from memory_game.interfaces import BestScoreStoreError, IBestScoreStore


class JsonBestScoreStore(IBestScoreStore):
    """
    Best score kept in a small JSON file: {"best_score": 120}

    A missing file means no best score yet (0). Anything unreadable is
    reported as BestScoreStoreError so the caller decides how to recover.
    """

    KEY = "best_score"

    def __init__(self, path: str, logger=None):
        """
        Args:
            path: JSON file location, parent directories are created on save
            logger: Optional ClassLogger
        """
        self.path = Path(path)
        self.logger = logger

    def load(self) -> int:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            if self.logger:
                self.logger.info(f"No best score file at {self.path}, starting from 0")
            return 0
        except (OSError, ValueError) as e:
            raise BestScoreStoreError(f"Could not read best score from {self.path}: {e}") from e

        value = data.get(self.KEY) if isinstance(data, dict) else None
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise BestScoreStoreError(f"Invalid best score in {self.path}: {value!r}")

        if self.logger:
            self.logger.info(f"Loaded best score {value} from {self.path}")
        return value

    def save(self, best_score: int) -> None:
        # Write to a temp file and swap it in, the old file survives a failed write
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
        except OSError as e:
            raise BestScoreStoreError(f"Could not write best score to {self.path}: {e}") from e

        try:
            with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
                json.dump({self.KEY: best_score}, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            if isinstance(e, OSError):
                raise BestScoreStoreError(f"Could not write best score to {self.path}: {e}") from e
            raise

        if self.logger:
            self.logger.debug(f"Saved best score {best_score} to {self.path}")


class InMemoryBestScoreStore(IBestScoreStore):
    """Best score that lives only as long as the process"""

    def __init__(self, initial: int = 0):
        self.best_score: int = initial
        self.save_count = 0

    def load(self) -> int:
        return self.best_score

    def save(self, best_score: int) -> None:
        self.best_score = best_score
        self.save_count += 1
