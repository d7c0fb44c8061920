"""
Storage Package

Best score persistence for the Simon memory game.
"""

from .best_score_store import BestScoreStoreError, JsonBestScoreStore, InMemoryBestScoreStore

__all__ = [
    "BestScoreStoreError",
    "JsonBestScoreStore",
    "InMemoryBestScoreStore"
]
