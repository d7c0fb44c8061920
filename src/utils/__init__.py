"""
Utilities package - Logging and timing helpers for the Simon memory game
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .once_in_ms import OnceInMs
from .scheduler import CallScheduler, ScheduledCall, monotonic_ms

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'OnceInMs',
    'CallScheduler',
    'ScheduledCall',
    'monotonic_ms'
]
