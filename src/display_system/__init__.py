"""
Display System Package

Presenters that render the Simon memory game.
"""

from .console_presenter import ConsolePresenter

__all__ = [
    "ConsolePresenter"
]
