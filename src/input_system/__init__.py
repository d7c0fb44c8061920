"""
Input System Package

Player input for the Simon memory game: an immutable event model, the
input source interface, a raw-terminal keyboard source and a queued source.
"""

from .input_event import InputEvent, InputEventKind
from .interfaces import IInputSource
from .keyboard_input_source import KeyboardInputSource
from .queued_input_source import QueuedInputSource

__all__ = [
    "InputEvent",
    "InputEventKind",
    "IInputSource",
    "KeyboardInputSource",
    "QueuedInputSource"
]
