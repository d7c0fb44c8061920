"""
InputEvent - Immutable player input event
"""

import enum
from dataclasses import dataclass
from typing import Optional


class InputEventKind(enum.Enum):
    SIGNAL_PRESSED = "signal_pressed"
    START_REQUESTED = "start_requested"
    STRICT_TOGGLE = "strict_toggle"
    RESET = "reset"
    ACKNOWLEDGE = "acknowledge"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """
    One input event from an input source.

    Usage:
        event = InputEvent.signal(2)
        print(f"Pressed pad {event.signal_index}")
    """
    kind: InputEventKind
    signal_index: Optional[int] = None

    def __post_init__(self):
        """Validate that only signal presses carry an index"""
        if not isinstance(self.kind, InputEventKind):
            raise TypeError(f"kind must be an InputEventKind, got {type(self.kind).__name__}")

        if self.kind is InputEventKind.SIGNAL_PRESSED:
            if not isinstance(self.signal_index, int) or isinstance(self.signal_index, bool):
                raise ValueError(f"Signal press needs an integer index, got {self.signal_index!r}")
            if self.signal_index < 0:
                raise ValueError(f"Signal index must be non-negative, got {self.signal_index}")
        elif self.signal_index is not None:
            raise ValueError(f"{self.kind.name} events do not carry a signal index")

    @classmethod
    def signal(cls, index: int) -> 'InputEvent':
        return cls(InputEventKind.SIGNAL_PRESSED, index)

    @classmethod
    def of(cls, kind: InputEventKind) -> 'InputEvent':
        return cls(kind)

    def __str__(self) -> str:
        if self.kind is InputEventKind.SIGNAL_PRESSED:
            return f"InputEvent(signal={self.signal_index})"
        return f"InputEvent({self.kind.name})"
