"""
Sequence engine - canonical signal sequence and player input judging
"""

import enum
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

# A signal source returns one signal index per call
SignalSource = Callable[[], int]


class RandomSignalSource:
    """Uniform random signals in 0..signal_count-1"""

    def __init__(self, signal_count: int, seed: Optional[int] = None):
        self.signal_count = signal_count
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randrange(self.signal_count)


class ScriptedSignalSource:
    """
    Deterministic signal source replaying a fixed list.

    Example:
        engine = SequenceEngine(signal_source=ScriptedSignalSource([0, 1, 2]))
        engine.append_random_signal()  # 0
        engine.append_random_signal()  # 1

    Raises:
        IndexError: When asked for more signals than were scripted
    """

    def __init__(self, signals: Iterable[int]):
        self._signals: List[int] = list(signals)
        self._position = 0

    def __call__(self) -> int:
        if self._position >= len(self._signals):
            raise IndexError(f"Scripted signal source exhausted after {len(self._signals)} signals")
        signal = self._signals[self._position]
        self._position += 1
        return signal

    @property
    def remaining(self) -> int:
        return len(self._signals) - self._position


class CheckOutcome(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    COMPLETE_MATCH = "complete_match"


@dataclass(frozen=True)
class CheckResult:
    """Result of comparing player input against the canonical sequence"""
    outcome: CheckOutcome
    mismatch_index: Optional[int] = None

    @property
    def is_mismatch(self) -> bool:
        return self.outcome is CheckOutcome.INCORRECT

    @property
    def is_complete(self) -> bool:
        return self.outcome is CheckOutcome.COMPLETE_MATCH

    def __str__(self) -> str:
        if self.is_mismatch:
            return f"IncorrectAt({self.mismatch_index})"
        return "CompleteMatch" if self.is_complete else "Correct"


class SequenceEngine:
    """
    Owns the canonical signal sequence.

    The sequence is append-only during a session and is only cleared by
    reset(). Player input is judged incrementally with check_prefix().
    """

    def __init__(self, signal_count: int = 4, signal_source: Optional[SignalSource] = None):
        """
        Args:
            signal_count: Size of the signal alphabet
            signal_source: Callable returning the next signal, defaults to uniform random
        """
        if signal_count <= 0:
            raise ValueError(f"Signal count must be positive, got {signal_count}")
        self.signal_count = signal_count
        self._signal_source: SignalSource = signal_source or RandomSignalSource(signal_count)
        self._sequence: List[int] = []

    @property
    def sequence(self) -> Tuple[int, ...]:
        return tuple(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def append_random_signal(self) -> int:
        """
        Draw one signal from the source and append it.

        Returns:
            The appended signal

        Raises:
            ValueError: If the source produced a value outside the alphabet
        """
        signal = self._signal_source()
        if not isinstance(signal, int) or not (0 <= signal < self.signal_count):
            raise ValueError(f"Signal source produced {signal!r}, expected 0-{self.signal_count - 1}")
        self._sequence.append(signal)
        return signal

    def check_prefix(self, user_input: Sequence[int]) -> CheckResult:
        """
        Compare player input with the sequence position by position.

        Stops at the first mismatch. Input longer than the sequence is
        incorrect at the first position past the end.
        """
        for index, signal in enumerate(user_input):
            if index >= len(self._sequence) or signal != self._sequence[index]:
                return CheckResult(CheckOutcome.INCORRECT, mismatch_index=index)

        if len(user_input) == len(self._sequence):
            return CheckResult(CheckOutcome.COMPLETE_MATCH)
        return CheckResult(CheckOutcome.CORRECT)

    def reset(self) -> None:
        """Clear the sequence for a new session"""
        self._sequence.clear()

    def __str__(self) -> str:
        return f"SequenceEngine(sequence={self._sequence}, signal_count={self.signal_count})"
