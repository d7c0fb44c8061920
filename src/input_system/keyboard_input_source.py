"""
Raw terminal keyboard input source
"""

import sys
import select
import termios
import tty
from typing import Dict, List, Optional

from .input_event import InputEvent, InputEventKind
from .interfaces import IInputSource

# Control keys (checked after the signal key map)
STRICT_KEYS = ('s', 'S')
RESET_KEYS = ('r', 'R')
ACKNOWLEDGE_KEYS = ('\r', '\n')
QUIT_KEYS = ('q', 'Q', '\x03')  # raw mode delivers Ctrl+C as a character


class KeyboardInputSource(IInputSource):
    """
    Keyboard input over a raw terminal.

    Works over SSH using stdin (non-blocking select). Keys in the key map
    press signal pads; the control keys toggle strict mode, reset, dismiss
    the game over summary or quit; any other key requests a start.

    Example:
        source = KeyboardInputSource(key_map={'1': 0, '2': 1, '3': 2, '4': 3}, logger=logger)
        source.setup()
        for event in source.poll_events():
            controller.handle_event(event)
    """

    def __init__(self, key_map: Dict[str, int], logger, stdin=None):
        """
        Args:
            key_map: Single-character key -> signal index
            logger: ClassLogger instance for logging
            stdin: Input stream, defaults to sys.stdin
        """
        self._key_map = dict(key_map)
        self._logger = logger
        self._stdin = stdin if stdin is not None else sys.stdin

        # Track if stdin is available and in raw mode
        self._stdin_available = False
        self._original_terminal_settings = None
        self._raw_mode_enabled = False

    def _check_stdin_available(self) -> bool:
        """Check if stdin is an interactive terminal"""
        try:
            if not self._stdin.isatty():
                return False
            select.select([self._stdin], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def _enable_raw_mode(self) -> bool:
        """
        Enable raw terminal mode for immediate key capture.

        Returns:
            True if raw mode enabled successfully, False otherwise
        """
        try:
            self._original_terminal_settings = termios.tcgetattr(self._stdin)
            tty.setraw(self._stdin.fileno())
            self._raw_mode_enabled = True
            return True
        except (termios.error, OSError) as e:
            self._logger.warning(f"Could not enable raw terminal mode: {e}")
            return False

    def _disable_raw_mode(self) -> None:
        """Restore original terminal settings"""
        if self._raw_mode_enabled and self._original_terminal_settings:
            try:
                termios.tcsetattr(
                    self._stdin.fileno(),
                    termios.TCSADRAIN,
                    self._original_terminal_settings
                )
            except (termios.error, OSError) as e:
                self._logger.warning(f"Could not restore terminal settings: {e}")
            self._raw_mode_enabled = False

    def setup(self) -> None:
        """Initialize keyboard input"""
        self._stdin_available = self._check_stdin_available()

        if not self._stdin_available:
            self._logger.error("❌ Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        if not self._enable_raw_mode():
            self._logger.error("❌ Could not enable raw terminal mode")
            raise RuntimeError("Failed to enable raw terminal mode")

        pads = ", ".join(f"'{key}'→{index}" for key, index in sorted(self._key_map.items(), key=lambda kv: kv[1]))
        self._logger.info("🎮 Keyboard input initialized")
        self._logger.info(f"   Pads: {pads}")
        self._logger.info("   's' strict mode, 'r' reset, Enter dismiss, 'q' quit, any other key starts")

    def translate_key(self, key: str) -> Optional[InputEvent]:
        """
        Map one character to an input event.

        Returns:
            InputEvent, or None for an empty read
        """
        if not key:
            return None
        if key in self._key_map:
            return InputEvent.signal(self._key_map[key])
        if key in STRICT_KEYS:
            return InputEvent.of(InputEventKind.STRICT_TOGGLE)
        if key in RESET_KEYS:
            return InputEvent.of(InputEventKind.RESET)
        if key in ACKNOWLEDGE_KEYS:
            return InputEvent.of(InputEventKind.ACKNOWLEDGE)
        if key in QUIT_KEYS:
            return InputEvent.of(InputEventKind.QUIT)
        return InputEvent.of(InputEventKind.START_REQUESTED)

    def poll_events(self) -> List[InputEvent]:
        """Drain all pending keystrokes without blocking"""
        events: List[InputEvent] = []
        if not self._stdin_available:
            return events

        while select.select([self._stdin], [], [], 0)[0]:
            event = self.translate_key(self._stdin.read(1))
            if event is None:
                break
            self._logger.debug(f"Keyboard: {event}")
            events.append(event)
        return events

    def cleanup(self) -> None:
        """Restore the terminal"""
        self._disable_raw_mode()
        self._stdin_available = False
        self._logger.info("Keyboard input cleaned up")
