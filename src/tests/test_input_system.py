"""Tests for input_system: events, key translation and the queued source."""

import pytest

from input_system import InputEvent, InputEventKind, KeyboardInputSource, QueuedInputSource
from memory_game.config import default_key_map


@pytest.fixture
def keyboard(logger):
    return KeyboardInputSource(key_map=default_key_map(), logger=logger)


class TestInputEvent:

    def test_signal_event(self):
        event = InputEvent.signal(2)
        assert event.kind is InputEventKind.SIGNAL_PRESSED
        assert event.signal_index == 2
        assert str(event) == "InputEvent(signal=2)"

    def test_control_event(self):
        event = InputEvent.of(InputEventKind.RESET)
        assert event.signal_index is None
        assert str(event) == "InputEvent(RESET)"

    @pytest.mark.parametrize("index", [None, -1, "1", True])
    def test_signal_event_needs_valid_index(self, index):
        with pytest.raises(ValueError):
            InputEvent(InputEventKind.SIGNAL_PRESSED, index)

    def test_control_event_rejects_index(self):
        with pytest.raises(ValueError):
            InputEvent(InputEventKind.QUIT, 0)

    def test_kind_must_be_enum(self):
        with pytest.raises(TypeError):
            InputEvent("reset")

    def test_events_are_immutable_and_comparable(self):
        event = InputEvent.signal(1)
        assert event == InputEvent.signal(1)
        with pytest.raises(AttributeError):
            event.signal_index = 3


class TestTranslateKey:

    @pytest.mark.parametrize("key,index", [('1', 0), ('2', 1), ('3', 2), ('4', 3)])
    def test_pad_keys(self, keyboard, key, index):
        assert keyboard.translate_key(key) == InputEvent.signal(index)

    @pytest.mark.parametrize("key,kind", [
        ('s', InputEventKind.STRICT_TOGGLE),
        ('S', InputEventKind.STRICT_TOGGLE),
        ('r', InputEventKind.RESET),
        ('\r', InputEventKind.ACKNOWLEDGE),
        ('\n', InputEventKind.ACKNOWLEDGE),
        ('q', InputEventKind.QUIT),
        ('\x03', InputEventKind.QUIT),
        (' ', InputEventKind.START_REQUESTED),
        ('x', InputEventKind.START_REQUESTED),
    ])
    def test_control_keys(self, keyboard, key, kind):
        assert keyboard.translate_key(key).kind is kind

    def test_empty_read(self, keyboard):
        assert keyboard.translate_key("") is None

    def test_custom_key_map(self, logger):
        source = KeyboardInputSource(key_map={'a': 0, 'b': 1}, logger=logger)
        assert source.translate_key('a') == InputEvent.signal(0)
        assert source.translate_key('1').kind is InputEventKind.START_REQUESTED

    def test_poll_before_setup_is_empty(self, keyboard):
        assert keyboard.poll_events() == []


class TestQueuedInputSource:

    def test_delivers_in_push_order_once(self):
        source = QueuedInputSource()
        source.setup()
        source.request(InputEventKind.START_REQUESTED)
        source.press(3)
        source.press(0)

        events = source.poll_events()
        assert [str(e) for e in events] == [
            "InputEvent(START_REQUESTED)", "InputEvent(signal=3)", "InputEvent(signal=0)"
        ]
        assert source.poll_events() == []

    def test_cleanup_drops_pending(self):
        source = QueuedInputSource()
        source.setup()
        assert source.is_setup
        source.press(1)
        source.cleanup()
        assert not source.is_setup
        assert source.poll_events() == []
