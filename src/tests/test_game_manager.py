"""Tests for memory_game.game_manager: the frame loop around the controller."""

from unittest.mock import MagicMock

import pytest

from input_system import InputEventKind, QueuedInputSource
from memory_game import GameManager, IPresenter, Phase


@pytest.fixture
def game(make_game):
    return make_game([2, 1])


@pytest.fixture
def input_source():
    source = QueuedInputSource()
    source.setup()
    return source


@pytest.fixture
def manager(game, input_source, logger):
    return GameManager(
        controller=game.controller,
        input_source=input_source,
        presenter=game.presenter,
        audio_player=game.audio_player,
        logger=logger,
        frame_duration_ms=1
    )


def test_update_dispatches_events_and_ticks(game, input_source, manager):
    input_source.request(InputEventKind.START_REQUESTED)
    manager.update()
    assert game.session.started

    game.clock.advance(1000)
    manager.update()
    assert game.controller.phase is Phase.PLAYBACK
    assert manager.frame_count == 2
    game.presenter.update.assert_called()


def test_full_round_through_frames(game, input_source, manager):
    input_source.request(InputEventKind.START_REQUESTED)
    manager.update()
    while game.controller.phase is not Phase.AWAITING_INPUT:
        game.clock.advance(10)
        manager.update()

    input_source.press(2)
    manager.update()
    assert game.session.score == 10


def test_quit_stops_loop_and_skips_rest_of_frame(game, input_source, manager):
    input_source.request(InputEventKind.QUIT)
    input_source.request(InputEventKind.START_REQUESTED)
    manager.update()
    assert not manager.running
    assert not game.session.started


def test_run_game_loop_returns_on_quit(game, input_source, manager):
    input_source.request(InputEventKind.QUIT)
    manager.run_game_loop()

    assert game.controller.destroyed
    assert not input_source.is_setup


def test_stop_is_idempotent(game, manager):
    manager.stop()
    manager.stop()
    assert game.controller.destroyed


def test_loop_error_propagates_after_cleanup(game, input_source, logger):
    failing = MagicMock(spec=IPresenter)
    failing.update.side_effect = RuntimeError("render failed")
    manager = GameManager(game.controller, input_source, failing, game.audio_player, logger, frame_duration_ms=1)

    with pytest.raises(RuntimeError, match="render failed"):
        manager.run_game_loop()
    assert game.controller.destroyed
