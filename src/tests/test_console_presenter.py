"""Tests for display_system.console_presenter: terminal output of game events."""

import io

import pytest

from display_system import ConsolePresenter


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def presenter(logger, stream, fake_clock):
    return ConsolePresenter(logger, stream=stream, use_colors=False, clock=fake_clock)


def test_status_line(presenter, stream):
    presenter.on_status_changed("Your turn!")
    assert presenter.status == "Your turn!"
    assert stream.getvalue() == "▶ Your turn!\r\n"


def test_scoreboard(presenter, stream):
    presenter.on_best_score_changed(90)
    presenter.on_score_changed(3, 60)
    assert stream.getvalue().splitlines()[-1] == "Level: 3  Score: 60  Best: 90"


def test_pad_pulse_expires_after_flash(presenter, fake_clock):
    presenter.on_signal_activated(2)
    assert presenter.active_signal == 2

    fake_clock.now += 0.2
    presenter.update()
    assert presenter.active_signal == 2

    fake_clock.now += 0.2
    presenter.update()
    assert presenter.active_signal is None


def test_render_pads_plain(presenter):
    assert presenter.render_pads() == "[ 1 ]  [ 2 ]  [ 3 ]  [ 4 ]"


def test_render_pads_highlights_active(logger, stream, fake_clock):
    colored = ConsolePresenter(logger, stream=stream, clock=fake_clock)
    colored.on_signal_activated(0)
    first_pad = colored.render_pads().split("  ")[0]
    assert first_pad.startswith("\033[1;7m")


def test_game_over_summary_and_dismiss(presenter, stream):
    presenter.on_game_over(4, 100)
    output = stream.getvalue()
    assert "GAME OVER" in output
    assert "You reached level 4 with 100 points!" in output
    assert presenter.game_over_visible

    presenter.on_game_over_dismissed()
    assert not presenter.game_over_visible


def test_reset_clears_pulse(presenter):
    presenter.on_signal_activated(1)
    presenter.on_reset()
    assert presenter.active_signal is None
