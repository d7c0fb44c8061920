"""
Game state base class and concrete implementations
"""

from abc import ABC
from typing import Optional, TYPE_CHECKING

from .sequence_engine import CheckOutcome, CheckResult
from .session import Phase

if TYPE_CHECKING:
    from memory_game.game_controller import GameController


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents one phase of a round with its own:
    - Entry actions (publish status, schedule delayed transitions)
    - Input handling (signal presses, start requests)
    - Immediate follow-up transitions (resolve)

    Input handlers and resolve() return the next GameState, or None to stay.
    Everything not overridden is ignored, which is what keeps presses out
    of playback.
    """

    phase: Phase = Phase.IDLE

    def __init__(self, controller: 'GameController'):
        self.controller: 'GameController' = controller

    def on_enter(self) -> None:
        """Called when entering this state"""
        self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state"""
        self.custom_on_exit()

    def custom_on_enter(self) -> None:
        """Custom enter logic (override in subclasses)"""
        pass

    def custom_on_exit(self) -> None:
        """Custom exit logic (override in subclasses)"""
        pass

    def resolve(self) -> Optional['GameState']:
        """
        Immediate follow-up evaluated right after on_enter().

        Returns:
            Next GameState to enter at once, None to stay
        """
        return None

    def handle_signal(self, signal: int) -> Optional['GameState']:
        """Signal pad pressed (ignored unless overridden)"""
        self.controller.logger.debug(f"Ignoring signal {signal} during {self.phase.value}")
        return None

    def handle_start(self) -> Optional['GameState']:
        """Start requested (ignored unless overridden)"""
        self.controller.logger.debug(f"Ignoring start request during {self.phase.value}")
        return None


class IdleState(GameState):
    """
    Idle - fresh session waiting for the start trigger.

    Transitions:
    - Start (or any pad press before starting) → PlaybackState after the start delay
    """

    phase = Phase.IDLE

    def custom_on_enter(self) -> None:
        """Clear the session and show the start prompt"""
        controller = self.controller
        controller.session.clear(controller.config.timing.base_speed_ms)
        controller.engine.reset()

        controller.presenter.on_reset()
        controller.presenter.on_score_changed(0, 0)
        controller.presenter.on_status_changed("Press any key to start")

    def handle_start(self) -> Optional[GameState]:
        controller = self.controller
        if controller.session.started:
            controller.logger.debug("Start ignored - session already started")
            return None

        controller.session.started = True
        controller.presenter.on_status_changed("Game Started!")
        controller.logger.info("🎮 Game started")

        controller.schedule(
            controller.config.timing.start_delay_ms,
            lambda: controller.transition_to(PlaybackState(controller)),
            name="first round"
        )
        return None

    def handle_signal(self, signal: int) -> Optional[GameState]:
        # Any input starts a fresh session
        if not self.controller.session.started:
            return self.handle_start()
        return super().handle_signal(signal)


class PlaybackState(GameState):
    """
    Playback - grow the sequence by one and replay it.

    The first signal plays after a fixed lead-in, each following one after
    the level's speed. Input is ignored until playback has finished.

    Transitions:
    - Last signal played (plus one speed interval) → AwaitingInputState
    """

    phase = Phase.PLAYBACK

    def __init__(self, controller: 'GameController'):
        super().__init__(controller)
        self._next_index = 0

    def custom_on_enter(self) -> None:
        controller = self.controller
        session = controller.session

        session.level += 1
        signal = controller.engine.append_random_signal()
        session.speed_ms = controller.config.timing.speed_for_level(session.level)
        session.user_input.clear()

        controller.presenter.on_status_changed(f"Level {session.level}")
        controller.presenter.on_score_changed(session.level, session.score)
        controller.logger.info(f"Level {session.level}: added signal {signal}, speed {session.speed_ms}ms")
        controller.logger.debug(f"Sequence: {list(controller.engine.sequence)}")

        self._next_index = 0
        controller.schedule(controller.config.timing.lead_in_ms, self._play_next, name="playback lead-in")

    def _play_next(self) -> None:
        controller = self.controller
        sequence = controller.engine.sequence

        if self._next_index < len(sequence):
            signal = sequence[self._next_index]
            controller.presenter.on_signal_activated(signal)
            controller.audio_player.play_tone(signal)
            self._next_index += 1
            controller.schedule(controller.session.speed_ms, self._play_next, name=f"playback step {self._next_index}")
        else:
            controller.transition_to(AwaitingInputState(controller))


class AwaitingInputState(GameState):
    """
    Awaiting input - the only state that accepts pad presses.

    Transitions:
    - Pad pressed → RoundResolvingState
    """

    phase = Phase.AWAITING_INPUT

    def __init__(self, controller: 'GameController', announce: bool = True):
        super().__init__(controller)
        self.announce = announce

    def custom_on_enter(self) -> None:
        if self.announce:
            self.controller.presenter.on_status_changed("Your turn!")

    def handle_signal(self, signal: int) -> Optional[GameState]:
        controller = self.controller
        if not (0 <= signal < controller.engine.signal_count):
            controller.logger.warning(f"Ignoring unknown signal {signal}")
            return None

        controller.presenter.on_signal_activated(signal)
        controller.audio_player.play_tone(signal)
        controller.session.user_input.append(signal)
        controller.logger.debug(f"Player input: {controller.session.user_input}")
        return RoundResolvingState(controller)


class RoundResolvingState(GameState):
    """
    Round resolving - judge the newest press.

    Strict mode is deliberately not consulted: a mistake ends the game
    either way.

    Transitions:
    - Correct prefix → AwaitingInputState
    - Complete match → PlaybackState after the next-round delay (score awarded)
    - Mismatch → GameOverState
    """

    phase = Phase.ROUND_RESOLVING

    def __init__(self, controller: 'GameController'):
        super().__init__(controller)
        self.result: Optional[CheckResult] = None

    def custom_on_enter(self) -> None:
        self.result = self.controller.engine.check_prefix(self.controller.session.user_input)

    def resolve(self) -> Optional[GameState]:
        controller = self.controller
        session = controller.session

        if self.result.outcome is CheckOutcome.INCORRECT:
            return GameOverState(controller, self.result)

        if self.result.outcome is CheckOutcome.CORRECT:
            return AwaitingInputState(controller, announce=False)

        award = session.level * controller.config.points_per_level
        session.score += award
        controller.presenter.on_score_changed(session.level, session.score)
        controller.logger.info(f"✅ Level {session.level} complete: +{award} points, score {session.score}")

        controller.schedule(
            controller.config.timing.next_round_delay_ms,
            lambda: controller.transition_to(PlaybackState(controller)),
            name="next round"
        )
        return None


class GameOverState(GameState):
    """
    Game over - report the result and reset automatically.

    Transitions:
    - After the reset delay → IdleState (through controller.reset())
    """

    phase = Phase.GAME_OVER

    def __init__(self, controller: 'GameController', result: CheckResult):
        super().__init__(controller)
        self.result = result

    def custom_on_enter(self) -> None:
        controller = self.controller
        session = controller.session

        controller.audio_player.play_error_tone()
        controller.logger.info(
            f"💥 Game Over! Level {session.level}, score {session.score} "
            f"(wrong signal at position {self.result.mismatch_index})"
        )

        controller.update_best_score(session.score)
        controller.presenter.on_status_changed("Game Over!")
        controller.presenter.on_game_over(session.level, session.score)

        controller.schedule(controller.config.timing.game_over_reset_ms, controller.reset, name="auto reset")
