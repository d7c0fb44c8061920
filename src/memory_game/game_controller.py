"""
Game controller - owns the session, the state machine and delayed transitions
"""

import logging
from typing import Callable, Optional, TYPE_CHECKING

from input_system import InputEvent, InputEventKind
from utils import CallScheduler, ScheduledCall

from .config import GameConfig
from .interfaces import BestScoreStoreError, IAudioPlayer, IBestScoreStore, IPresenter
from .sequence_engine import RandomSignalSource, SequenceEngine, SignalSource
from .session import Phase, Session
from .states import GameState, IdleState

if TYPE_CHECKING:
    from utils import ClassLogger

# Transitions inside one round are frequent, log them at DEBUG
_INPUT_LOOP_PHASES = (Phase.AWAITING_INPUT, Phase.ROUND_RESOLVING)

# Control keys that also start a session that has not started yet
_START_ALSO_KINDS = (InputEventKind.STRICT_TOGGLE, InputEventKind.RESET, InputEventKind.ACKNOWLEDGE)


class GameController:
    """
    Main game controller for one Simon game instance.

    Responsibilities:
    - Own the Session and drive the SequenceEngine
    - Run the state machine (Idle → Playback → AwaitingInput ⇄ RoundResolving → GameOver)
    - Schedule delayed transitions and invalidate them on every state change
    - Keep the best score in sync with the best score store

    Lifecycle: construct (idle), start(), reset(), destroy(). Call tick()
    every frame so scheduled transitions fire.
    """

    def __init__(self,
                 presenter: IPresenter,
                 audio_player: IAudioPlayer,
                 best_score_store: IBestScoreStore,
                 logger: 'ClassLogger',
                 config: Optional[GameConfig] = None,
                 signal_source: Optional[SignalSource] = None,
                 scheduler: Optional[CallScheduler] = None):
        """
        Initialize the game controller in the idle state.

        Args:
            presenter: Visual output collaborator
            audio_player: Tone output collaborator
            best_score_store: Persistent best score, read once here
            logger: ClassLogger for the controller
            config: Game configuration, defaults to GameConfig()
            signal_source: Callable producing new signals, defaults to uniform random
            scheduler: Delayed-call scheduler, defaults to one on the monotonic clock
        """
        self.config = config or GameConfig()
        self.presenter = presenter
        self.audio_player = audio_player
        self.best_score_store = best_score_store
        self.logger = logger
        self.destroyed = False

        self.scheduler = scheduler or CallScheduler(
            logger=logger.create_class_logger("CallScheduler", logging.INFO)
        )
        self.engine = SequenceEngine(
            signal_count=self.config.signal_count,
            signal_source=signal_source or RandomSignalSource(self.config.signal_count, self.config.seed)
        )
        self.session = Session(
            speed_ms=self.config.timing.base_speed_ms,
            best_score=self._load_best_score()
        )
        self.presenter.on_best_score_changed(self.session.best_score)

        # State management - create initial IdleState
        self.current_state: GameState = IdleState(self)
        self.session.phase = self.current_state.phase
        self.current_state.on_enter()

        self.logger.info(
            f"GameController initialized: {self.config.signal_count} signals, "
            f"best score {self.session.best_score}"
        )

    # ============================================================================
    # PUBLIC API
    # ============================================================================

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def start(self) -> None:
        """Start trigger. No-op once the session has started."""
        if self.destroyed:
            return
        new_state = self.current_state.handle_start()
        if new_state:
            self.transition_to(new_state)

    def handle_signal(self, signal: int) -> None:
        """Signal pad pressed. Only accepted while awaiting input."""
        if self.destroyed:
            return
        new_state = self.current_state.handle_signal(signal)
        if new_state:
            self.transition_to(new_state)

    def handle_event(self, event: InputEvent) -> None:
        """
        Dispatch one input event. QUIT is left to the owner of the loop.

        Before the session has started, strict, reset and acknowledge
        events also count as the start trigger, like any other key.
        """
        if self.destroyed:
            return
        waiting_for_start = not self.session.started

        if event.kind is InputEventKind.SIGNAL_PRESSED:
            self.handle_signal(event.signal_index)
        elif event.kind is InputEventKind.START_REQUESTED:
            self.start()
        elif event.kind is InputEventKind.STRICT_TOGGLE:
            self.toggle_strict_mode()
        elif event.kind is InputEventKind.RESET:
            self.reset()
        elif event.kind is InputEventKind.ACKNOWLEDGE:
            self.acknowledge_game_over()

        if waiting_for_start and event.kind in _START_ALSO_KINDS:
            self.start()

    def toggle_strict_mode(self) -> None:
        """
        Flip the strict mode flag.

        Allowed at any time. The flag only changes the status label; a
        mistake ends the game whether it is set or not.
        """
        if self.destroyed:
            return
        self.session.strict_mode = not self.session.strict_mode
        label = "Strict Mode ON" if self.session.strict_mode else "Strict Mode OFF"
        self.presenter.on_status_changed(label)
        self.logger.info(label)

    def reset(self) -> None:
        """Return to a fresh idle session from any state, dropping pending transitions"""
        if self.destroyed:
            return
        self.logger.info("Resetting game")
        self.scheduler.cancel_all()
        self.transition_to(IdleState(self))

    def acknowledge_game_over(self) -> None:
        """Player dismissed the game over summary"""
        if self.destroyed:
            return
        self.presenter.on_game_over_dismissed()

    def tick(self) -> int:
        """
        Fire due scheduled transitions. Call once per frame.

        Returns:
            Number of scheduled callbacks executed
        """
        if self.destroyed:
            return 0
        return self.scheduler.run_due()

    def destroy(self) -> None:
        """Stop the game for good; later events and ticks are ignored"""
        if self.destroyed:
            return
        self.scheduler.cancel_all()
        self.current_state.on_exit()
        self.destroyed = True
        self.logger.info("GameController destroyed")

    # ============================================================================
    # STATE SUPPORT (used by GameState subclasses)
    # ============================================================================

    def schedule(self, delay_ms: int, callback: Callable[[], None], name: str = "") -> ScheduledCall:
        """Run callback after delay_ms, unless the state changes first"""
        return self.scheduler.call_later(delay_ms, callback, name=name)

    def transition_to(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        Pending scheduled calls belong to the state being left and are
        invalidated before the new state is entered.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()
        self.scheduler.cancel_all()

        old_phase = self.current_state.phase
        message = (
            f"State transition: {self.current_state.__class__.__name__} → {new_state.__class__.__name__}"
        )
        if old_phase in _INPUT_LOOP_PHASES and new_state.phase in _INPUT_LOOP_PHASES:
            self.logger.debug(message)
        else:
            self.logger.info(message)

        self.current_state = new_state
        self.session.phase = new_state.phase
        self.current_state.on_enter()

        follow_up = self.current_state.resolve()
        if follow_up:
            self.transition_to(follow_up)

    def update_best_score(self, score: int) -> bool:
        """
        Raise the best score if `score` beats it and persist the new value.

        Persistence failures are logged and the in-memory best score is kept.

        Returns:
            True if the best score changed
        """
        if score <= self.session.best_score:
            return False

        self.session.best_score = score
        self.presenter.on_best_score_changed(score)
        self.logger.info(f"🏆 New best score: {score}")
        try:
            self.best_score_store.save(score)
        except BestScoreStoreError as e:
            self.logger.warning(f"Could not persist best score {score}: {e}")
        return True

    def get_current_state_name(self) -> str:
        """Get the name of the current game state."""
        return self.current_state.__class__.__name__

    def _load_best_score(self) -> int:
        try:
            return self.best_score_store.load()
        except BestScoreStoreError as e:
            self.logger.warning(f"Could not load best score, starting from 0: {e}")
            return 0
