"""
Main game manager - frame loop around the game controller
"""

import time
from typing import TYPE_CHECKING

import psutil

from input_system import InputEventKind
from utils import OnceInMs

if TYPE_CHECKING:
    from input_system import IInputSource
    from memory_game.game_controller import GameController
    from memory_game.interfaces import IAudioPlayer, IPresenter
    from utils import ClassLogger


class GameManager:
    """
    Runs the game at a fixed frame rate.

    Each frame:
    1. Poll the input source and dispatch events to the controller
    2. Fire due scheduled transitions (controller.tick())
    3. Let the presenter expire pad pulses (presenter.update())

    Resource usage is logged once per minute.
    """

    def __init__(self,
                 controller: 'GameController',
                 input_source: 'IInputSource',
                 presenter: 'IPresenter',
                 audio_player: 'IAudioPlayer',
                 logger: 'ClassLogger',
                 frame_duration_ms: int = 20,
                 usage_log_interval_ms: int = 60000):
        """
        Initialize the game manager.

        Args:
            controller: GameController to drive
            input_source: Input source polled every frame (already set up)
            presenter: Presenter updated every frame
            audio_player: Audio player, cleaned up on stop()
            logger: Logger for debugging and monitoring
            frame_duration_ms: Target frame duration in milliseconds
            usage_log_interval_ms: Interval for memory/CPU usage logging
        """
        self.controller = controller
        self.input_source = input_source
        self.presenter = presenter
        self.audio_player = audio_player
        self.logger = logger
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.running = True
        self.frame_count = 0

        self._usage_monitor = OnceInMs(usage_log_interval_ms)
        self._process = psutil.Process()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration")

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Returns when a QUIT event arrives or on Ctrl+C.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.monotonic()

                self.update()

                # Frame duration limiting
                sleep_time = self.target_frame_duration - (time.monotonic() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """One frame: input, scheduled transitions, presenter."""
        if self._usage_monitor.should_execute():
            self._log_resource_usage()

        for event in self.input_source.poll_events():
            if event.kind is InputEventKind.QUIT:
                self.logger.info("Quit requested")
                self.running = False
                return
            self.controller.handle_event(event)

        self.controller.tick()
        self.presenter.update()
        self.frame_count += 1

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        if not self.running and self.controller.destroyed:
            return
        self.running = False

        self.controller.destroy()
        self.input_source.cleanup()
        self.audio_player.cleanup()

        self.logger.info(f"Game stopped after {self.frame_count} frames")
        self.logger.flush()

    def _log_resource_usage(self) -> None:
        """Log current memory and CPU usage of the process"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_mem.percent:.1f}% used | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
