#!/usr/bin/env python3
"""
Simon Memory Game

Terminal edition of the classic sequence-memory game: watch and listen to
the growing sequence, then repeat it on keys 1-4.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from audio_system import MockTonePlayer, TonePlayer
from display_system import ConsolePresenter
from input_system import KeyboardInputSource
from memory_game import GameConfig, GameController, GameManager
from storage import JsonBestScoreStore
from utils import HybridLogger

# Global logger reference for signal handlers
_global_logger = None


def emergency_flush_and_log(sig=None, frame=None):
    """Flush logs before the process is terminated"""
    if _global_logger:
        _global_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
    sys.exit(1)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simon memory game for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Keys: 1-4 pads, s strict mode, r reset, Enter dismiss, q quit, any other key starts"
    )
    parser.add_argument(
        '--mock-audio',
        action='store_true',
        help='Run without an audio device'
    )
    parser.add_argument(
        '--best-score-file',
        help='Path to the best score JSON file (default: data/simon_best_score.json)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for reproducible sequences'
    )
    parser.add_argument(
        '--log-dir',
        default='logs',
        help='Directory for log files (default: logs)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log at DEBUG level'
    )
    return parser.parse_args(argv)


def create_simon_config(args: argparse.Namespace) -> GameConfig:
    """Create the game configuration from defaults and command line overrides"""
    config = GameConfig(log_dir=args.log_dir, seed=args.seed)
    if args.best_score_file:
        config.best_score_path = args.best_score_file
    config.audio.use_mock = args.mock_audio
    return config


def create_game_system(config: GameConfig, simon_logger, level: int) -> GameManager:
    """
    Create and wire the complete game system using provided config.

    Args:
        config: GameConfig instance with all system configuration
        simon_logger: ClassLogger instance for logging initialization steps
        level: Log level for component loggers

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    controller_logger = simon_logger.create_class_logger("GameController", level)
    manager_logger = simon_logger.create_class_logger("GameManager", level)
    input_logger = simon_logger.create_class_logger("KeyboardInput", level)
    audio_logger = simon_logger.create_class_logger("TonePlayer", level)
    store_logger = simon_logger.create_class_logger("BestScoreStore", level)
    presenter_logger = simon_logger.create_class_logger("ConsolePresenter", level)

    if config.audio.use_mock:
        simon_logger.info("🔇 Using MockTonePlayer (audio disabled)")
        audio_player = MockTonePlayer(logger=audio_logger)
    else:
        audio_player = TonePlayer(config.audio, logger=audio_logger)

    presenter = ConsolePresenter(
        logger=presenter_logger,
        signal_count=config.signal_count,
        flash_ms=config.timing.flash_ms
    )
    best_score_store = JsonBestScoreStore(config.best_score_path, logger=store_logger)
    input_source = KeyboardInputSource(config.key_map, logger=input_logger)

    # Until GameManager owns them, release the mixer and the terminal here
    try:
        input_source.setup()

        controller = GameController(
            presenter=presenter,
            audio_player=audio_player,
            best_score_store=best_score_store,
            logger=controller_logger,
            config=config
        )

        return GameManager(
            controller=controller,
            input_source=input_source,
            presenter=presenter,
            audio_player=audio_player,
            logger=manager_logger,
            frame_duration_ms=config.frame_duration_ms
        )
    except BaseException:
        input_source.cleanup()
        audio_player.cleanup()
        raise


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - sets up and runs the game.
    """
    args = parse_args(argv)
    level = logging.DEBUG if args.debug else logging.INFO

    main_logger = HybridLogger("simon", log_dir=args.log_dir)
    simon_logger = main_logger.get_class_logger("Simon", level)

    global _global_logger
    _global_logger = simon_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_log)

    simon_logger.info("🟢🔴🟡🔵 SIMON MEMORY GAME")

    config = create_simon_config(args)
    simon_logger.info(f"Best score file: {config.best_score_path}")
    simon_logger.info(f"Game settings: {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")

    try:
        game_manager = create_game_system(config, simon_logger, level)
        simon_logger.info("🚀 Press any key to start")
        game_manager.run_game_loop()
    except RuntimeError as e:
        simon_logger.error(f"Simon could not start: {e}")
        return 1
    except Exception as e:
        simon_logger.error(f"Simon system error: {e}", exception=e)
        raise
    finally:
        simon_logger.info("✅ Simon shut down")
        main_logger.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())
