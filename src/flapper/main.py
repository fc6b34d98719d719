"""
Main entry point for flapper.

Loads settings, validates them and opens the game window.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from flapper.config.settings import GameSettings, get_settings
from flapper.core.errors import FlapperError
from flapper.core.events import EventBus, EventType


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure console and optional file logging."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")

    # Per-frame animation chatter is only useful when chasing tween bugs
    logging.getLogger("flapper.animation").setLevel(logging.INFO)


async def run_window(settings: GameSettings) -> None:
    """Build the game and run the window loop."""
    from flapper.audio.engine import get_audio_engine
    from flapper.game.lifecycle import build_game
    from flapper.simulator.window import GameWindow

    events = EventBus()
    main_state = build_game(settings, events=events)

    audio = get_audio_engine()
    if settings.sound_enabled and audio.init():
        events.subscribe(EventType.SOUND_PLAY, audio.handle_sound_event)
        events.subscribe(EventType.SCORE_CHANGED, lambda event: audio.play("score"))

    window = GameWindow(main_state, settings, events)
    try:
        await window.run()
    finally:
        audio.cleanup()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("flapper starting...")

    try:
        asyncio.run(run_window(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except FlapperError as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("flapper stopped")


if __name__ == "__main__":
    main()
