# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, seeds the welcome tasks on first run,
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, seed_samples
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import PersistenceError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/taskpad")
    setup_logging(log_dir=log_dir, file_level=file_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "taskpad"))

    try:
        state = create_initial_state(settings=settings)
    except PersistenceError as e:
        logger.exception("Storage is unavailable.")
        print(f"Storage is unavailable: {e}", file=sys.stderr)
        return 1

    seed_samples(state)

    try:
        run_console_loop(state)
    finally:
        state.edit_session.close()
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
