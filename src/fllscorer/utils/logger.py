"""Logging configuration for the scorer command line."""

import logging
import sys
from datetime import datetime
from pathlib import Path


def setup_logger(
    verbose: bool = False, save_to_file: bool = False, log_dir: str = "data/logs"
) -> logging.Logger:
    """
    Route scorer logs to stderr, and optionally to a timestamped file.

    stdout is left to the score itself.

    Args:
        verbose: Show DEBUG records (each mission's points) instead of warnings only
        save_to_file: Also write every record to ``<log_dir>/scorer_<timestamp>.log``
        log_dir: Directory for the log file, created if missing

    Returns:
        Configured root logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handlers = [logging.StreamHandler(sys.stderr)]
    handlers[0].setLevel(level)
    handlers[0].setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    if save_to_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_file = path / f"scorer_{datetime.now():%Y%m%d_%H%M%S}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if save_to_file else level)
    for handler in handlers:
        root.addHandler(handler)
    return root
