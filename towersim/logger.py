"""Logging setup and per-tick JSON logging."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Dict
from datetime import datetime


def configure_logging(level: str = "INFO", log_file: str = "towersim.log") -> None:
    """
    Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # File handler
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10 * 1024 * 1024, backupCount=5
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # Root logger, replacing handlers from an earlier call
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_towersim", False):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in (console_handler, file_handler):
        handler._towersim = True
        root_logger.addHandler(handler)


class JSONLogger:
    """JSON-lines logger with one entry per simulated tick."""

    def __init__(self, log_file: str = "towersim_ticks.jsonl"):
        """
        Initialize JSON logger.

        Args:
            log_file: Path to JSON log file
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = open(self.log_file, "a")

    def log_tick(self, tick_entry: Dict) -> None:
        """
        Append one tick entry, stamped with the wall-clock time it was written.

        Args:
            tick_entry: Tick data (tick number, queue contents, summary)
        """
        log_entry = {"timestamp": datetime.now().isoformat(), **tick_entry}

        json.dump(log_entry, self.file_handle)
        self.file_handle.write("\n")
        self.file_handle.flush()

    def close(self) -> None:
        """Close log file."""
        self.file_handle.close()
