# logger_utils.py - logging setup and timing helpers

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Directory where log files go when file logging is enabled
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "predictive_text.log")

FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Route the package's loggers to the console (via Rich) and optionally to
    a plain text file. Safe to call more than once; earlier handlers are replaced.
    """
    root = logging.getLogger("predictive_text")
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    root.setLevel(logging.DEBUG if log_file else level)
    console_handler = RichHandler(console=console, show_path=False, markup=False)
    console_handler.setLevel(level)
    root.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        root.addHandler(file_handler)


def time_block(label: str, level: int = logging.INFO) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("training"):
            engine.train_from_text(text)
    Logs how long the block took; the timer's `elapsed` is readable afterwards.
    """
    return _Timer(label, level)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, level: int) -> None:
        self.label = label
        self.level = level
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        logger.log(self.level, "%s done in %.3fs", self.label, self.elapsed)
