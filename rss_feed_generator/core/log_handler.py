"""
Logging setup for command line runs.

Log records go to stderr so that stdout only carries the outcome message,
and optionally to a UTF-8 log file.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for the current process.

    Args:
        level: Name of the minimum level to emit, e.g. ``DEBUG``.
        log_file: Optional path of a file receiving the same records.

    Raises:
        ValueError: If ``level`` is not a known logging level.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
