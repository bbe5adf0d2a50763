"""Structured logging for the speechcards command line.

Only the CLI, the config loader and the outline store log. The outline,
editing and card modules never log, so using them as a library prints
nothing.
"""

import atexit
import os
from pathlib import Path
from typing import Any, Optional, TextIO

import structlog


DEFAULT_LOG_FILE = Path.home() / ".cache" / "speechcards" / "logs" / "speechcards.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# One append handle per process, shared by every configure_logging() call.
_log_stream: Optional[TextIO] = None


def configure_logging(log_file: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """
    Configure structlog for JSON logging to a file.

    The file is opened once and reused by later calls; asking for a different
    file closes the previous one.

    Args:
        log_file: Log destination (default: ~/.cache/speechcards/logs/speechcards.log)
        level: Minimum level; falls back to SPEECHCARDS_LOG_LEVEL, then "INFO"

    Returns:
        Path of the log file in use

    Log levels:
    - INFO: CLI command lifecycle, outlines loaded and saved
    - WARNING: Ignored configuration values
    - ERROR: Unreadable files, invalid configuration

    Example:
        SPEECHCARDS_LOG_LEVEL=DEBUG speechcards cards talk.md

        # View logs with jq for readability:
        tail -f ~/.cache/speechcards/logs/speechcards.log | jq .
    """
    global _log_stream

    log_file = log_file or DEFAULT_LOG_FILE
    log_level = (level or os.environ.get("SPEECHCARDS_LOG_LEVEL", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    if _log_stream is None or Path(_log_stream.name) != log_file:
        close_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _log_stream = log_file.open("a", encoding="utf-8", buffering=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_log_stream),
        # Resolved per call so a switch to another file reaches every module logger
        cache_logger_on_first_use=False,
    )
    return log_file


def close_log_file() -> None:
    """Close the log file opened by configure_logging(), if any."""
    global _log_stream

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None


atexit.register(close_log_file)


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("outline_saved", path="talk.json", roots=1)
    """
    return structlog.get_logger(name)
