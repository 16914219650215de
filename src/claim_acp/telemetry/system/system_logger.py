"""System logger for operational events.

This module provides a singleton system logger for events that are not part
of the decision audit trail: unreachable configuration collaborators, claim
mappings that cannot be resolved, remote endpoint failures.

Logging strategy:
- Console (stderr): INFO and above, human-readable
- File (system.jsonl): WARNING and above only, JSONL

Messages are dicts with an "event" key so the file output stays structured:

    get_system_logger().warning({"event": "mapping_not_found", "claim": "email"})

The file handler is configured separately via configure_system_logger_file()
once the log_dir from config is available.
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "reset_system_logger",
]

import logging
import sys
from pathlib import Path

from claim_acp.constants import APP_NAME
from claim_acp.utils.logging.iso_formatter import ISO8601Formatter
from claim_acp.utils.logging.logger_setup import ensure_log_directory


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts 'message' or 'event' field from dict messages.
    """

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            return f"{record.levelname}: {msg}"
        return f"{record.levelname}: {record.getMessage()}"


_system_logger: logging.Logger | None = None
_file_handler: logging.FileHandler | None = None


def get_system_logger() -> logging.Logger:
    """Get the singleton system logger instance.

    Creates the logger on first call with a stderr handler only.

    Returns:
        Configured system logger.
    """
    global _system_logger

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(f"{APP_NAME}.system")
    _system_logger.setLevel(logging.DEBUG)
    _system_logger.propagate = False

    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.INFO)
    stderr_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(stderr_handler)

    return _system_logger


def configure_system_logger_file(log_path: Path, log_level: int = logging.WARNING) -> None:
    """Attach (or replace) the JSONL file handler of the system logger.

    Args:
        log_path: Path to the system log file.
        log_level: Minimum level written to the file (default: WARNING).
    """
    global _file_handler

    logger = get_system_logger()
    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    try:
        ensure_log_directory(log_path)
    except OSError:
        return  # stderr still works without the file

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(log_level)
    _file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(_file_handler)


def reset_system_logger() -> None:
    """Close all handlers and forget the singleton (used by tests and the CLI)."""
    global _system_logger, _file_handler

    if _system_logger is not None:
        for handler in _system_logger.handlers:
            handler.close()
        _system_logger.handlers.clear()
    _system_logger = None
    _file_handler = None
