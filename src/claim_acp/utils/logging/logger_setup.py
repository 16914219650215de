"""Logger setup utilities for creating JSONL loggers."""

from __future__ import annotations

__all__ = [
    "ensure_log_directory",
    "setup_jsonl_logger",
]

import logging
import sys
from pathlib import Path

from claim_acp.utils.logging.iso_formatter import ISO8601Formatter


def ensure_log_directory(log_file: Path) -> None:
    """Create the parent directory of a log file with owner-only permissions.

    Args:
        log_file: Path to the log file (parent directory will be created).

    Raises:
        PermissionError: If unable to create log directory due to permissions.
        OSError: If directory creation fails for other reasons.
    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        if sys.platform != "win32":
            try:
                log_file.parent.chmod(0o700)
            except OSError:
                pass  # Not all filesystems support chmod
    except PermissionError as e:
        raise PermissionError(f"Cannot create log directory {log_file.parent}: {e}") from e
    except OSError as e:
        raise OSError(f"Failed to create log directory {log_file.parent}: {e}") from e


def setup_jsonl_logger(
    logger_name: str,
    log_file: Path,
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Set up a logger that writes JSONL with ISO 8601 timestamps.

    Calling this again for the same logger name replaces its handlers,
    so reconfiguring never duplicates output.

    Args:
        logger_name: Name for the logger (e.g., "claim-acp.audit.decisions").
        log_file: Path to the log file.
        log_level: Logging level (default: INFO).

    Returns:
        Configured logger instance.

    Raises:
        PermissionError: If unable to create log directory due to permissions.
        OSError: If directory creation fails for other reasons.
    """
    ensure_log_directory(log_file)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(file_handler)

    return logger
