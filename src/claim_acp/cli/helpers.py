"""Shared helpers for CLI commands: config loading and logging setup."""

from __future__ import annotations

__all__ = [
    "config_option",
    "configure_logging",
    "get_default_config_path",
    "load_config_or_exit",
]

import logging
import sys
from pathlib import Path
from typing import Callable, TypeVar

import click

from claim_acp.config import AppConfig
from claim_acp.exceptions import ConfigurationError
from claim_acp.telemetry.audit.decision_logger import DecisionLogger, create_decision_logger
from claim_acp.telemetry.system.system_logger import configure_system_logger_file, get_system_logger
from claim_acp.utils.file_helpers import get_app_dir

from .styling import style_error

F = TypeVar("F", bound=Callable[..., object])

# Exit code for configuration and evaluation errors (0/1 are allow/deny)
EXIT_ERROR = 2


def get_default_config_path() -> Path:
    """Config file location in the OS-appropriate app directory."""
    return get_app_dir() / "config.json"


def config_option(func: F) -> F:
    """Add the shared --config option to a command."""
    return click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        envvar="CLAIM_ACP_CONFIG",
        default=None,
        help="Config file (default: OS app dir, or $CLAIM_ACP_CONFIG)",
    )(func)


def load_config_or_exit(config_path: Path | None, exit_code: int = EXIT_ERROR) -> AppConfig:
    """Load the config file, printing a styled error and exiting on failure."""
    path = config_path or get_default_config_path()
    try:
        return AppConfig.load_from_file(path)
    except ConfigurationError as e:
        click.echo(style_error(f"Error: {e}"), err=True)
        sys.exit(exit_code)


def configure_logging(config: AppConfig) -> DecisionLogger | None:
    """Attach file handlers from the logging config.

    Returns:
        DecisionLogger writing decisions.jsonl, or None when log_dir is unset.
    """
    system_log_path = config.logging.system_log_path
    decisions_log_path = config.logging.decisions_log_path
    if system_log_path is None or decisions_log_path is None:
        return None

    level = logging.DEBUG if config.logging.log_level == "DEBUG" else logging.WARNING
    configure_system_logger_file(system_log_path, log_level=level)
    try:
        decision_logger = create_decision_logger(decisions_log_path)
    except OSError as e:
        click.echo(style_error(f"Error: Cannot open decision log: {e}"), err=True)
        sys.exit(EXIT_ERROR)
    return DecisionLogger(decision_logger, get_system_logger())
