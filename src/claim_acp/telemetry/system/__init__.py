"""System logger for operational events."""

from claim_acp.telemetry.system.system_logger import (
    ConsoleFormatter,
    configure_system_logger_file,
    get_system_logger,
    reset_system_logger,
)

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "reset_system_logger",
]
