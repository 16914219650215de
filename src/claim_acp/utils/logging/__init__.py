"""Logging utilities.

- iso_formatter: ISO 8601 timestamp formatting for JSONL logs
- logger_setup: Factory for JSONL file loggers
- logging_helpers: Audit event serialization

Import directly from submodules:
    from claim_acp.utils.logging.logger_setup import setup_jsonl_logger
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
