"""CLI output styling utilities.

- Cyan bold for section headers
- Green for success / allow
- Red for errors / deny
- Dim for neutral/empty state messages
"""

from __future__ import annotations

__all__ = [
    "style_dim",
    "style_error",
    "style_header",
    "style_success",
    "style_warning",
]

import click


def style_header(title: str) -> str:
    """Style a section header as "--- Title ---" in cyan bold."""
    return click.style(f"--- {title} ---", fg="cyan", bold=True)


def style_success(message: str) -> str:
    """Style a success message with checkmark."""
    return click.style(f"✓ {message}", fg="green")


def style_error(message: str) -> str:
    """Style an error message with cross mark."""
    return click.style(f"✗ {message}", fg="red")


def style_dim(message: str) -> str:
    """Style a neutral/empty state message as dim."""
    return click.style(message, dim=True)


def style_warning(message: str) -> str:
    """Style a warning message with yellow color."""
    return click.style(f"Warning: {message}", fg="yellow", bold=True)
