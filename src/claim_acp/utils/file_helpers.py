"""Shared file utilities for claim-acp.

- get_app_dir: OS-appropriate application directory
- require_file_exists: Friendly FileNotFoundError for missing files
- load_validated_json: Read a JSON file and validate it with a Pydantic model
"""

from __future__ import annotations

__all__ = [
    "get_app_dir",
    "load_validated_json",
    "require_file_exists",
]

import json
from pathlib import Path
from typing import TypeVar

import click
from pydantic import BaseModel, ValidationError

from claim_acp.constants import APP_NAME

# Type variable for Pydantic models
T = TypeVar("T", bound=BaseModel)


def get_app_dir() -> Path:
    """Get the OS-appropriate application directory.

    Uses click.get_app_dir() which returns:
    - macOS: ~/Library/Application Support/claim-acp
    - Linux: ~/.config/claim-acp (XDG compliant)
    - Windows: C:\\Users\\<user>\\AppData\\Roaming\\claim-acp
    """
    return Path(click.get_app_dir(APP_NAME))


def require_file_exists(file_path: Path, file_type: str = "file") -> None:
    """Raise FileNotFoundError with a helpful message if file doesn't exist.

    Args:
        file_path: Path to check.
        file_type: Description for error message (e.g., "configuration").

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if file_path.exists():
        return
    raise FileNotFoundError(f"{file_type.capitalize()} file not found at {file_path}.")


def load_validated_json(
    file_path: Path,
    model_class: type[T],
    file_type: str = "file",
    encoding: str | None = "utf-8",
) -> T:
    """Load JSON file and validate against Pydantic model.

    Args:
        file_path: Path to JSON file.
        model_class: Pydantic model class to validate against.
        file_type: Description for error messages (e.g., "config", "attributes").
        encoding: File encoding.

    Returns:
        Validated Pydantic model instance.

    Raises:
        ValueError: If the file cannot be read, is not JSON, or fails validation.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Could not read {file_type} file {file_path}: {e}") from e

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}" if loc else f"  - {error['msg']}")
        message = f"Invalid {file_type} file {file_path}:\n" + "\n".join(errors)
        raise ValueError(message) from e
