"""Configuration validator for startup checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .config import SuggesterConfig


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_config(config: SuggesterConfig) -> List[ConfigError]:
    """Validate a loaded configuration and return a list of issues.

    Args:
        config: Configuration after YAML and env resolution

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- API Key ---
    if not config.api_key:
        errors.append(ConfigError(
            field="api_key",
            message="OPENAI_API_KEY not set. Set the env var or add api_key to config/config.yaml",
            severity=Severity.ERROR,
        ))

    # --- Model ---
    if not config.model or not isinstance(config.model, str):
        errors.append(ConfigError(
            field="model",
            message="model must be a non-empty string",
            severity=Severity.ERROR,
        ))

    # --- Upload limit ---
    if not isinstance(config.max_upload_bytes, int) or config.max_upload_bytes <= 0:
        errors.append(ConfigError(
            field="max_upload_bytes",
            message=f"max_upload_bytes must be a positive integer, got {config.max_upload_bytes}",
            severity=Severity.ERROR,
        ))

    # --- Media types ---
    if not config.allowed_media_types:
        errors.append(ConfigError(
            field="allowed_media_types",
            message="allowed_media_types is empty; every typed upload will be rejected",
            severity=Severity.WARNING,
        ))

    # --- File purpose ---
    if config.file_purpose != "user_data":
        errors.append(ConfigError(
            field="file_purpose",
            message=f"file_purpose {config.file_purpose!r} may not be accepted as a completion input",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
