"""Runtime configuration for the suggestion service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_FILE_PURPOSE = "user_data"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_ALLOWED_MEDIA_TYPES: Tuple[str, ...] = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)
DEFAULT_CONFIG_PATH = "config/config.yaml"


@dataclass
class SuggesterConfig:
    """Provider credentials and upload policy."""

    api_key: str = ""
    api_base: str = ""
    model: str = DEFAULT_MODEL
    file_purpose: str = DEFAULT_FILE_PURPOSE
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    allowed_media_types: Tuple[str, ...] = field(default=DEFAULT_ALLOWED_MEDIA_TYPES)


def load_config(config_path: Optional[Union[str, Path]] = None) -> SuggesterConfig:
    """Load configuration from an optional YAML file, then apply env overrides.

    A missing file is an error only when a path was given explicitly.
    """
    data: Dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data = _read_yaml(path)
    elif Path(DEFAULT_CONFIG_PATH).exists():
        data = _read_yaml(Path(DEFAULT_CONFIG_PATH))

    config = SuggesterConfig(
        api_key=_resolve_placeholder(str(data.get("api_key", "") or "")),
        api_base=_resolve_placeholder(str(data.get("api_base", "") or "")),
        model=str(data.get("model", DEFAULT_MODEL) or DEFAULT_MODEL),
        file_purpose=str(data.get("file_purpose", DEFAULT_FILE_PURPOSE) or DEFAULT_FILE_PURPOSE),
        max_upload_bytes=_parse_size(data.get("max_upload_bytes", DEFAULT_MAX_UPLOAD_BYTES)),
        allowed_media_types=_parse_media_types(data.get("allowed_media_types")) or DEFAULT_ALLOWED_MEDIA_TYPES,
    )
    return _apply_env(config)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _apply_env(config: SuggesterConfig) -> SuggesterConfig:
    env_key = os.getenv("OPENAI_API_KEY", "").strip()
    if env_key:
        config.api_key = env_key
    config.api_base = os.getenv("CV_SUGGESTER_API_BASE", config.api_base).strip()
    config.model = os.getenv("CV_SUGGESTER_MODEL", config.model).strip() or DEFAULT_MODEL
    config.file_purpose = os.getenv("CV_SUGGESTER_FILE_PURPOSE", config.file_purpose).strip() or DEFAULT_FILE_PURPOSE
    max_bytes = os.getenv("CV_SUGGESTER_MAX_UPLOAD_BYTES", "").strip()
    if max_bytes:
        config.max_upload_bytes = _parse_size(max_bytes)
    media_types = _parse_media_types(os.getenv("CV_SUGGESTER_ALLOWED_MEDIA_TYPES", ""))
    if media_types:
        config.allowed_media_types = media_types
    return config


def _resolve_placeholder(value: str) -> str:
    """Resolve a ``${VAR_NAME}`` placeholder from the environment."""
    if value.startswith("${") and value.endswith("}"):
        return os.environ.get(value[2:-1], "")
    return value


def _parse_size(value: Any) -> Any:
    """Return an int byte count, or the raw value for validate_config to report."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def _parse_media_types(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    items = value.split(",") if isinstance(value, str) else list(value)
    return tuple(str(item).strip().lower() for item in items if str(item).strip())
