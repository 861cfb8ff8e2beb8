"""Configuration management for Taskboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKBOARD_HOME = Path(os.environ.get("TASKBOARD_HOME", Path.home() / "taskboard"))
CONFIG_FILE = TASKBOARD_HOME / "config" / "taskboard.conf"

DEFAULT_ENDPOINT = "https://api.quicksell.co/v1/internal/frontend-assignment/"


@dataclass
class Config:
    """Taskboard configuration."""

    endpoint: str = DEFAULT_ENDPOINT
    group_by: str = "status"
    sort_by: str = "priority"
    timeout: float = 10.0


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskboard.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "endpoint":
                config.endpoint = value
            case "group_by":
                config.group_by = value.lower()
            case "sort_by":
                config.sort_by = value.lower()
            case "timeout":
                try:
                    config.timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid TIMEOUT {value!r}, using {config.timeout}")

    return config
