"""Configuration settings."""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.command-catalog/config.yaml")

ENV_SOURCE_DIR = "COMMAND_CATALOG_SOURCE_DIR"
ENV_OUTPUT = "COMMAND_CATALOG_OUTPUT"
ENV_LOG_LEVEL = "COMMAND_CATALOG_LOG_LEVEL"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"


@dataclass
class Config:
    """Main configuration."""

    source_dir: str = "commands"
    output_path: str = "commands.json"
    sort_files: bool = True  # False keeps raw directory order
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    path = Path(path).expanduser()

    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Config()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data, base_dir=path.parent)


def _resolve(value: str, base_dir: Path) -> str:
    resolved = Path(value).expanduser()
    if not resolved.is_absolute():
        resolved = base_dir / resolved
    return str(resolved)


def _parse_config(data: dict[str, Any], base_dir: Path) -> Config:
    """Parse config dictionary into Config object."""
    config = Config()

    if "source_dir" in data:
        config.source_dir = _resolve(str(data["source_dir"]), base_dir)
    if "output_path" in data:
        config.output_path = _resolve(str(data["output_path"]), base_dir)
    if "sort_files" in data:
        config.sort_files = bool(data["sort_files"])

    if "logging" in data:
        config.logging = LoggingConfig(
            level=str((data["logging"] or {}).get("level", "INFO")).upper()
        )

    return config


def apply_env_overrides(config: Config, env: Mapping[str, str]) -> Config:
    """Override config values from environment variables."""
    if env.get(ENV_SOURCE_DIR):
        config.source_dir = str(Path(env[ENV_SOURCE_DIR]).expanduser())
    if env.get(ENV_OUTPUT):
        config.output_path = str(Path(env[ENV_OUTPUT]).expanduser())
    if env.get(ENV_LOG_LEVEL):
        config.logging.level = env[ENV_LOG_LEVEL].upper()
    return config
