"""
Configuration management for agentskills.

Precedence: env vars > .env file > .agentskills.yaml > defaults

Config file: {repo}/.agentskills.yaml
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "AGENTSKILLS_"
CONFIG_FILE = ".agentskills.yaml"

# Keys honoured in .agentskills.yaml
CONFIG_KEYS = {"base_path", "log_level", "log_format", "strict"}


def _resolve_base_path() -> Path:
    """Resolve the repository root from env or CWD, before Settings init."""
    raw = os.environ.get(f"{ENV_PREFIX}BASE_PATH", "")
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd()


def get_config_path(base_path: Path) -> Path:
    """Get the .agentskills.yaml path for a repository."""
    return Path(base_path) / CONFIG_FILE


def _load_yaml_config(base_path: Path) -> dict[str, Any]:
    """Load .agentskills.yaml from the repository root."""
    config_file = get_config_path(base_path)
    if not config_file.exists():
        return {}
    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning(f"{CONFIG_FILE} is not a mapping, ignoring: {config_file}")
            return {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Error loading {CONFIG_FILE}: {e}")
        return {}

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        logger.warning(f"Ignoring unknown keys in {CONFIG_FILE}: {', '.join(sorted(unknown))}")
    return {k: v for k, v in data.items() if k in CONFIG_KEYS}


class Settings(BaseSettings):
    """Tool configuration. Precedence: env vars > .env > .agentskills.yaml > defaults."""

    base_path: Path = Field(
        default=Path("."),
        description="Repository root containing .github/plugins",
    )
    strict: bool = Field(
        default=False,
        description="Treat validation warnings as failures",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _inject_yaml_config(cls, data: Any) -> Any:
        """Inject .agentskills.yaml values as fallbacks below env vars and .env."""
        if not isinstance(data, dict):
            data = {}

        base_path = data.get("base_path") or _resolve_base_path()
        yaml_config = _load_yaml_config(Path(base_path))

        for key, value in yaml_config.items():
            if key not in data or data[key] is None:
                if os.environ.get(f"{ENV_PREFIX}{key.upper()}") is None:
                    data[key] = value

        return data


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
