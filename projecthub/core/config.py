"""Configuration management for ProjectHub.

Settings come from environment variables and an optional ``.env`` file. When
``PROJECTHUB_CONFIG`` names a YAML file, its keys are loaded first and passed
to ``Settings`` as explicit values.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH_ENV = "PROJECTHUB_CONFIG"


class Settings(BaseSettings):
    # App
    app_name: str = "ProjectHub"
    version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./projecthub.db"

    # Security
    secret_key: str = "dev-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False

    # Pagination
    default_page_limit: int = 20
    max_page_limit: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROJECTHUB_",
        case_sensitive=False,
        extra="ignore",
    )


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def build_settings(config_path: Optional[str] = None) -> Settings:
    """Build settings, overlaying a YAML file when one is given or configured."""
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
    if config_path:
        return Settings(**load_config(config_path))
    return Settings()


@lru_cache
def get_settings() -> Settings:
    return build_settings()
