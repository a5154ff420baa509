"""Configuration for the what-the-path tools server."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .shell.logging import get_logger
from .shell.variants import ShellKind

CONFIG_ENV = "WHAT_THE_PATH_CONFIG"
DEFAULT_CONFIG_NAME = "what_the_path.yaml"


class Config(BaseModel):
    """Root configuration model."""

    shell: Optional[ShellKind] = Field(
        default=None,
        description="Shell to use instead of detecting it from SHELL",
    )
    base_dir: Optional[Path] = Field(
        default=None,
        description="Profile root to resolve rc files under instead of HOME",
    )
    path_comment: str = Field(
        default="# Added by what-the-path",
        description="Comment line written above PATH entries",
    )
    config_file: Optional[Path] = Field(
        default=None, description="File this configuration was loaded from"
    )


def find_config_file() -> Path:
    """Find the configuration file.

    Search order:
    1. WHAT_THE_PATH_CONFIG environment variable
    2. ./what_the_path.yaml in current working directory
    """
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).resolve()

    return Path.cwd() / DEFAULT_CONFIG_NAME


def parse_config(content: str, file_path: Path) -> Config:
    """Parse YAML configuration content.

    Malformed YAML or invalid values are logged and replaced by defaults.
    """
    logger = get_logger()

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse config YAML in {file_path}: {e}")
        return Config(config_file=file_path)

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config in {file_path}: expected a mapping")
        return Config(config_file=file_path)

    try:
        return Config(**{**data, "config_file": file_path})
    except ValidationError as e:
        logger.warning(f"Invalid config in {file_path}: {e}")
        return Config(config_file=file_path)


def load_config(config_file: Optional[Path] = None) -> Config:
    """Load configuration from disk.

    Args:
        config_file: Path to the YAML file. If None, will search for it.

    Returns:
        Loaded Config object, or defaults when the file does not exist or
        cannot be read.
    """
    if config_file is None:
        config_file = find_config_file()

    if not config_file.is_file():
        return Config()

    try:
        content = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        get_logger().warning(f"Failed to read config file {config_file}: {e}")
        return Config(config_file=config_file)

    return parse_config(content, config_file)


def get_config() -> Config:
    """Get the configuration (always reloads from disk)."""
    return load_config()
