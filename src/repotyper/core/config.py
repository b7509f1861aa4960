"""Config loading and saving for RepoTyper"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from repotyper.models.config import RepoTyperConfig, TypingSettings


# Config lives in .repotyper/config.yaml in current working directory
CONFIG_DIR = Path(".repotyper")
CONFIG_FILE = CONFIG_DIR / "config.yaml"
LOG_FILE = CONFIG_DIR / "repotyper.log"


class ConfigNotFoundError(Exception):
    """Raised when config file doesn't exist"""

    pass


class ConfigInvalidError(Exception):
    """Raised when config file is invalid"""

    pass


def get_config_path() -> Path:
    """Get the config file path (relative to cwd)"""
    return CONFIG_FILE


def config_exists() -> bool:
    """Check if config file exists"""
    return CONFIG_FILE.exists()


def load_config() -> RepoTyperConfig:
    """Load config from .repotyper/config.yaml

    Raises:
        ConfigNotFoundError: If config file doesn't exist
        ConfigInvalidError: If config file is invalid
    """
    if not CONFIG_FILE.exists():
        raise ConfigNotFoundError(
            f"Config file not found at {CONFIG_FILE}\n"
            f"Run 'repotyper init' to create one."
        )

    try:
        with open(CONFIG_FILE, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            raise ConfigInvalidError(f"Config file is empty: {CONFIG_FILE}")

        return RepoTyperConfig.model_validate(data)

    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config: {e}")


def save_config(config: RepoTyperConfig) -> Path:
    """Save config to .repotyper/config.yaml"""
    CONFIG_DIR.mkdir(exist_ok=True)

    data = config.model_dump()

    with open(CONFIG_FILE, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    return CONFIG_FILE


def create_config(folder: str, **settings: Any) -> RepoTyperConfig:
    """Create and save a new config

    Raises:
        ConfigInvalidError: If the folder or a setting fails validation
    """
    try:
        config = RepoTyperConfig(folder=folder, settings=TypingSettings(**settings))
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config: {e}")
    save_config(config)
    return config
