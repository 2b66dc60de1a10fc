"""clonectl configuration.

Settings for the clone command are stored in
~/.config/clonectl/config.toml. Command-line options override them.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clonectl.clone.models import CloneStrategy
from clonectl.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30


class ClonectlConfig(BaseModel):
    """Configuration for clonectl.

    Attributes:
        strategy: How git is launched.
        git: Git executable name or path.
        timeout_seconds: Seconds to wait for git (1-3600).
        branch: Default branch to check out, None for the remote HEAD.
    """

    model_config = ConfigDict(extra="forbid")

    strategy: Annotated[
        CloneStrategy,
        Field(description="How git is launched"),
    ] = CloneStrategy.EXECUTE
    git: Annotated[
        str,
        Field(min_length=1, description="Git executable"),
    ] = "git"
    timeout_seconds: Annotated[
        int,
        Field(ge=1, le=3600, description="Timeout in seconds (1-3600)"),
    ] = DEFAULT_TIMEOUT_SECONDS
    branch: Annotated[
        str | None,
        Field(description="Default branch (None = remote HEAD)"),
    ] = None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ClonectlConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ClonectlConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ClonectlConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ClonectlConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return ClonectlConfig()


def save_config(config: ClonectlConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ClonectlConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
