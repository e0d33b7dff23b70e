"""Runtime settings for purgectl.

Settings are read from ~/.config/purgectl/config.toml. The file is
optional; every field has a default.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from purgectl.core.paths import get_config_path


class Settings(BaseModel):
    """Tunable settings for searching and removing packages.

    Attributes:
        apt_display_limit: Number of apt-cache lines echoed before truncating.
        query_timeout: Timeout in seconds for search commands.
        removal_timeout: Timeout in seconds for removal commands.
        refresh_apt_cache: Run ``apt update`` when apt-cache search fails.
    """

    model_config = ConfigDict(extra="forbid")

    apt_display_limit: Annotated[
        int,
        Field(ge=1, description="Lines of APT search output to display"),
    ] = 20
    query_timeout: Annotated[
        float,
        Field(gt=0, description="Timeout in seconds for search commands"),
    ] = 60.0
    removal_timeout: Annotated[
        float,
        Field(gt=0, description="Timeout in seconds for removal commands"),
    ] = 300.0
    refresh_apt_cache: Annotated[
        bool,
        Field(description="Refresh the APT cache when a search fails"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated Settings. Defaults are returned when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
