"""Console color theme.

Colors come from the bundled ``data/theme.toml``; any subset of them can
be overridden from ``~/.config/purgectl/theme.toml``. Both files use a
single ``[colors]`` table of hex codes.
"""

import logging
import re
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from purgectl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# Styles rendered in bold on top of their color
_BOLD_STYLES = frozenset({"header", "success", "error"})


class ThemeColors(BaseModel):
    """Hex colors for every style purgectl prints with.

    Besides the usual message levels there is one color per package
    source, used when listing found packages.
    """

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#f5b332"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    flatpak: str = "#4a90d9"
    snap: str = "#e95420"
    apt: str = "#a80030"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        if not isinstance(value, str):
            msg = f"expected a hex color string, got {type(value).__name__}"
            raise ValueError(msg)
        color = value.strip()
        if not _HEX_COLOR.fullmatch(color):
            msg = f"'{color}' is not a #RGB or #RRGGBB color"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Return the path of the theme shipped inside the package."""
    return Path(str(resources.files("purgectl.data").joinpath("theme.toml")))


def _read_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string entries are dropped here and left to the model defaults.

    Returns:
        The color table, or None if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Cannot read theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled colors with the user's overrides.

    An invalid override discards the whole merge and the model defaults
    are used instead.
    """
    colors = _read_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing or broken, using built-in colors")
        colors = {}

    overrides = _read_colors(get_user_theme_path())
    if overrides:
        logger.debug("Applying %d color override(s)", len(overrides))
        colors = {**colors, **overrides}

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme, one style per ThemeColors field."""
    colors = colors or load_theme()
    styles = {
        name: f"bold {value}" if name in _BOLD_STYLES else value
        for name, value in colors.model_dump().items()
    }
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    return get_rich_theme()
