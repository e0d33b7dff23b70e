"""XDG-compliant path management for purgectl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration, plus the well-known locations that
residual package files are searched in.

XDG defaults:
- Config: ~/.config/purgectl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "purgectl"

# System-wide application menu directories
SYSTEM_DESKTOP_DIRS: tuple[str, ...] = (
    "/usr/share/applications",
    "/usr/local/share/applications",
)


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/purgectl/ (or XDG_CONFIG_HOME/purgectl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/purgectl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/purgectl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_desktop_dirs() -> list[Path]:
    """Get the application menu directories searched for desktop entries.

    Returns:
        System directories followed by ~/.local/share/applications.
    """
    dirs = [Path(d) for d in SYSTEM_DESKTOP_DIRS]
    dirs.append(Path.home() / ".local" / "share" / "applications")
    return dirs


def get_user_residue_dirs(names: list[str]) -> list[Path]:
    """Get candidate per-user data directories for the given package names.

    For every name this yields ~/.config/<name>, ~/.cache/<name>,
    ~/.local/share/<name> and ~/.<name>, without duplicates.

    Args:
        names: Package names (typically base name and full name).

    Returns:
        Ordered list of candidate directories.
    """
    home = Path.home()
    parents = (home / ".config", home / ".cache", home / ".local" / "share")

    candidates: list[Path] = []
    for parent in parents:
        for name in names:
            candidates.append(parent / name)
    for name in names:
        candidates.append(home / f".{name}")

    # dict preserves insertion order
    return list(dict.fromkeys(candidates))
