"""Residual file cleanup for removed packages.

This module exports the cleaner used after APT purges and the
protected path check that guards it.
"""

from purgectl.cleanup.protected import PROTECTED_PATH_PATTERNS, is_protected_path
from purgectl.cleanup.residue import ResidueCleaner, refresh_desktop_database

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "ResidueCleaner",
    "is_protected_path",
    "refresh_desktop_database",
]
