"""Package models for multi-source search.

This module defines the core data structures for representing
packages found in the various sources (Flatpak, Snap, APT).
"""

from dataclasses import dataclass
from enum import Enum


class PackageSource(Enum):
    """Enumeration of supported package sources.

    Declaration order is the order in which sources are searched.
    """

    FLATPAK = "flatpak"
    SNAP = "snap"
    APT = "apt"


class MatchMode(Enum):
    """Filtering policy applied to parsed search results.

    Attributes:
        SUBSTRING: Keep everything the backend's own search returned.
        EXACT: Keep only identifiers equal to the search term.
    """

    SUBSTRING = "substring"
    EXACT = "exact"


@dataclass(frozen=True, slots=True)
class FoundPackage:
    """A package matched by one of the package sources.

    Identifiers are source specific and never normalized across sources:
    an application ID for Flatpak, a snap name for Snap and a package
    name for APT.

    Attributes:
        source: Package manager that reported this package.
        identifier: Canonical identifier used for removal.
    """

    source: PackageSource
    identifier: str

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.identifier:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.source.value}:{self.identifier}"

    @property
    def is_apt(self) -> bool:
        """Check if the package comes from APT."""
        return self.source == PackageSource.APT


def base_name(name: str) -> str:
    """Strip architecture and version qualifiers from a package name.

    Used for heuristic matching of residual files. ``libfoo:amd64``
    becomes ``libfoo`` and ``g++`` becomes ``g``.

    Args:
        name: Full package name.

    Returns:
        The name up to the first ':' and then up to the first '+'.
    """
    return name.split(":", 1)[0].split("+", 1)[0]
