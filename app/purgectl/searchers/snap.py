"""Snap package searcher implementation.

Searches the Snap store using the snap CLI.
"""

import re
from collections.abc import Iterator

from purgectl.models.package import PackageSource
from purgectl.searchers.base import Candidate, Searcher
from purgectl.utils.shell import command_exists

# Column header row ("Name  Version  Publisher  Notes  Summary")
_HEADER_PATTERN = re.compile(r"^Name\s+Version")

# Separator rows made of dashes or equals signs
_SEPARATOR_PATTERN = re.compile(r"^[-=]+")

_NAME_PATTERN = re.compile(r"^\s*([a-zA-Z0-9][a-zA-Z0-9-]*)")


class SnapSearcher(Searcher):
    """Searcher for Snap packages.

    Uses ``snap find``, which prints a whitespace-aligned table whose
    first column is the snap name.
    """

    no_results_sentinel = "No matching snaps found"

    @property
    def source(self) -> PackageSource:
        """Return SNAP as the package source."""
        return PackageSource.SNAP

    @property
    def title(self) -> str:
        return "Snap Packages"

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return command_exists("snap")

    def build_command(self, term: str) -> list[str]:
        return ["snap", "find", term]

    def parse(self, output: str) -> Iterator[Candidate]:
        """Parse snap find output, skipping header and separator rows.

        Yields:
            Candidate for each snap name.
        """
        for line in output.splitlines():
            if _HEADER_PATTERN.match(line) or _SEPARATOR_PATTERN.match(line):
                continue

            match = _NAME_PATTERN.match(line)
            if match is None:
                continue

            name = match.group(1)
            if name == "Name":
                continue

            yield Candidate(identifier=name)
