"""Flatpak package searcher implementation.

Searches Flatpak applications using the flatpak CLI.
"""

import logging
import re
from collections.abc import Iterator

from purgectl.models.package import PackageSource
from purgectl.searchers.base import Candidate, Searcher
from purgectl.utils.shell import command_exists

logger = logging.getLogger(__name__)


class FlatpakSearcher(Searcher):
    """Searcher for Flatpak applications.

    Uses ``flatpak search`` whose rows are tab-separated:
    Name, Description, Application ID, Version, Branch, Remotes.
    """

    no_results_sentinel = "No matches found"

    # Application IDs have at least three dot-separated segments (org.example.App)
    _APP_ID_PATTERN = re.compile(
        r"^[a-zA-Z0-9][a-zA-Z0-9.-]*\.[a-zA-Z0-9][a-zA-Z0-9.-]*\.[a-zA-Z0-9][a-zA-Z0-9.-]*"
    )

    @property
    def source(self) -> PackageSource:
        """Return FLATPAK as the package source."""
        return PackageSource.FLATPAK

    @property
    def title(self) -> str:
        return "Flatpak Packages"

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return command_exists("flatpak")

    def build_command(self, term: str) -> list[str]:
        return ["flatpak", "search", term]

    def parse(self, output: str) -> Iterator[Candidate]:
        """Parse flatpak search output.

        The application ID (3rd column) is the identifier; the name
        (1st column) is accepted as an alternate key for exact matching.

        Yields:
            Candidate for each row with a well-formed application ID.
        """
        for line in output.splitlines():
            if not line.strip():
                continue

            candidate = self._parse_flatpak_line(line)
            if candidate is not None:
                yield candidate

    def _parse_flatpak_line(self, line: str) -> Candidate | None:
        """Parse a single line of flatpak search output.

        Args:
            line: Tab-separated line from flatpak search.

        Returns:
            Candidate if the row has a valid application ID, None otherwise.
        """
        parts = line.split("\t")
        if len(parts) < 3:
            logger.debug("Skipping malformed flatpak line (parts=%d): %r", len(parts), line[:100])
            return None

        name = parts[0].strip()
        app_id = parts[2].strip()

        if not app_id or not self._APP_ID_PATTERN.match(app_id):
            return None

        aliases = (name,) if name else ()
        return Candidate(identifier=app_id, aliases=aliases)
