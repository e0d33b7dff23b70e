"""APT package searcher implementation.

Searches the APT package index using apt-cache.
"""

import logging
import re
from collections.abc import Iterator

from purgectl.models.package import PackageSource
from purgectl.searchers.base import Candidate, Searcher
from purgectl.utils.formatting import print_info
from purgectl.utils.shell import CommandResult, command_exists, run_best_effort

logger = logging.getLogger(__name__)

# "package-name - short description"
_PACKAGE_PATTERN = re.compile(r"^([a-zA-Z0-9][a-zA-Z0-9.+-]*)")


class AptSearcher(Searcher):
    """Searcher for APT packages.

    Uses ``apt-cache search``. If the search itself fails, the package
    lists are refreshed once with ``apt update`` and the search is re-run.
    """

    # Timeout for apt update (5 minutes)
    _UPDATE_TIMEOUT: float = 300.0

    def __init__(self, timeout: float = 60.0, refresh_cache: bool = True) -> None:
        """Initialize the searcher.

        Args:
            timeout: Timeout in seconds for the search command.
            refresh_cache: Refresh package lists when the search fails.
        """
        super().__init__(timeout=timeout)
        self._refresh_cache = refresh_cache

    @property
    def source(self) -> PackageSource:
        """Return APT as the package source."""
        return PackageSource.APT

    @property
    def title(self) -> str:
        return "APT Packages"

    def is_available(self) -> bool:
        """Check if apt-cache is available."""
        return command_exists("apt-cache")

    def build_command(self, term: str) -> list[str]:
        return ["apt-cache", "search", term]

    def query(self, term: str) -> CommandResult:
        """Search the package index, refreshing it once on failure.

        Args:
            term: Search term.

        Returns:
            CommandResult of the last search attempt.
        """
        result = super().query(term)
        if result.success or not self._refresh_cache:
            return result

        print_info("Updating package cache...")
        update = run_best_effort(["sudo", "apt", "update", "-qq"], timeout=self._UPDATE_TIMEOUT)
        if not update.success:
            logger.warning("apt update failed: %s", update.stderr.strip() or update.returncode)

        return super().query(term)

    def parse(self, output: str) -> Iterator[Candidate]:
        """Parse apt-cache search output.

        Yields:
            Candidate for the leading package name of each line.
        """
        for line in output.splitlines():
            match = _PACKAGE_PATTERN.match(line)
            if match is not None:
                yield Candidate(identifier=match.group(1))
