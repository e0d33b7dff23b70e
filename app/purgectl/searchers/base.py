"""Abstract base class for package searchers.

This module defines the Searcher interface that all package source
searchers must implement, together with the filtering step shared by
every source.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from purgectl.models.package import FoundPackage, MatchMode, PackageSource
from purgectl.models.search_result import QueryStatus, SearchResult
from purgectl.utils.shell import CommandResult, run_best_effort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A syntactically valid identifier parsed from search output.

    Attributes:
        identifier: Identifier used for removal.
        aliases: Alternate keys accepted by exact matching (e.g. a display name).
    """

    identifier: str
    aliases: tuple[str, ...] = ()

    def matches_exactly(self, term: str) -> bool:
        """Check if the term equals the identifier or one of the aliases."""
        return term == self.identifier or term in self.aliases


class Searcher(ABC):
    """Abstract base class for all package searchers.

    Searchers run the search command of one package manager, parse its
    text output into candidates and filter them by match mode. Queries
    are best-effort: a missing tool or a failing command produces an
    empty SearchResult, never an exception.

    Example:
        >>> searcher = SnapSearcher()
        >>> result = searcher.search("firefox", MatchMode.EXACT)
        >>> for pkg in result.packages:
        ...     print(pkg)
    """

    # Output printed by the backend when nothing matched
    no_results_sentinel: str | None = None

    def __init__(self, timeout: float = 60.0) -> None:
        """Initialize the searcher.

        Args:
            timeout: Timeout in seconds for the search command.
        """
        self._timeout = timeout

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this searcher handles."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Return the section title used when displaying results."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def build_command(self, term: str) -> list[str]:
        """Build the search command for a term.

        Args:
            term: Search term.

        Returns:
            Command and arguments.
        """

    @abstractmethod
    def parse(self, output: str) -> Iterator[Candidate]:
        """Parse raw search output into candidates.

        Args:
            output: Standard output of the search command.

        Yields:
            Candidate for every row with a valid identifier.
        """

    def query(self, term: str) -> CommandResult:
        """Run the search command for a term.

        Args:
            term: Search term.

        Returns:
            CommandResult of the search command.
        """
        args = self.build_command(term)
        logger.info("Searching %s: %s", self.source.value, " ".join(args))
        return run_best_effort(args, timeout=self._timeout)

    def search(self, term: str, mode: MatchMode = MatchMode.SUBSTRING) -> SearchResult:
        """Search this package source.

        Args:
            term: Search term.
            mode: Filtering policy for parsed identifiers.

        Returns:
            SearchResult with the retained packages in discovery order.
        """
        if not self.is_available():
            logger.info("%s is not available, skipping search", self.source.value)
            return SearchResult(source=self.source, status=QueryStatus.UNAVAILABLE)

        result = self.query(term)
        output = result.stdout

        if self._is_empty(output):
            if result.success or self._is_sentinel(output):
                return SearchResult(source=self.source, status=QueryStatus.NO_MATCHES)

            error = result.stderr.strip() or f"exit code {result.returncode}"
            logger.warning("%s search failed: %s", self.source.value, error)
            return SearchResult(source=self.source, status=QueryStatus.FAILED, error=error)

        packages = tuple(
            FoundPackage(source=self.source, identifier=c.identifier)
            for c in self.parse(output)
            if self.accepts(c, term, mode)
        )
        logger.debug("%s search kept %d package(s)", self.source.value, len(packages))

        return SearchResult(
            source=self.source,
            status=QueryStatus.OK,
            output=output,
            packages=packages,
        )

    @staticmethod
    def accepts(candidate: Candidate, term: str, mode: MatchMode) -> bool:
        """Apply the match mode to a candidate.

        Substring matching is delegated to the backend's own search, so
        in SUBSTRING mode every candidate is kept.

        Args:
            candidate: Parsed candidate.
            term: Search term.
            mode: Match mode.

        Returns:
            True if the candidate should be kept.
        """
        if mode == MatchMode.EXACT:
            return candidate.matches_exactly(term)
        return True

    def _is_sentinel(self, output: str) -> bool:
        return self.no_results_sentinel is not None and output.strip() == self.no_results_sentinel

    def _is_empty(self, output: str) -> bool:
        return not output.strip() or self._is_sentinel(output)
