"""Search result models.

Captures the outcome of querying a single package source,
including the raw output that is echoed back to the user.
"""

from dataclasses import dataclass, field
from enum import Enum

from purgectl.models.package import FoundPackage, PackageSource


class QueryStatus(Enum):
    """Outcome of a backend query.

    Attributes:
        OK: The backend returned output that was parsed.
        NO_MATCHES: The backend ran and reported nothing.
        UNAVAILABLE: The backend tool is not installed.
        FAILED: The backend tool errored or timed out.
    """

    OK = "ok"
    NO_MATCHES = "no_matches"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Result of searching one package source.

    Attributes:
        source: Package source that was queried.
        status: Outcome of the query.
        output: Raw standard output of the query command.
        packages: Packages retained after parsing and filtering.
        error: Error detail when the query did not succeed.
    """

    source: PackageSource
    status: QueryStatus
    output: str = ""
    packages: tuple[FoundPackage, ...] = field(default=())
    error: str | None = None

    @property
    def has_output(self) -> bool:
        """Check if there is backend output worth displaying."""
        return self.status == QueryStatus.OK and bool(self.output.strip())

    @property
    def count(self) -> int:
        """Return the number of retained packages."""
        return len(self.packages)


def collect_packages(results: list[SearchResult]) -> list[FoundPackage]:
    """Flatten search results into one ordered package list.

    Order follows the order of ``results`` and, within each result,
    the order of discovery. Duplicates are preserved.

    Args:
        results: Search results in search order.

    Returns:
        List of found packages.
    """
    found: list[FoundPackage] = []
    for result in results:
        found.extend(result.packages)
    return found
