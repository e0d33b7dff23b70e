"""Removal outcome models.

This module defines data structures for representing the result of
removing a package and of the residual cleanup that follows it.
"""

from dataclasses import dataclass, field
from enum import Enum

from purgectl.models.package import FoundPackage


class RemovalStatus(Enum):
    """Outcome of a package removal.

    Attributes:
        REMOVED: The removal command succeeded.
        NOT_INSTALLED: The package is not installed; nothing was done.
        FAILED: The removal command exited non-zero or could not run.
        UNAVAILABLE: The package manager is not present on the system.
    """

    REMOVED = "removed"
    NOT_INSTALLED = "not_installed"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Result of a single best-effort cleanup step.

    Attributes:
        path: Path (or command) the step operated on.
        success: Whether the step completed.
        error: Error message if the step failed.
    """

    path: str
    success: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing a single package.

    Attributes:
        package: The package that was processed.
        status: Outcome of the removal.
        message: Optional informational message.
        error: Optional error message if the removal failed.
        cleanup: Results of residual cleanup steps (APT only).
    """

    package: FoundPackage
    status: RemovalStatus
    message: str | None = None
    error: str | None = None
    cleanup: tuple[CleanupResult, ...] = field(default=())

    @property
    def success(self) -> bool:
        """Check if the package was removed."""
        return self.status == RemovalStatus.REMOVED

    @property
    def skipped(self) -> bool:
        """Check if the package was skipped because it is not installed."""
        return self.status == RemovalStatus.NOT_INSTALLED

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return self.status in (RemovalStatus.FAILED, RemovalStatus.UNAVAILABLE)

    @property
    def cleanup_failures(self) -> int:
        """Count cleanup steps that did not succeed."""
        return sum(1 for c in self.cleanup if not c.success)
