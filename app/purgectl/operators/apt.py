"""APT package operator implementation.

Purges packages using apt-get and cleans up what they leave behind.
"""

import logging

from purgectl.cleanup.residue import ResidueCleaner, refresh_desktop_database
from purgectl.models.action import CleanupResult, RemovalResult, RemovalStatus
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.base import Operator
from purgectl.utils.shell import CommandResult, command_exists, run_best_effort

logger = logging.getLogger(__name__)


class AptOperator(Operator):
    """Operator for APT/dpkg packages.

    Removal is a purge (configuration files included) followed by a
    best-effort sweep of desktop entries, /etc directories and per-user
    data directories. Packages that are not installed are skipped.
    Requires sudo privileges.
    """

    def __init__(
        self,
        timeout: float = Operator.DEFAULT_TIMEOUT,
        cleaner: ResidueCleaner | None = None,
    ) -> None:
        """Initialize the operator.

        Args:
            timeout: Timeout in seconds for apt-get commands.
            cleaner: Residue cleaner to use. Defaults to a new ResidueCleaner.
        """
        super().__init__(timeout=timeout)
        self._cleaner = cleaner or ResidueCleaner()

    @property
    def source(self) -> PackageSource:
        """Return APT as the package source."""
        return PackageSource.APT

    def is_available(self) -> bool:
        """Check if apt-get is available."""
        return command_exists("apt-get")

    def is_installed(self, package: str) -> bool:
        """Check if a package is installed or still has configuration files.

        A removed but not purged package (dpkg state ``config-files``)
        counts as installed so that its leftovers get purged.

        Args:
            package: Package name.

        Returns:
            True if dpkg reports the package as installed or config-files.
        """
        result = run_best_effort(["dpkg-query", "-W", "-f=${Status}\\n", package])
        if not result.success:
            return False
        return any(
            line.split()[-1:] in (["installed"], ["config-files"])
            for line in result.stdout.splitlines()
        )

    def list_files(self, package: str) -> list[str]:
        """List the paths dpkg recorded for a package.

        Args:
            package: Package name.

        Returns:
            Recorded paths, or an empty list if dpkg fails.
        """
        result = run_best_effort(["dpkg", "-L", package])
        if not result.success:
            logger.debug("dpkg -L %s failed: %s", package, result.stderr.strip())
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def _remove(self, package: FoundPackage) -> RemovalResult:
        name = package.identifier

        if not self.is_installed(name):
            logger.info("APT package %s is not installed, skipping", name)
            return RemovalResult(
                package=package,
                status=RemovalStatus.NOT_INSTALLED,
                message=f"Package {name} is not installed, skipping...",
            )

        # Collect the file list first: dpkg forgets it once the package is purged
        package_files = self.list_files(name)

        args = ["sudo", "apt-get", "remove", "--purge", "-y", name]
        logger.info("Purging APT package: %s", name)
        result = run_best_effort(args, timeout=self._timeout)

        removal = self._create_result(package, result)
        if removal.failed:
            return removal

        cleanup = self._cleaner.clean(name, package_files)
        return RemovalResult(
            package=package,
            status=RemovalStatus.REMOVED,
            message=removal.message,
            cleanup=tuple(cleanup),
        )

    def autoremove(self) -> list[CleanupResult]:
        """Remove orphaned dependencies and clean the package cache.

        All steps are best-effort.

        Returns:
            One CleanupResult per step.
        """
        steps = [
            ["sudo", "apt-get", "autoremove", "--purge", "-y"],
            ["sudo", "apt-get", "autoclean"],
        ]

        results: list[CleanupResult] = []
        for args in steps:
            logger.info("Running %s", " ".join(args[1:]))
            result = run_best_effort(args, timeout=self._timeout)
            results.append(self._step_result(" ".join(args[1:]), result))

        refresh = refresh_desktop_database()
        if refresh is not None:
            results.append(refresh)

        return results

    @staticmethod
    def _step_result(step: str, result: CommandResult) -> CleanupResult:
        if result.success:
            return CleanupResult(path=step, success=True)
        logger.debug("%s failed: %s", step, result.stderr.strip())
        return CleanupResult(
            path=step,
            success=False,
            error=result.stderr.strip() or f"exit code {result.returncode}",
        )
