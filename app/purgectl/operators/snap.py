"""Snap package operator implementation.

Removes snaps using the snap CLI.
"""

import logging

from purgectl.models.action import RemovalResult
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.base import Operator
from purgectl.utils.shell import command_exists, run_best_effort

logger = logging.getLogger(__name__)


class SnapOperator(Operator):
    """Operator for Snap packages.

    Requires sudo privileges for removal.
    """

    @property
    def source(self) -> PackageSource:
        """Return SNAP as the package source."""
        return PackageSource.SNAP

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return command_exists("snap")

    def _remove(self, package: FoundPackage) -> RemovalResult:
        args = ["sudo", "snap", "remove", package.identifier]

        logger.info("Removing Snap: %s", package.identifier)
        result = run_best_effort(args, timeout=self._timeout)

        return self._create_result(package, result)
