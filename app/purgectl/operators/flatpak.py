"""Flatpak package operator implementation.

Uninstalls applications using the flatpak CLI.
"""

import logging

from purgectl.models.action import RemovalResult
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.base import Operator
from purgectl.utils.shell import command_exists, run_best_effort

logger = logging.getLogger(__name__)


class FlatpakOperator(Operator):
    """Operator for Flatpak applications.

    Uninstalls non-interactively and deletes the application's data
    directory along with it.
    """

    @property
    def source(self) -> PackageSource:
        """Return FLATPAK as the package source."""
        return PackageSource.FLATPAK

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return command_exists("flatpak")

    def _remove(self, package: FoundPackage) -> RemovalResult:
        # --delete-data: remove ~/.var/app/<id>, -y: non-interactive
        args = ["flatpak", "uninstall", "--delete-data", "-y", package.identifier]

        logger.info("Uninstalling Flatpak: %s", package.identifier)
        result = run_best_effort(args, timeout=self._timeout)

        return self._create_result(package, result)
