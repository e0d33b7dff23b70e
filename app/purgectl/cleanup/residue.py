"""Residual file cleanup after an APT purge.

Locates desktop entries, configuration directories and per-user data
left behind by a removed package and deletes them. Every step is
best-effort: failures are recorded and logged, never raised.
"""

import fnmatch
import logging
import shutil
from pathlib import Path

from purgectl.cleanup.protected import is_protected_path
from purgectl.core.paths import get_desktop_dirs, get_user_residue_dirs
from purgectl.models.action import CleanupResult
from purgectl.models.package import base_name
from purgectl.utils.shell import command_exists, run_best_effort

logger = logging.getLogger(__name__)


class ResidueCleaner:
    """Finds and deletes files a purged package leaves behind.

    Paths inside the user's home directory are deleted directly; any
    other path (system desktop entries, /etc) goes through ``sudo rm -rf``.
    """

    # Timeout for individual deletion commands
    _RM_TIMEOUT: float = 60.0

    def find_residue(self, package: str, package_files: list[str]) -> list[str]:
        """Collect residual paths for a package.

        Args:
            package: Full package name.
            package_files: Paths recorded by ``dpkg -L`` before removal.

        Returns:
            Ordered, de-duplicated list of existing paths to delete.
        """
        names = self._names_for(package)
        paths: list[str] = []

        paths.extend(str(p) for p in self.find_desktop_entries(names))

        for file in package_files:
            target = Path(file)
            if file.endswith(".desktop") and target.is_file():
                paths.append(file)
            elif file.startswith("/etc/") and target.is_dir():
                paths.append(file)

        paths.extend(str(d) for d in get_user_residue_dirs(names) if d.is_dir())

        return list(dict.fromkeys(paths))

    def find_desktop_entries(self, names: list[str], dirs: list[Path] | None = None) -> list[Path]:
        """Find desktop entry files whose filename contains any of the names.

        Only regular files directly inside each directory are considered,
        matching ``*<name>*.desktop``.

        Args:
            names: Names to look for in filenames.
            dirs: Directories to search. Defaults to the standard menu directories.

        Returns:
            Matching desktop entry paths.
        """
        found: list[Path] = []

        for directory in dirs if dirs is not None else get_desktop_dirs():
            if not directory.is_dir():
                continue
            try:
                entries = sorted(directory.iterdir())
            except OSError as e:
                logger.debug("Cannot list %s: %s", directory, e)
                continue

            for entry in entries:
                if not entry.is_file():
                    continue
                if any(fnmatch.fnmatchcase(entry.name, f"*{name}*.desktop") for name in names):
                    found.append(entry)

        return found

    def delete(self, paths: list[str]) -> list[CleanupResult]:
        """Delete paths, isolating failures per path.

        Args:
            paths: Absolute paths to delete.

        Returns:
            One CleanupResult per input path.
        """
        results: list[CleanupResult] = []

        for path in paths:
            if is_protected_path(path):
                logger.warning("Refusing to delete protected path: %s", path)
                results.append(
                    CleanupResult(
                        path=path,
                        success=False,
                        error=f"Protected path cannot be deleted: {path}",
                    )
                )
                continue

            owner = self._owning_package(path)
            if owner:
                logger.warning("Refusing to delete %s: still owned by %s", path, owner)
                results.append(
                    CleanupResult(
                        path=path,
                        success=False,
                        error=f"Still owned by {owner}: {path}",
                    )
                )
                continue

            result = self._delete_single(path)
            if not result.success:
                logger.debug("Cleanup of %s failed: %s", path, result.error)
            results.append(result)

        return results

    def clean(self, package: str, package_files: list[str]) -> list[CleanupResult]:
        """Find and delete residue for a package, then refresh the menu cache.

        Args:
            package: Full package name.
            package_files: Paths recorded by ``dpkg -L`` before removal.

        Returns:
            Results of every cleanup step.
        """
        paths = self.find_residue(package, package_files)
        logger.info("Removing %d residual path(s) for %s", len(paths), package)

        results = self.delete(paths)

        refresh = refresh_desktop_database()
        if refresh is not None:
            results.append(refresh)

        return results

    def _delete_single(self, path: str) -> CleanupResult:
        """Delete a single path.

        Args:
            path: Absolute path to delete.

        Returns:
            CleanupResult indicating success or failure.
        """
        if not self._is_user_path(path):
            result = run_best_effort(["sudo", "rm", "-rf", path], timeout=self._RM_TIMEOUT)
            if not result.success:
                return CleanupResult(
                    path=path,
                    success=False,
                    error=result.stderr.strip() or "sudo rm failed",
                )
            return CleanupResult(path=path, success=True)

        try:
            target = Path(path)

            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
                return CleanupResult(path=path, success=True)

            if target.exists() or target.is_symlink():
                target.unlink()
                return CleanupResult(path=path, success=True)

            return CleanupResult(path=path, success=False, error=f"Path does not exist: {path}")

        except OSError as e:
            return CleanupResult(path=path, success=False, error=str(e))

    def _owning_package(self, path: str) -> str | None:
        """Return the installed package(s) dpkg still records for a system path.

        Runs after the purge, so the removed package no longer shows up.
        """
        if self._is_user_path(path):
            return None
        result = run_best_effort(["dpkg", "-S", path])
        if not result.success:
            return None
        owners = [line.rpartition(": ")[0] for line in result.stdout.splitlines() if ": " in line]
        return ", ".join(o for o in owners if o) or None

    @staticmethod
    def _is_user_path(path: str) -> bool:
        return Path(path).is_relative_to(Path.home())

    @staticmethod
    def _names_for(package: str) -> list[str]:
        return list(dict.fromkeys([base_name(package), package]))


def refresh_desktop_database() -> CleanupResult | None:
    """Rebuild the desktop entry cache if update-desktop-database exists.

    Returns:
        CleanupResult for the refresh, or None if the tool is not installed.
    """
    if not command_exists("update-desktop-database"):
        return None

    result = run_best_effort(["sudo", "update-desktop-database"])
    if not result.success:
        logger.debug("update-desktop-database failed: %s", result.stderr.strip())
        return CleanupResult(
            path="update-desktop-database",
            success=False,
            error=result.stderr.strip() or "update-desktop-database failed",
        )
    return CleanupResult(path="update-desktop-database", success=True)
