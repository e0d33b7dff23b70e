"""Unit tests for removal outcome models."""

from purgectl.models.action import CleanupResult, RemovalResult, RemovalStatus
from purgectl.models.package import FoundPackage, PackageSource

PKG = FoundPackage(source=PackageSource.APT, identifier="firefox")


class TestRemovalResult:
    """Tests for RemovalResult properties."""

    def test_removed(self) -> None:
        """REMOVED is a success, not skipped, not failed."""
        result = RemovalResult(package=PKG, status=RemovalStatus.REMOVED)
        assert result.success is True
        assert result.skipped is False
        assert result.failed is False

    def test_not_installed_is_skipped(self) -> None:
        """NOT_INSTALLED is neither a success nor a failure."""
        result = RemovalResult(package=PKG, status=RemovalStatus.NOT_INSTALLED)
        assert result.success is False
        assert result.skipped is True
        assert result.failed is False

    def test_failed_and_unavailable_are_failures(self) -> None:
        """FAILED and UNAVAILABLE both count as failures."""
        for status in (RemovalStatus.FAILED, RemovalStatus.UNAVAILABLE):
            result = RemovalResult(package=PKG, status=status, error="boom")
            assert result.failed is True
            assert result.success is False

    def test_cleanup_failures(self) -> None:
        """cleanup_failures counts unsuccessful cleanup steps."""
        result = RemovalResult(
            package=PKG,
            status=RemovalStatus.REMOVED,
            cleanup=(
                CleanupResult(path="/a", success=True),
                CleanupResult(path="/b", success=False, error="denied"),
                CleanupResult(path="/c", success=False, error="missing"),
            ),
        )
        assert result.cleanup_failures == 2

    def test_cleanup_defaults_to_empty(self) -> None:
        """cleanup defaults to an empty tuple."""
        result = RemovalResult(package=PKG, status=RemovalStatus.REMOVED)
        assert result.cleanup == ()
