"""Unit tests for AptOperator.

Tests for purging APT packages and the residue cleanup that follows.
"""

from pathlib import Path

import pytest
from fakes import FakeSystem
from purgectl.models.action import RemovalStatus
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.apt import AptOperator

PKG = FoundPackage(source=PackageSource.APT, identifier="firefox")

INSTALLED = "install ok installed\n"


class TestAptOperator:
    """Tests for AptOperator class."""

    @pytest.fixture
    def operator(self) -> AptOperator:
        """Create AptOperator instance."""
        return AptOperator()

    def test_source_is_apt(self, operator: AptOperator) -> None:
        """Operator returns APT as source."""
        assert operator.source == PackageSource.APT

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("install ok installed\n", True),
            ("deinstall ok config-files\n", True),
            ("deinstall ok not-installed\n", False),
            ("unknown ok not-installed\n", False),
            ("", False),
        ],
    )
    def test_is_installed(
        self, operator: AptOperator, fake_system: FakeSystem, status: str, expected: bool
    ) -> None:
        """is_installed reads the dpkg status field."""
        fake_system.respond(["dpkg-query"], stdout=status)

        assert operator.is_installed("firefox") is expected

    def test_is_installed_unknown_package(
        self, operator: AptOperator, fake_system: FakeSystem
    ) -> None:
        """dpkg-query failing for an unknown package means not installed."""
        fake_system.respond(
            ["dpkg-query"], returncode=1, stderr="dpkg-query: no packages found matching zzz"
        )

        assert operator.is_installed("zzz") is False

    def test_not_installed_is_skipped(
        self, operator: AptOperator, fake_system: FakeSystem, isolated_home: Path
    ) -> None:
        """A package that is not installed is skipped without apt-get."""
        fake_system.respond(["dpkg-query"], returncode=1)

        result = operator.remove(PKG)

        assert result.status == RemovalStatus.NOT_INSTALLED
        assert result.message == "Package firefox is not installed, skipping..."
        assert fake_system.called(["sudo", "apt-get"]) == []

    def test_config_files_state_is_purged(
        self, operator: AptOperator, fake_system: FakeSystem, isolated_home: Path
    ) -> None:
        """A removed package with leftover configuration is still purged."""
        fake_system.respond(["dpkg-query"], stdout="deinstall ok config-files\n")

        result = operator.remove(PKG)

        assert result.status == RemovalStatus.REMOVED
        assert fake_system.called(["sudo", "apt-get", "remove", "--purge", "-y", "firefox"])

    def test_purge_failure_skips_cleanup(
        self, operator: AptOperator, fake_system: FakeSystem, isolated_home: Path
    ) -> None:
        """A failing purge is reported and residue is left alone."""
        config_dir = isolated_home / ".config" / "firefox"
        config_dir.mkdir(parents=True)
        fake_system.respond(["dpkg-query"], stdout=INSTALLED)
        fake_system.respond(
            ["sudo", "apt-get", "remove"], returncode=100, stderr="E: Unable to lock"
        )

        result = operator.remove(PKG)

        assert result.status == RemovalStatus.FAILED
        assert result.error == "E: Unable to lock"
        assert config_dir.exists()
        assert fake_system.called(["sudo", "update-desktop-database"]) == []

    def test_purge_and_cleanup(
        self,
        operator: AptOperator,
        fake_system: FakeSystem,
        isolated_home: Path,
        tmp_path: Path,
    ) -> None:
        """A successful purge removes desktop entries and user data."""
        desktop = tmp_path / "usr-share-applications" / "firefox.desktop"
        desktop.write_text("[Desktop Entry]\n")
        other = tmp_path / "usr-share-applications" / "vlc.desktop"
        other.write_text("[Desktop Entry]\n")
        config_dir = isolated_home / ".config" / "firefox"
        config_dir.mkdir(parents=True)
        cache_dir = isolated_home / ".cache" / "firefox"
        cache_dir.mkdir(parents=True)

        fake_system.respond(["dpkg-query"], stdout=INSTALLED)
        fake_system.respond(["dpkg", "-L"], stdout=f"/.\n/usr\n{desktop}\n")

        result = operator.remove(PKG)

        assert result.status == RemovalStatus.REMOVED
        assert fake_system.called(["sudo", "apt-get", "remove", "--purge", "-y", "firefox"])

        # System path goes through sudo, user paths are removed directly
        assert fake_system.called(["sudo", "rm", "-rf", str(desktop)])
        assert fake_system.called(["sudo", "rm", "-rf", str(other)]) == []
        assert not config_dir.exists()
        assert not cache_dir.exists()

        assert [c.path for c in result.cleanup] == [
            str(desktop),
            str(config_dir),
            str(cache_dir),
            "update-desktop-database",
        ]
        assert result.cleanup_failures == 0

    def test_file_list_captured_before_purge(
        self, operator: AptOperator, fake_system: FakeSystem, isolated_home: Path
    ) -> None:
        """dpkg -L runs before apt-get remove."""
        fake_system.respond(["dpkg-query"], stdout=INSTALLED)

        operator.remove(PKG)

        commands = [c[:2] for c in fake_system.calls]
        assert commands.index(["dpkg", "-L"]) < commands.index(["sudo", "apt-get"])

    def test_cleanup_failure_does_not_fail_removal(
        self,
        operator: AptOperator,
        fake_system: FakeSystem,
        isolated_home: Path,
        tmp_path: Path,
    ) -> None:
        """A failing cleanup step is recorded but the package counts as removed."""
        desktop = tmp_path / "usr-share-applications" / "firefox.desktop"
        desktop.write_text("[Desktop Entry]\n")
        fake_system.respond(["dpkg-query"], stdout=INSTALLED)
        fake_system.respond(["sudo", "rm"], returncode=1, stderr="rm: permission denied")

        result = operator.remove(PKG)

        assert result.status == RemovalStatus.REMOVED
        assert result.cleanup_failures == 1
        assert result.cleanup[0].error == "rm: permission denied"

    def test_autoremove(self, operator: AptOperator, fake_system: FakeSystem) -> None:
        """autoremove runs autoremove, autoclean and the menu refresh."""
        results = operator.autoremove()

        assert [r.path for r in results] == [
            "apt-get autoremove --purge -y",
            "apt-get autoclean",
            "update-desktop-database",
        ]
        assert all(r.success for r in results)
        assert fake_system.called(["sudo", "apt-get", "autoremove", "--purge", "-y"])
        assert fake_system.called(["sudo", "apt-get", "autoclean"])

    def test_autoremove_is_best_effort(
        self, operator: AptOperator, fake_system: FakeSystem
    ) -> None:
        """A failing autoremove does not stop autoclean."""
        fake_system.missing.add("update-desktop-database")
        fake_system.respond(["sudo", "apt-get", "autoremove"], returncode=100, stderr="E: lock")

        results = operator.autoremove()

        assert [r.success for r in results] == [False, True]
        assert results[0].error == "E: lock"
