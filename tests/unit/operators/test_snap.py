"""Unit tests for SnapOperator."""

from unittest.mock import patch

import pytest
from purgectl.models.action import RemovalStatus
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.snap import SnapOperator
from purgectl.utils.shell import CommandResult

PKG = FoundPackage(source=PackageSource.SNAP, identifier="firefox")


class TestSnapOperator:
    """Tests for SnapOperator class."""

    @pytest.fixture
    def operator(self) -> SnapOperator:
        """Create SnapOperator instance."""
        return SnapOperator()

    def test_source_is_snap(self, operator: SnapOperator) -> None:
        """Operator returns SNAP as source."""
        assert operator.source == PackageSource.SNAP

    def test_remove_uses_sudo(self, operator: SnapOperator) -> None:
        """remove runs snap remove with sudo."""
        with (
            patch("purgectl.operators.snap.command_exists", return_value=True),
            patch("purgectl.operators.snap.run_best_effort") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout="firefox removed\n", stderr="", returncode=0
            )

            result = operator.remove(PKG)

        assert result.success is True
        assert mock_run.call_args[0][0] == ["sudo", "snap", "remove", "firefox"]

    def test_remove_failure_falls_back_to_stdout(self, operator: SnapOperator) -> None:
        """Without stderr the failure message comes from stdout."""
        with (
            patch("purgectl.operators.snap.command_exists", return_value=True),
            patch("purgectl.operators.snap.run_best_effort") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout='snap "firefox" is not installed', stderr="", returncode=1
            )

            result = operator.remove(PKG)

        assert result.status == RemovalStatus.FAILED
        assert result.error == 'snap "firefox" is not installed'

    def test_remove_failure_without_output(self, operator: SnapOperator) -> None:
        """Without any output a generic failure message is used."""
        with (
            patch("purgectl.operators.snap.command_exists", return_value=True),
            patch("purgectl.operators.snap.run_best_effort") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=1)

            result = operator.remove(PKG)

        assert result.error == "snap command failed"
