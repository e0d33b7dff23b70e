"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from fakes import FakeSystem


@pytest.fixture
def mock_flatpak_search_output() -> str:
    """Sample flatpak search output for testing."""
    return (
        "Firefox\tFast, Private & Safe Web Browser\torg.mozilla.firefox"
        "\t131.0\tstable\tflathub\n"
        "Firefox Developer Edition\tBrowser for developers\torg.mozilla.FirefoxDevEdition"
        "\t132.0b5\tstable\tflathub\n"
        "Profile Cleaner\tClean browser profiles\tinvalid_id\t1.0\tstable\tflathub\n"
    )


@pytest.fixture
def mock_khronos_search_output() -> str:
    """flatpak search output with one exact and one partial match."""
    return (
        "Khronos\tLog the time it took to do tasks\tio.github.lainsce.Khronos\t4.0.1"
        "\tstable\tflathub\n"
        "Khronos Tracker\tTrack Khronos timers\tio.github.lainsce.KhronosTracker\t1.0"
        "\tstable\tflathub\n"
    )


@pytest.fixture
def mock_snap_find_output() -> str:
    """Sample snap find output for testing."""
    return """\
Name                Version   Publisher      Notes  Summary
firefox             131.0     mozilla✓       -      Mozilla Firefox web browser
firefox-nightly     133.0a1   mozilla✓       -      Firefox Nightly builds
"""


@pytest.fixture
def mock_apt_search_output() -> str:
    """Sample apt-cache search output for testing."""
    return """\
firefox - Safe and easy web browser from Mozilla
firefox-locale-de - German language pack for Firefox
libfirefox-utils+dfsg - Helper scripts for Firefox
"""


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point HOME at a temporary directory and isolate desktop entry lookup.

    System application directories are replaced by a temporary
    ``usr-share-applications`` directory so tests never look at the
    real /usr/share/applications.
    """
    home = tmp_path / "home"
    home.mkdir()
    system_apps = tmp_path / "usr-share-applications"
    system_apps.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    with patch(
        "purgectl.cleanup.residue.get_desktop_dirs",
        return_value=[system_apps, home / ".local" / "share" / "applications"],
    ):
        yield home


@pytest.fixture
def fake_system() -> Iterator[FakeSystem]:
    """Replace command execution and lookup with a FakeSystem."""
    system = FakeSystem()
    with (
        patch("purgectl.utils.shell.subprocess.run", side_effect=system.run),
        patch("purgectl.utils.shell.shutil.which", side_effect=system.which),
    ):
        yield system
