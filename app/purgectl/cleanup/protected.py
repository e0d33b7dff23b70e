"""Protected filesystem paths that residue cleanup must never delete.

Residue candidates are derived heuristically from package names, so a
package called ``ssh`` or ``gnupg`` would otherwise map to ~/.ssh or
~/.gnupg. Shared system directories listed by ``dpkg -L`` (such as
/etc/default) are protected for the same reason.
"""

import fnmatch
from pathlib import Path

# fnmatch patterns; a leading ~ stands for the home directory
PROTECTED_PATH_PATTERNS: list[str] = [
    # Home and XDG base directories
    "~",
    "~/.config",
    "~/.cache",
    "~/.local",
    "~/.local/share",
    "~/.local/state",
    "~/.local/share/applications",
    "~/.local/share/icons",
    "~/.local/share/fonts",
    "~/.config/autostart",
    "~/.config/dconf",
    "~/.config/systemd",
    # Keys and credentials
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
    "~/.pki",
    "~/.local/share/keyrings",
    # Shells
    "~/.config/bash",
    "~/.config/zsh",
    # Flatpak and Snap installations
    "~/.local/share/flatpak",
    "~/.local/share/snap",
    "~/snap",
    # purgectl itself
    "~/.config/purgectl",
    # Shared /etc directories
    "/etc",
    "/etc/alternatives",
    "/etc/apt",
    "/etc/apt/*",
    "/etc/cron.*",
    "/etc/dbus-1",
    "/etc/default",
    "/etc/dpkg",
    "/etc/dpkg/*",
    "/etc/init.d",
    "/etc/logrotate.d",
    "/etc/NetworkManager",
    "/etc/NetworkManager/*",
    "/etc/pam.d",
    "/etc/profile.d",
    "/etc/security",
    "/etc/ssh",
    "/etc/ssl",
    "/etc/sudoers.d",
    "/etc/systemd",
    "/etc/systemd/*",
    "/etc/X11",
    "/etc/xdg",
    "/etc/xdg/autostart",
    # Drop-in directories such as apparmor.d or sysctl.d are shared by many packages
    "/etc/*.d",
    "/etc/*/*.d",
    # Desktop entry directories
    "/usr/share/applications",
    "/usr/local/share/applications",
]


def is_protected_path(path: str) -> bool:
    """Tell whether residue cleanup must leave ``path`` alone.

    A trailing slash is ignored, so ``~/.config/`` is treated like
    ``~/.config``.
    """
    home = str(Path.home())
    candidate = path.rstrip("/") or "/"
    return any(
        fnmatch.fnmatchcase(candidate, home + p[1:] if p.startswith("~") else p)
        for p in PROTECTED_PATH_PATTERNS
    )
