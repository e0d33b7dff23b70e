"""Subprocess helpers for talking to the package manager CLIs.

Every external tool purgectl uses (flatpak, snap, apt, dpkg, sudo) is
invoked through ``run_command``. Search and removal code goes through
``run_best_effort`` so that a missing or hanging tool degrades into a
failed result instead of an exception.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Exit code reported when a command could not be started at all
COMMAND_NOT_RUN = 127


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output and exit status of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True when the command exited with status 0."""
        return self.returncode == 0


def run_command(args: list[str], *, timeout: float | None = 60.0) -> CommandResult:
    """Run a command with captured text output.

    Args:
        args: Command and arguments.
        timeout: Seconds to wait before giving up.

    Returns:
        CommandResult for the finished command.

    Raises:
        subprocess.TimeoutExpired: If the command exceeds timeout.
        FileNotFoundError: If the executable is not on PATH.
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(completed.stdout, completed.stderr, completed.returncode)


def run_best_effort(args: list[str], *, timeout: float | None = 60.0) -> CommandResult:
    """Run a command, reporting launch errors as a failed result.

    A missing executable, an OS error or a timeout comes back as a
    CommandResult with returncode COMMAND_NOT_RUN and the error text in
    stderr.

    Args:
        args: Command and arguments.
        timeout: Seconds to wait before giving up.

    Returns:
        CommandResult for the command.
    """
    try:
        return run_command(args, timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.warning("Command timed out after %ss: %s", timeout, " ".join(args))
        return CommandResult("", f"timed out after {timeout}s", COMMAND_NOT_RUN)
    except OSError as e:
        logger.debug("Command could not be run: %s (%s)", " ".join(args), e)
        return CommandResult("", str(e), COMMAND_NOT_RUN)


def command_exists(name: str) -> bool:
    """Check whether ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None
