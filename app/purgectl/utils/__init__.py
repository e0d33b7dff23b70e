"""Utility modules for purgectl.

This module exports commonly used utility functions.
"""

from purgectl.utils.formatting import (
    console,
    err_console,
    format_package,
    print_error,
    print_header,
    print_info,
    print_raw,
    print_success,
    print_warning,
)
from purgectl.utils.shell import CommandResult, command_exists, run_best_effort, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_package",
    "print_error",
    "print_header",
    "print_info",
    "print_raw",
    "print_success",
    "print_warning",
    "run_best_effort",
    "run_command",
]
