"""Utility modules for clonectl.

This module exports commonly used utility functions.
"""

from clonectl.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from clonectl.utils.shell import (
    CommandResult,
    run_command,
    run_interactive,
    run_silent,
)

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
    "run_silent",
]
