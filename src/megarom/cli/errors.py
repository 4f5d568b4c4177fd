"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the megarom tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the megarom tool."""
    SUCCESS = 0
    FAILURE = 1           # Unreadable input, bad size, bad header, write error
    INTERNAL_ERROR = 3    # Unexpected internal error
    UNKNOWN_OPTION = 127  # Too many arguments


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Prints a one-line message to stderr, optionally prints a traceback
    for internal errors in verbose mode, and exits with the matching
    exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from megarom.errors import MegaromError

    if isinstance(error, MegaromError):
        # Messages already name the file: "File is too small: sonic.bin"
        click.echo(str(error), err=True)
        sys.exit(ExitCode.FAILURE)

    elif isinstance(error, OSError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.FAILURE)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
