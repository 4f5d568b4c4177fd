"""
megarom - Genesis ROM Converter Command-Line Interface
=======================================================

This module implements the command-line interface for the ROM converter.

With one file it shows the ROM header; with two it converts the first
file to the other format and writes it to the second.

Usage Examples
--------------
Show header information:
    $ megarom sonic.bin

Convert Binary to SMD (or SMD to Binary):
    $ megarom sonic.bin sonic.smd
    $ megarom sonic.smd sonic.bin

Verbose mode:
    $ megarom -v sonic.smd

Exit Codes
----------
    0    Success, or no arguments (usage shown)
    1    File unreadable, wrong size, invalid header or write failure
    127  Too many arguments
"""

import logging
import sys
from pathlib import Path

import click

from megarom import __version__
from megarom.cli.errors import ExitCode, handle_cli_exception
from megarom.rom import RomReport, convert_file, inspect_file


USAGE = (
    "Usage: megarom input_file [output_file]\n"
    "\n"
    "Converts Sega Genesis/Mega Drive ROM files.\n"
    "\n"
    "If no output file given, shows ROM header information."
)

LABEL_WIDTH = 19


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def print_report(report: RomReport, verbose: bool = False) -> None:
    """Print a header report, one right-aligned label per line."""
    for label, value in report.lines():
        click.echo(f"{label:>{LABEL_WIDTH}}: {value}")

    if verbose:
        click.echo(f"{'Checksum status':>{LABEL_WIDTH}}: {report.checksum.message}")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Accept headers without the TMSS \"SEGA\" signature",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="megarom")
def main(paths: tuple[Path, ...], lenient: bool, verbose: bool) -> None:
    """
    Convert Sega Genesis / Mega Drive ROM files.

    With INPUT_FILE only, shows the ROM header. With OUTPUT_FILE,
    converts Binary to SMD or SMD to Binary and writes the result.

    \b
    Examples:
        megarom sonic.bin              # Show header information
        megarom sonic.bin sonic.smd    # Convert to SMD
        megarom sonic.smd sonic.bin    # Convert to Binary
    """
    setup_logging(verbose)

    if not paths:
        click.echo(USAGE)
        sys.exit(ExitCode.SUCCESS)

    if len(paths) > 2:
        click.echo(USAGE)
        sys.exit(ExitCode.UNKNOWN_OPTION)

    strict = not lenient

    try:
        if len(paths) == 1:
            report = inspect_file(paths[0], strict=strict)
            print_report(report, verbose=verbose)
        else:
            input_path, output_path = paths
            converted = convert_file(input_path, output_path, strict=strict)
            if verbose:
                click.echo(
                    f"Wrote {converted.length} bytes "
                    f"({converted.format.get_description()}) to {output_path}"
                )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
