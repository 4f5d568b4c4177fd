"""
Megarom - Sega Genesis / Mega Drive ROM Converter
=================================================

This package converts Genesis / Mega Drive ROM images between the Binary
(.bin) and Super Magic Drive (.smd) formats, and reads the vendor header
embedded in every cartridge: console name, publisher, titles, product
code, supported devices, regions and checksum.

Main Components
---------------
- **rom**: Format detection, interleaving, header parsing, publisher
  lookup and checksums
- **cli**: The ``megarom`` command-line tool

Quick Start
-----------
Inspect a ROM:
    >>> from megarom import inspect_file
    >>> report = inspect_file("sonic.bin")
    >>> print(report.publisher)
    Sega

Convert a ROM:
    >>> from megarom import convert_file
    >>> convert_file("sonic.bin", "sonic.smd")

Or use the command-line tool:
    $ megarom sonic.bin
    $ megarom sonic.bin sonic.smd

Version History
---------------
1.0.0 - Initial release with inspect and convert
"""

__version__ = "1.0.0"
__author__ = "Megarom Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from megarom.errors import (
    ErrorKind,
    MegaromError,
    RomError,
    RomReadError,
    RomSizeError,
    RomTooSmallError,
    RomTooLargeError,
    InvalidHeaderError,
    RomWriteError,
)

from megarom.rom import (
    RomFormat,
    RomImage,
    RomHeader,
    RomReport,
    calculate_checksum,
    interleave,
    deinterleave,
    read_header,
    validate_header,
    resolve_publisher,
    inspect_rom,
    convert_rom,
    inspect_file,
    convert_file,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "ErrorKind",
    "MegaromError",
    "RomError",
    "RomReadError",
    "RomSizeError",
    "RomTooSmallError",
    "RomTooLargeError",
    "InvalidHeaderError",
    "RomWriteError",
    # ROM handling
    "RomFormat",
    "RomImage",
    "RomHeader",
    "RomReport",
    "calculate_checksum",
    "interleave",
    "deinterleave",
    "read_header",
    "validate_header",
    "resolve_publisher",
    "inspect_rom",
    "convert_rom",
    "inspect_file",
    "convert_file",
]
