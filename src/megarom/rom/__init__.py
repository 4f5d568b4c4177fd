"""
Genesis ROM Handling
====================

This package provides support for Sega Genesis / Mega Drive cartridge
images in the two common dump formats.

This package provides:
- **RomImage**: A ROM image with its detected format
- **interleave / deinterleave**: Conversion between Binary and SMD images
- **read_header / validate_header**: Vendor header extraction and TMSS check
- **resolve_publisher**: Publisher name from the company code
- **calculate_checksum**: ROM checksum over the data after the header
- **inspect_rom / convert_rom**: The complete inspect and convert operations

Quick Start
-----------
Showing the header of a ROM:

    >>> from megarom.rom import inspect_file
    >>> report = inspect_file("sonic.smd")
    >>> for label, value in report.lines():
    ...     print(f"{label:>19}: {value}")

Converting between formats:

    >>> from megarom.rom import convert_file
    >>> convert_file("sonic.bin", "sonic.smd")

File Formats
------------
- **Binary** (.bin, .gen, .md): straight ROM dump
- **SMD** (.smd): Super Magic Drive copier format, 512-byte header plus
  interleaved 16KB blocks

Reference
---------
- Header layout: https://plutiedev.com/rom-header
- SMD format: https://segaretro.org/Super_Magic_Drive
"""

# =============================================================================
# Public API Exports
# =============================================================================

from megarom.rom.constants import (
    HEADER_SIZE,
    BLOCK_SIZE,
    MAX_FILE_SIZE,
    MIN_INSPECT_SIZE,
    MIN_CONVERT_SIZE,
    HEADER_FIELDS,
    HeaderField,
)

from megarom.rom.records import (
    RomFormat,
    RomImage,
    RomHeader,
)

from megarom.rom.checksum import (
    calculate_checksum,
    analyze_checksum,
    format_checksum,
    ChecksumAnalysis,
)

from megarom.rom.interleave import (
    create_smd_header,
    detect_format,
    interleave_bytes,
    deinterleave_bytes,
    interleave,
    deinterleave,
    toggle_format,
    normalize,
)

from megarom.rom.header import (
    validate_header,
    read_header,
)

from megarom.rom.publishers import (
    PublisherRule,
    PUBLISHER_RULES,
    UNKNOWN_PUBLISHER,
    resolve_publisher,
)

from megarom.rom.converter import (
    ConversionState,
    RomReport,
    check_size,
    inspect_rom,
    convert_rom,
    read_rom_file,
    write_rom_file,
    inspect_file,
    convert_file,
)

__all__ = [
    # Constants
    "HEADER_SIZE",
    "BLOCK_SIZE",
    "MAX_FILE_SIZE",
    "MIN_INSPECT_SIZE",
    "MIN_CONVERT_SIZE",
    "HEADER_FIELDS",
    "HeaderField",
    # Data structures
    "RomFormat",
    "RomImage",
    "RomHeader",
    # Checksum
    "calculate_checksum",
    "analyze_checksum",
    "format_checksum",
    "ChecksumAnalysis",
    # Interleaving
    "create_smd_header",
    "detect_format",
    "interleave_bytes",
    "deinterleave_bytes",
    "interleave",
    "deinterleave",
    "toggle_format",
    "normalize",
    # Header
    "validate_header",
    "read_header",
    # Publishers
    "PublisherRule",
    "PUBLISHER_RULES",
    "UNKNOWN_PUBLISHER",
    "resolve_publisher",
    # Conversion
    "ConversionState",
    "RomReport",
    "check_size",
    "inspect_rom",
    "convert_rom",
    "read_rom_file",
    "write_rom_file",
    "inspect_file",
    "convert_file",
]
