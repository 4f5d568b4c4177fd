"""
ROM Header Parser
=================

Reads the vendor header of a Genesis / Mega Drive ROM.

Every cartridge carries a 256-byte header at offset 0x100 of the Binary
image. Fields are fixed-width ASCII, padded with spaces (sometimes
NULs), and are copied byte-for-byte into a RomHeader without trimming.

TMSS Check
----------
Later Genesis models include the Trademark Security System, which
refuses to boot a cartridge unless the console name field contains
"SEGA". validate_header() checks for "SEGA " or " SEGA" in that field.

Headers that contain neither string are rejected by default. Pass
strict=False to accept every header, as older converters did.

Usage Examples
--------------
    >>> from megarom.rom import read_header, validate_header
    >>> data = Path("sonic.bin").read_bytes()
    >>> if validate_header(data):
    ...     header = read_header(data)
    ...     print(header.international_name.rstrip())
"""

import logging

from megarom.errors import RomTooSmallError
from megarom.rom.constants import (
    CHECKSUM_OFFSET,
    CONSOLE_LENGTH,
    CONSOLE_OFFSET,
    HEADER_END,
    HEADER_ENCODING,
    HEADER_FIELDS,
    TMSS_SIGNATURES,
)
from megarom.rom.records import RomHeader

logger = logging.getLogger(__name__)


def validate_header(data: bytes, strict: bool = True) -> bool:
    """
    Check the TMSS signature in the console name field.

    Args:
        data: Binary image bytes
        strict: If False, accept every header (lenient mode)

    Returns:
        True if the header passes the check
    """
    if not strict:
        logger.debug("TMSS check skipped")
        return True

    console = data[CONSOLE_OFFSET:CONSOLE_OFFSET + CONSOLE_LENGTH]
    # C string semantics: the field ends at its first NUL
    console = console.split(b"\0", 1)[0].decode(HEADER_ENCODING)

    for signature in TMSS_SIGNATURES:
        if signature in console:
            logger.debug(f"TMSS signature {signature!r} found in {console!r}")
            return True

    logger.debug(f"TMSS signature not found in console name {console!r}")
    return False


def read_header(data: bytes) -> RomHeader:
    """
    Extract the header fields of a Binary image.

    Args:
        data: Binary image bytes (at least 0x1F3 bytes)

    Returns:
        A RomHeader with the fixed-width fields copied verbatim

    Raises:
        RomTooSmallError: If the buffer ends before the last header field
    """
    if len(data) < HEADER_END:
        raise RomTooSmallError(
            description=f"ROM too small for header: {len(data)} bytes, need {HEADER_END}"
        )

    fields = {
        f.name: bytes(data[f.offset:f.end]).decode(HEADER_ENCODING)
        for f in HEADER_FIELDS
    }
    stored_checksum = int.from_bytes(data[CHECKSUM_OFFSET:CHECKSUM_OFFSET + 2], "big")

    return RomHeader(stored_checksum=stored_checksum, **fields)
