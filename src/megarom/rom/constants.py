"""
ROM Layout Constants
====================

Fixed sizes, signatures and header offsets for Genesis / Mega Drive
cartridge images. Everything here is immutable; there is no process-wide
mutable state in the package.

Header Layout
-------------
All offsets are within the Binary (linear) image, after any necessary
de-interleaving:

    0x100  16  Console name (TMSS signature region)
    0x110   8  Company code
    0x118   8  Copyright
    0x120  48  Domestic title
    0x150  48  International title
    0x180   2  Product type
    0x183  11  Product code
    0x18E   2  Stored checksum (big-endian)
    0x190  16  I/O devices
    0x1F0   3  Regions

SMD Layout
----------
A Super Magic Drive image is a 512-byte header followed by the ROM data
in 16KB blocks. Each block stores the odd-addressed bytes in its first
half and the even-addressed bytes in its second half.

    Byte 0:     Number of 16KB blocks in the file (header included)
    Byte 1:     0x03
    Bytes 8-10: 0xAA 0xBB 0x06
"""

from typing import Final, NamedTuple


# =============================================================================
# Sizes
# =============================================================================

HEADER_SIZE: Final = 512
BLOCK_SIZE: Final = 16 * 1024
MAX_FILE_SIZE: Final = 5 * 1024 * 1024

# Minimum sizes per operation
MIN_INSPECT_SIZE: Final = HEADER_SIZE
MIN_CONVERT_SIZE: Final = HEADER_SIZE + BLOCK_SIZE


# =============================================================================
# SMD Signature
# =============================================================================

SMD_TYPE_OFFSET: Final = 1
SMD_TYPE_BYTE: Final = 0x03
SMD_SIGNATURE_OFFSET: Final = 8
SMD_SIGNATURE: Final = b"\xAA\xBB\x06"


# =============================================================================
# Header Offsets
# =============================================================================

CONSOLE_OFFSET: Final = 0x100
COMPANY_OFFSET: Final = 0x110
COPYRIGHT_OFFSET: Final = 0x118
DOMESTIC_NAME_OFFSET: Final = 0x120
INTERNATIONAL_NAME_OFFSET: Final = 0x150
PRODUCT_TYPE_OFFSET: Final = 0x180
PRODUCT_CODE_OFFSET: Final = 0x183
CHECKSUM_OFFSET: Final = 0x18E
IO_DEVICES_OFFSET: Final = 0x190
REGIONS_OFFSET: Final = 0x1F0

CONSOLE_LENGTH: Final = 16
COMPANY_LENGTH: Final = 8
COPYRIGHT_LENGTH: Final = 8
NAME_LENGTH: Final = 48
PRODUCT_TYPE_LENGTH: Final = 2
PRODUCT_CODE_LENGTH: Final = 11
CHECKSUM_LENGTH: Final = 2
IO_DEVICES_LENGTH: Final = 16
REGIONS_LENGTH: Final = 3

# TMSS license strings; either one must appear in the console name field
TMSS_SIGNATURES: Final = ("SEGA ", " SEGA")


class HeaderField(NamedTuple):
    """A fixed-width text field in the ROM header."""
    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


# Text fields in header order; names match the RomHeader attributes
HEADER_FIELDS: Final = (
    HeaderField("console", CONSOLE_OFFSET, CONSOLE_LENGTH),
    HeaderField("company", COMPANY_OFFSET, COMPANY_LENGTH),
    HeaderField("copyright", COPYRIGHT_OFFSET, COPYRIGHT_LENGTH),
    HeaderField("domestic_name", DOMESTIC_NAME_OFFSET, NAME_LENGTH),
    HeaderField("international_name", INTERNATIONAL_NAME_OFFSET, NAME_LENGTH),
    HeaderField("product_type", PRODUCT_TYPE_OFFSET, PRODUCT_TYPE_LENGTH),
    HeaderField("product_code", PRODUCT_CODE_OFFSET, PRODUCT_CODE_LENGTH),
    HeaderField("io_devices", IO_DEVICES_OFFSET, IO_DEVICES_LENGTH),
    HeaderField("regions", REGIONS_OFFSET, REGIONS_LENGTH),
)

# Smallest buffer that holds every header field
HEADER_END: Final = max(
    max(f.end for f in HEADER_FIELDS),
    CHECKSUM_OFFSET + CHECKSUM_LENGTH,
)

# Text encoding for header fields: one character per byte
HEADER_ENCODING: Final = "latin-1"
