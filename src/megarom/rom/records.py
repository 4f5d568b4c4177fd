"""
ROM Record Definitions
======================

Data structures for Genesis / Mega Drive cartridge images.

RomFormat
---------
The two on-disk representations of the same ROM data:

- **BINARY**: straight byte-for-byte dump (.bin, .gen, .md)
- **SMD**: Super Magic Drive interleaved format (.smd), as written by
  copier and backup devices. A 512-byte header precedes the data and each
  16KB block stores odd bytes before even bytes.

RomImage
--------
An owned byte buffer tagged with its format. The tag is always derived
from the signature bytes, never taken on trust. Transcoding produces a
new RomImage; the buffer of an existing image is never modified.

RomHeader
---------
The vendor header fields copied out of a Binary image. Text fields keep
their fixed width and padding exactly as stored in the ROM.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from megarom.rom.constants import (
    SMD_SIGNATURE,
    SMD_SIGNATURE_OFFSET,
    SMD_TYPE_BYTE,
    SMD_TYPE_OFFSET,
)
from megarom.rom.publishers import resolve_publisher


# =============================================================================
# Enumeration Types
# =============================================================================

class RomFormat(Enum):
    """On-disk ROM image format."""
    BINARY = "bin"
    SMD = "smd"

    @classmethod
    def detect(cls, data: bytes) -> "RomFormat":
        """
        Detect the format of a ROM image from its signature bytes.

        An SMD image has 0x03 at offset 1 and AA BB 06 at offsets 8-10.
        Anything else, including buffers too short to hold the
        signature, is treated as a Binary image.
        """
        end = SMD_SIGNATURE_OFFSET + len(SMD_SIGNATURE)
        if len(data) < end:
            return cls.BINARY

        if (data[SMD_TYPE_OFFSET] == SMD_TYPE_BYTE
                and data[SMD_SIGNATURE_OFFSET:end] == SMD_SIGNATURE):
            return cls.SMD
        return cls.BINARY

    def get_description(self) -> str:
        """Get the human-readable format name."""
        descriptions = {
            RomFormat.BINARY: "Binary",
            RomFormat.SMD: "Super Magic Drive",
        }
        return descriptions[self]


# =============================================================================
# ROM Image
# =============================================================================

@dataclass(frozen=True)
class RomImage:
    """
    A ROM image held in memory.

    Attributes:
        data: The raw image bytes
        format: Format of the bytes, detected from the signature when omitted
        name: Source file name, used in error messages (optional)

    Raises:
        ValueError: If format is given and disagrees with the signature

    Example:
        >>> image = RomImage.from_bytes(Path("sonic.bin").read_bytes(), name="sonic.bin")
        >>> print(image.format.get_description())
        Binary
    """
    data: bytes = field(repr=False)
    format: Optional[RomFormat] = None
    name: Optional[str] = None

    def __post_init__(self):
        detected = RomFormat.detect(self.data)
        if self.format is None:
            object.__setattr__(self, "format", detected)
        elif self.format is not detected:
            raise ValueError(
                f"Format {self.format.name} does not match the signature "
                f"bytes ({detected.name})"
            )

    @classmethod
    def from_bytes(cls, data: bytes, name: Optional[str] = None) -> "RomImage":
        """
        Create a RomImage, detecting its format from the signature bytes.

        Args:
            data: The raw file contents
            name: Source file name (optional)

        Returns:
            A RomImage with the detected format
        """
        return cls(data=bytes(data), name=name)

    @property
    def length(self) -> int:
        """Size of the image in bytes."""
        return len(self.data)

    @property
    def is_smd(self) -> bool:
        return self.format is RomFormat.SMD

    def __len__(self) -> int:
        return len(self.data)


# =============================================================================
# ROM Header
# =============================================================================

def _display(value: str) -> str:
    """Cut a header field at its first NUL, as a C string would print."""
    return value.split("\0", 1)[0]


@dataclass(frozen=True)
class RomHeader:
    """
    Vendor header of a Genesis ROM.

    Text fields are fixed-width and are not trimmed; trailing spaces and
    NUL padding are kept as stored. The stored checksum is the value the
    publisher wrote at 0x18E and is independent of any checksum
    calculated over the image.

    Attributes:
        console: Console name, e.g. "SEGA MEGA DRIVE " (16 chars)
        company: Company code, e.g. "(C)SEGA " (8 chars)
        copyright: Copyright date, e.g. "1991.APR" (8 chars)
        domestic_name: Japanese market title (48 chars)
        international_name: Overseas title (48 chars)
        product_type: "GM" for games, "AI" for educational (2 chars)
        product_code: Serial and revision (11 chars)
        io_devices: Supported controllers and peripherals (16 chars)
        regions: Region codes, e.g. "JUE" (3 chars)
        stored_checksum: 16-bit checksum stored in the header
    """
    console: str = ""
    company: str = ""
    copyright: str = ""
    domestic_name: str = ""
    international_name: str = ""
    product_type: str = ""
    product_code: str = ""
    io_devices: str = ""
    regions: str = ""
    stored_checksum: int = 0

    @property
    def publisher(self) -> str:
        """Publisher name resolved from the company and copyright fields."""
        return resolve_publisher(self.company, self.copyright)

    def get_display(self, name: str) -> str:
        """
        Get a text field as printed in reports.

        Args:
            name: Attribute name of a text field

        Returns:
            The field value up to its first NUL byte
        """
        return _display(getattr(self, name))
