"""
ROM Conversion and Inspection
=============================

Sequences the steps of the two megarom operations. The core functions
take raw bytes and return raw bytes or a report; the *_file helpers add
one read and one optional write around them.

Inspect
-------
    LOADED -> SIZE_CHECKED -> TRANSCODED -> VALIDATED -> DONE

An SMD image is de-interleaved before the header is read; the
normalised form is never written back. The checksum is calculated over
the Binary image.

Convert
-------
    LOADED -> SIZE_CHECKED -> TRANSCODED -> VALIDATED -> WRITTEN -> DONE

Conversion always flips the format: Binary becomes SMD and SMD becomes
Binary. The output is written only after the converted image passes
validation, so a failed conversion leaves nothing on disk.

Usage Examples
--------------
    >>> from megarom.rom import inspect_file, convert_file
    >>> report = inspect_file("sonic.smd")
    >>> print(report.header.international_name.rstrip())
    >>> convert_file("sonic.smd", "sonic.bin")
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
import logging

from megarom.errors import (
    InvalidHeaderError,
    RomReadError,
    RomTooLargeError,
    RomTooSmallError,
    RomWriteError,
)
from megarom.rom.checksum import (
    ChecksumAnalysis,
    analyze_checksum,
    calculate_checksum,
    format_checksum,
)
from megarom.rom.constants import MAX_FILE_SIZE, MIN_CONVERT_SIZE, MIN_INSPECT_SIZE
from megarom.rom.header import read_header, validate_header
from megarom.rom.interleave import normalize, toggle_format
from megarom.rom.records import RomFormat, RomHeader, RomImage

# Logger for this module
logger = logging.getLogger(__name__)


class ConversionState(Enum):
    """Steps of an inspect or convert operation."""
    LOADED = "loaded"
    SIZE_CHECKED = "size checked"
    TRANSCODED = "transcoded"
    VALIDATED = "validated"
    WRITTEN = "written"
    DONE = "done"


def _enter(state: ConversionState, image: RomImage) -> None:
    logger.debug(
        f"{image.name or '<input>'}: {state.value} "
        f"({image.length} bytes, {image.format.get_description()})"
    )


# =============================================================================
# Report
# =============================================================================

@dataclass
class RomReport:
    """
    Result of inspecting a ROM.

    Attributes:
        file_name: Name shown in the report
        format: Format of the file as read (before normalisation)
        header: Header fields of the Binary image
        calculated_checksum: Checksum calculated over the Binary image
        checksum: Comparison of the stored and calculated checksums
    """
    file_name: str
    format: RomFormat
    header: RomHeader
    calculated_checksum: int
    checksum: ChecksumAnalysis = field(init=False)

    def __post_init__(self) -> None:
        self.checksum = analyze_checksum(
            self.header.stored_checksum, self.calculated_checksum
        )

    @property
    def publisher(self) -> str:
        return self.header.publisher

    def lines(self) -> list[tuple[str, str]]:
        """
        Get the report as (label, value) pairs in display order.

        Returns:
            List of label/value pairs
        """
        h = self.header
        return [
            ("File name", self.file_name),
            ("File format", self.format.get_description()),
            ("Console", h.get_display("console")),
            ("Publisher", self.publisher),
            ("Domestic name", h.get_display("domestic_name")),
            ("International name", h.get_display("international_name")),
            ("Copyright", h.get_display("copyright")),
            ("Product type", h.get_display("product_type")),
            ("Product code", h.get_display("product_code")),
            ("I/O devices", h.get_display("io_devices")),
            ("Regions", h.get_display("regions")),
            ("Stored checksum", format_checksum(h.stored_checksum)),
            ("Calculated checksum", format_checksum(self.calculated_checksum)),
        ]

    def to_dict(self) -> dict:
        """
        Get the report as a dictionary.

        Returns:
            Dictionary with the header fields and checksum results
        """
        h = self.header
        return {
            "file_name": self.file_name,
            "format": self.format.get_description(),
            "console": h.console,
            "publisher": self.publisher,
            "company": h.company,
            "copyright": h.copyright,
            "domestic_name": h.domestic_name,
            "international_name": h.international_name,
            "product_type": h.product_type,
            "product_code": h.product_code,
            "io_devices": h.io_devices,
            "regions": h.regions,
            "stored_checksum": f"0x{h.stored_checksum:04X}",
            "calculated_checksum": f"0x{self.calculated_checksum:04X}",
            "checksum_valid": self.checksum.is_valid,
        }


# =============================================================================
# Core Operations
# =============================================================================

def check_size(image: RomImage, minimum: int, maximum: int = MAX_FILE_SIZE) -> None:
    """
    Check that an image is within the accepted size bounds.

    Raises:
        RomTooSmallError: If the image is shorter than minimum
        RomTooLargeError: If the image is longer than maximum
    """
    if image.length < minimum:
        raise RomTooSmallError(image.name)
    if image.length > maximum:
        raise RomTooLargeError(image.name)


def inspect_rom(
    data: bytes,
    name: Optional[str] = None,
    strict: bool = True,
) -> RomReport:
    """
    Inspect a ROM image and report its header.

    Args:
        data: The raw file contents (Binary or SMD)
        name: File name for the report and error messages
        strict: Reject headers without the TMSS signature

    Returns:
        A RomReport for the image

    Raises:
        RomTooSmallError: If the file is shorter than 512 bytes
        RomTooLargeError: If the file is larger than 5MB
        InvalidHeaderError: If the TMSS check fails
    """
    image = RomImage.from_bytes(data, name=name)
    _enter(ConversionState.LOADED, image)

    check_size(image, MIN_INSPECT_SIZE)
    _enter(ConversionState.SIZE_CHECKED, image)

    binary = normalize(image)
    _enter(ConversionState.TRANSCODED, binary)

    if not validate_header(binary.data, strict=strict):
        raise InvalidHeaderError(name)
    _enter(ConversionState.VALIDATED, binary)

    header = read_header(binary.data)
    report = RomReport(
        file_name=name or "",
        format=image.format,
        header=header,
        calculated_checksum=calculate_checksum(binary.data),
    )

    if report.checksum.is_valid:
        logger.debug(report.checksum.message)
    else:
        logger.info(report.checksum.message)

    _enter(ConversionState.DONE, binary)
    return report


def convert_rom(
    data: bytes,
    name: Optional[str] = None,
    strict: bool = True,
) -> RomImage:
    """
    Convert a ROM image to the other format.

    Args:
        data: The raw file contents (Binary or SMD)
        name: File name for error messages
        strict: Reject headers without the TMSS signature

    Returns:
        The converted RomImage

    Raises:
        RomTooSmallError: If the file is shorter than 512 + 16384 bytes
        RomTooLargeError: If the file is larger than 5MB
        InvalidHeaderError: If the TMSS check fails on the result
    """
    image = RomImage.from_bytes(data, name=name)
    _enter(ConversionState.LOADED, image)

    check_size(image, MIN_CONVERT_SIZE)
    _enter(ConversionState.SIZE_CHECKED, image)

    converted = toggle_format(image)
    _enter(ConversionState.TRANSCODED, converted)

    # The header sits in the Binary layout; check it there
    binary = converted if image.is_smd else image
    if not validate_header(binary.data, strict=strict):
        raise InvalidHeaderError(name)
    _enter(ConversionState.VALIDATED, converted)

    return converted


# =============================================================================
# File Helpers
# =============================================================================

def read_rom_file(filepath: Union[str, Path]) -> bytes:
    """
    Read a ROM file into memory.

    Raises:
        RomReadError: If the file cannot be opened or read
    """
    filepath = Path(filepath)
    try:
        return filepath.read_bytes()
    except OSError as e:
        raise RomReadError(str(filepath)) from e


def write_rom_file(filepath: Union[str, Path], image: RomImage) -> int:
    """
    Write a ROM image to disk.

    Returns:
        Number of bytes written

    Raises:
        RomWriteError: If the file cannot be written
    """
    filepath = Path(filepath)
    try:
        written = filepath.write_bytes(image.data)
    except OSError as e:
        raise RomWriteError(str(filepath)) from e

    logger.debug(f"Wrote {written} bytes to {filepath}")
    return written


def inspect_file(filepath: Union[str, Path], strict: bool = True) -> RomReport:
    """
    Read a ROM file and report its header.

    Raises:
        RomReadError: If the file cannot be read
        RomSizeError: If the file size is out of bounds
        InvalidHeaderError: If the TMSS check fails
    """
    data = read_rom_file(filepath)
    return inspect_rom(data, name=str(filepath), strict=strict)


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    strict: bool = True,
) -> RomImage:
    """
    Convert a ROM file to the other format and write the result.

    Nothing is written unless the conversion succeeds.

    Returns:
        The converted RomImage

    Raises:
        RomReadError: If the input cannot be read
        RomSizeError: If the input size is out of bounds
        InvalidHeaderError: If the TMSS check fails
        RomWriteError: If the output cannot be written
    """
    data = read_rom_file(input_path)
    converted = convert_rom(data, name=str(input_path), strict=strict)

    write_rom_file(output_path, converted)
    _enter(ConversionState.WRITTEN, converted)
    _enter(ConversionState.DONE, converted)
    return converted
