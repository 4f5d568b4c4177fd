"""
SMD Interleaving
================

Conversion between Binary and Super Magic Drive (SMD) images.

Block Layout
------------
An SMD image splits the ROM into 16KB blocks. Within each block the
odd-addressed bytes are stored first and the even-addressed bytes
second:

    Binary block:  b0 b1 b2 b3 ... b16382 b16383
    SMD block:     b1 b3 ... b16383 | b0 b2 ... b16382
                   (first 8KB)        (second 8KB)

A 512-byte SMD header precedes the first block. Only the block count
(byte 0) and the fixed signature (bytes 1 and 8-10) are written; all
other header bytes are zero.

Usage Examples
--------------
    >>> from megarom.rom import RomImage, interleave, deinterleave
    >>> image = RomImage.from_bytes(Path("sonic.bin").read_bytes())
    >>> smd = interleave(image)
    >>> assert deinterleave(smd).data == image.data

Both conversions always build a new buffer. Images below the minimum
size for a conversion are returned unchanged.
"""

import logging

from megarom.rom.constants import (
    BLOCK_SIZE,
    HEADER_SIZE,
    SMD_SIGNATURE,
    SMD_SIGNATURE_OFFSET,
    SMD_TYPE_BYTE,
    SMD_TYPE_OFFSET,
)
from megarom.rom.records import RomFormat, RomImage

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# SMD Header
# =============================================================================

def create_smd_header(total_length: int) -> bytes:
    """
    Create the 512-byte SMD header.

    Args:
        total_length: Length of the complete SMD file (header included)

    Returns:
        512-byte header block

    Example:
        >>> header = create_smd_header(HEADER_SIZE + 2 * BLOCK_SIZE)
        >>> header[:11].hex()
        '0203000000000000aabb06'
    """
    header = bytearray(HEADER_SIZE)
    # Block count is stored in a single byte
    header[0] = (total_length // BLOCK_SIZE) & 0xFF
    header[SMD_TYPE_OFFSET] = SMD_TYPE_BYTE
    header[SMD_SIGNATURE_OFFSET:SMD_SIGNATURE_OFFSET + len(SMD_SIGNATURE)] = SMD_SIGNATURE
    return bytes(header)


def detect_format(data: bytes) -> RomFormat:
    """Detect whether raw file bytes are a Binary or SMD image."""
    return RomFormat.detect(data)


# =============================================================================
# Block Conversion
# =============================================================================

def _iter_blocks(length: int):
    """
    Yield (offset, size) for each block of a payload of the given length.

    The last block is shorter when the length is not a multiple of
    BLOCK_SIZE; its halves are then sized to the block itself.
    """
    remainder = length % BLOCK_SIZE
    if remainder:
        logger.info(
            f"ROM data length {length} is not a multiple of {BLOCK_SIZE}; "
            f"last block is {remainder} bytes"
        )
    for offset in range(0, length, BLOCK_SIZE):
        yield offset, min(BLOCK_SIZE, length - offset)


def interleave_bytes(data: bytes) -> bytes:
    """
    Convert Binary image bytes to SMD image bytes.

    Args:
        data: Binary image bytes (at least one 16KB block)

    Returns:
        SMD image bytes, HEADER_SIZE bytes longer than the input. Input
        shorter than one block is returned unchanged.
    """
    length = len(data)
    if length < BLOCK_SIZE:
        logger.warning(f"Image too small to interleave ({length} bytes)")
        return bytes(data)

    total_length = length + HEADER_SIZE
    converted = bytearray(create_smd_header(total_length))

    for offset, size in _iter_blocks(length):
        block = data[offset:offset + size]
        converted += block[1::2]
        converted += block[0::2]

    logger.debug(f"Interleaved {length} bytes into {total_length // BLOCK_SIZE} blocks")
    return bytes(converted)


def deinterleave_bytes(data: bytes) -> bytes:
    """
    Convert SMD image bytes to Binary image bytes.

    Args:
        data: SMD image bytes (header plus at least one 16KB block)

    Returns:
        Binary image bytes, HEADER_SIZE bytes shorter than the input.
        Input shorter than HEADER_SIZE + BLOCK_SIZE is returned unchanged.
    """
    if len(data) < HEADER_SIZE + BLOCK_SIZE:
        logger.warning(f"Image too small to de-interleave ({len(data)} bytes)")
        return bytes(data)

    length = len(data) - HEADER_SIZE
    source = memoryview(data)[HEADER_SIZE:]
    converted = bytearray(length)

    for offset, size in _iter_blocks(length):
        middle = offset + size // 2
        end = offset + size
        converted[offset + 1:end:2] = source[offset:middle]
        converted[offset:end:2] = source[middle:end]

    logger.debug(f"De-interleaved {len(data)} bytes into {length} bytes")
    return bytes(converted)


# =============================================================================
# Image Conversion
# =============================================================================

def interleave(image: RomImage) -> RomImage:
    """
    Convert a Binary RomImage to SMD format.

    Args:
        image: The Binary image

    Returns:
        A new SMD RomImage, or the same image if it is below one block
    """
    if image.length < BLOCK_SIZE:
        return image
    return RomImage(
        data=interleave_bytes(image.data),
        format=RomFormat.SMD,
        name=image.name,
    )


def deinterleave(image: RomImage) -> RomImage:
    """
    Convert an SMD RomImage to Binary format.

    Args:
        image: The SMD image

    Returns:
        A new Binary RomImage, or the same image if it is below
        HEADER_SIZE + BLOCK_SIZE bytes
    """
    if image.length < HEADER_SIZE + BLOCK_SIZE:
        return image
    return RomImage(
        data=deinterleave_bytes(image.data),
        format=RomFormat.BINARY,
        name=image.name,
    )


def toggle_format(image: RomImage) -> RomImage:
    """Convert an image to the other format."""
    if image.is_smd:
        return deinterleave(image)
    return interleave(image)


def normalize(image: RomImage) -> RomImage:
    """Return the image in Binary format, de-interleaving if needed."""
    if image.is_smd:
        return deinterleave(image)
    return image
