"""
ROM Checksum Calculations
=========================

The Genesis header stores a 16-bit checksum at offset 0x18E. It is the
sum of all big-endian 16-bit words from the end of the 512-byte header
block to the end of the ROM, truncated to 16 bits.

Most games check it at boot and show a red screen when it does not
match, so a mismatch is a good hint that a dump is bad or that the ROM
was patched without fixing the checksum.

Notes
-----
- The checksum only has meaning for a Binary image; an SMD image must be
  de-interleaved first.
- Images with an odd number of bytes cannot be summed as words; the
  calculated checksum is 0 for them.
"""

from dataclasses import dataclass

from megarom.rom.constants import HEADER_SIZE


@dataclass
class ChecksumAnalysis:
    """
    Result of comparing the stored and calculated checksums.

    Attributes:
        is_valid: True if the checksums match
        stored_checksum: The checksum stored in the header
        calculated_checksum: The checksum calculated over the image
        message: Human-readable explanation of the analysis
    """
    is_valid: bool
    stored_checksum: int
    calculated_checksum: int
    message: str = ""


def calculate_checksum(data: bytes, start: int = HEADER_SIZE) -> int:
    """
    Calculate the ROM checksum of a Binary image.

    Args:
        data: The Binary image bytes
        start: Offset of the first summed word (default: 0x200)

    Returns:
        16-bit checksum value (0x0000 - 0xFFFF), or 0 if the image has
        an odd number of bytes

    Example:
        >>> rom = bytes(HEADER_SIZE) + bytes([0x12, 0x34, 0x00, 0x01])
        >>> print(f"0x{calculate_checksum(rom):04X}")
        0x1235
    """
    if len(data) % 2 != 0:
        return 0

    payload = memoryview(data)[start:]
    # Even and odd bytes are the high and low bytes of each word
    checksum = (sum(payload[0::2]) << 8) + sum(payload[1::2])
    return checksum & 0xFFFF


def analyze_checksum(stored_checksum: int, calculated_checksum: int) -> ChecksumAnalysis:
    """
    Compare a stored checksum with a calculated one.

    Args:
        stored_checksum: Value read from offset 0x18E
        calculated_checksum: Value from calculate_checksum()

    Returns:
        ChecksumAnalysis with the comparison result
    """
    if stored_checksum == calculated_checksum:
        return ChecksumAnalysis(
            is_valid=True,
            stored_checksum=stored_checksum,
            calculated_checksum=calculated_checksum,
            message="Checksum valid",
        )

    return ChecksumAnalysis(
        is_valid=False,
        stored_checksum=stored_checksum,
        calculated_checksum=calculated_checksum,
        message=(
            f"Checksum mismatch: stored 0x{stored_checksum:04X}, "
            f"calculated 0x{calculated_checksum:04X}"
        ),
    )


def format_checksum(checksum: int) -> str:
    """
    Format a checksum as two lowercase hex bytes.

    Example:
        >>> format_checksum(0x1A2B)
        '1a 2b'
    """
    return f"{(checksum >> 8) & 0xFF:02x} {checksum & 0xFF:02x}"
