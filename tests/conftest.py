"""
Shared fixtures for megarom tests.
"""

import pytest

from megarom.rom.constants import BLOCK_SIZE, HEADER_SIZE


def make_rom(
    size: int = BLOCK_SIZE + HEADER_SIZE,
    console: bytes = b"SEGA MEGA DRIVE ",
    company: bytes = b"(C)SEGA ",
    copyright: bytes = b"1991.APR",
    stored_checksum: int = 0,
) -> bytes:
    """
    Build a synthetic Binary ROM image.

    The payload after the header is a repeating byte pattern so that a
    misplaced byte shows up in comparisons.
    """
    rom = bytearray((i * 7 + 3) & 0xFF for i in range(size))
    rom[0x100:0x110] = console
    rom[0x110:0x118] = company
    rom[0x118:0x120] = copyright
    rom[0x120:0x150] = b"SONIC THE HEDGEHOG".ljust(48)
    rom[0x150:0x180] = b"SONIC THE HEDGEHOG".ljust(48)
    rom[0x180:0x182] = b"GM"
    rom[0x182] = 0x20
    rom[0x183:0x18E] = b"00001009-00"
    rom[0x18E:0x190] = stored_checksum.to_bytes(2, "big")
    rom[0x190:0x1A0] = b"J".ljust(16)
    rom[0x1F0:0x1F3] = b"JUE"
    return bytes(rom)


@pytest.fixture
def binary_rom() -> bytes:
    """A valid Binary ROM of HEADER_SIZE + BLOCK_SIZE (16896) bytes."""
    return make_rom()


@pytest.fixture
def two_block_rom() -> bytes:
    """A valid Binary ROM of exactly two blocks."""
    return make_rom(size=2 * BLOCK_SIZE)


@pytest.fixture
def rom_factory():
    """The make_rom() builder, for tests that need custom header fields."""
    return make_rom
