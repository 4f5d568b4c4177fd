"""
Megarom Error Hierarchy
=======================

This module defines the exception hierarchy for the megarom package.
All exceptions inherit from MegaromError, allowing callers to catch all
package errors with a single except clause if desired.

Exception Hierarchy
-------------------
MegaromError (base)
└── RomError (ROM file handling)
    ├── RomReadError - file cannot be opened or read
    ├── RomSizeError - file size outside the accepted bounds
    │   ├── RomTooSmallError - below the mode-specific minimum
    │   └── RomTooLargeError - above MAX_FILE_SIZE
    ├── InvalidHeaderError - TMSS signature missing from the header
    └── RomWriteError - output file cannot be written

Error Kinds
-----------
The command-line tool reports every failure the same way (one line on
stderr, exit status 1). Library callers that need to tell failures apart
can inspect the ``kind`` attribute, which is an ErrorKind value:

    try:
        report = inspect_file("sonic.bin")
    except RomError as e:
        if e.kind is ErrorKind.TOO_SMALL:
            ...

Error messages have the form "description: filename":
    File is too small: sonic.bin
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Distinguishable failure categories for ROM operations."""
    UNREADABLE = "unreadable"
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    INVALID_HEADER = "invalid_header"
    WRITE_FAILED = "write_failed"


# =============================================================================
# Base Exception Class
# =============================================================================

class MegaromError(Exception):
    """
    Base exception for all megarom errors.

    All exceptions in the package inherit from this class, allowing
    callers to catch everything with a single except clause:

        try:
            convert_file("sonic.bin", "sonic.smd")
        except MegaromError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# ROM File Exceptions
# =============================================================================

class RomError(MegaromError):
    """
    Base exception for ROM file handling errors.

    Attributes:
        kind: The ErrorKind of this failure
        filename: Name of the file involved (optional)
        description: The message without the file name
    """

    kind: Optional[ErrorKind] = None
    default_description = "ROM error"

    def __init__(self, filename: Optional[str] = None, description: Optional[str] = None):
        self.filename = filename
        self.description = description or self.default_description
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as 'description: filename' when a file name is known."""
        if self.filename:
            return f"{self.description}: {self.filename}"
        return self.description


class RomReadError(RomError):
    """
    ROM file cannot be opened or read.

    Raised when:
    - File does not exist
    - Permission denied
    - Path is a directory
    """
    kind = ErrorKind.UNREADABLE
    default_description = "Could not open file"


class RomSizeError(RomError):
    """
    ROM file size is outside the accepted bounds.

    Inspection accepts HEADER_SIZE to MAX_FILE_SIZE bytes; conversion
    requires at least HEADER_SIZE + BLOCK_SIZE bytes.
    """
    pass


class RomTooSmallError(RomSizeError):
    """ROM file is below the minimum size for the requested operation."""
    kind = ErrorKind.TOO_SMALL
    default_description = "File is too small"


class RomTooLargeError(RomSizeError):
    """ROM file exceeds MAX_FILE_SIZE."""
    kind = ErrorKind.TOO_LARGE
    default_description = "File is too large"


class InvalidHeaderError(RomError):
    """
    ROM header failed the TMSS signature check.

    The console name field (offset 0x100) must contain "SEGA " or " SEGA".
    This usually means the file is not a Genesis ROM, or that an SMD
    image was not recognised and was read without de-interleaving.
    """
    kind = ErrorKind.INVALID_HEADER
    default_description = "Invalid ROM header"


class RomWriteError(RomError):
    """Output file cannot be created or written."""
    kind = ErrorKind.WRITE_FAILED
    default_description = "Could not write file"
