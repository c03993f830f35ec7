# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Exceptions raised while converting FB-01 banks to an SCI patch.

Each error also derives from the closest built-in exception, so callers
that only know about ValueError, EOFError or OSError still catch them.
"""


class FB2SCIError(Exception):
    """Base class for all conversion errors."""


class MissingFileError(FB2SCIError, FileNotFoundError):
    """An input bank file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"file {path} not found")


class InvalidSignatureError(FB2SCIError, ValueError):
    """The sysex header does not match the expected bank signature."""


class InvalidLengthError(FB2SCIError, ValueError):
    """A bank file is not exactly the expected size."""

    def __init__(self, message, actual, expected):
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class TruncatedReadError(FB2SCIError, EOFError):
    """An instrument packet window extends past the end of the buffer."""

    def __init__(self, offset, size, available):
        super().__init__(
            f"Unexpected end of data while reading {size} bytes at offset 0x{offset:X} "
            f"({available} bytes available)."
        )
        self.offset = offset
        self.size = size
        self.available = available


class LengthMismatchError(FB2SCIError, ValueError):
    """The two extracted banks have different lengths."""


class PatchWriteError(FB2SCIError, OSError):
    """The patch file could not be written."""


class UserAbortedError(FB2SCIError):
    """The user declined to overwrite an existing output file."""


class UnexpectedLengthWarning(UserWarning):
    """Extracted bank data is not the usual 6144 bytes. Processing continues."""
