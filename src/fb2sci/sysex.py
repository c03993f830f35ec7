# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
FB-01 sysex bank utility functions.
Provides functions to validate a bank dump and extract its instrument packets.
"""

from pathlib import Path
from typing import Iterator

from .constants import (
    BANK_FILE_SIZE,
    BANK_SIGNATURE_SIZE,
    BANK_SIGNATURES,
    PACKET_COUNT,
    PACKET_SIZE,
    PACKET_START,
    PACKET_STRIDE
)
from .errors import InvalidLengthError, InvalidSignatureError, MissingFileError, TruncatedReadError


def validate_bank(data: bytes, bank: str = "A", name: str | None = None) -> None:
    """
    Checks that a buffer is a complete FB-01 bank dump.

    The signature is checked before the length, so a file of the wrong
    kind is reported as such even when its size is also wrong.

    Args:
        data: The whole bank file.
        bank: Which bank the data must be, "A" or "B".
        name: Name used in error messages (usually the file name).

    Raises:
        InvalidSignatureError: The sysex header is not the one for this bank.
        InvalidLengthError: The buffer is not exactly 6363 bytes.
    """
    try:
        signature = BANK_SIGNATURES[bank.upper()]
    except KeyError:
        raise ValueError(f"Unknown bank \"{bank}\" (expected A or B)") from None

    if name is None:
        name = f"bank {bank.upper()}"

    if bytes(data[:BANK_SIGNATURE_SIZE]) != signature:
        raise InvalidSignatureError(
            f"{name} is not a valid FB-01 sysex bank {bank.upper()} file (missing expected sysex header)."
        )

    if len(data) != BANK_FILE_SIZE:
        raise InvalidLengthError(
            f"{name} is not the expected size ({BANK_FILE_SIZE} bytes). "
            f"Not a valid FB-01 sysex bank file. Actual size: {len(data)}",
            actual=len(data),
            expected=BANK_FILE_SIZE
        )


def read_bank(path, bank: str = "A") -> bytes:
    """
    Reads a bank file into memory and validates it.

    Args:
        path: The bank file path.
        bank: Which bank the file must be, "A" or "B".

    Returns:
        The validated file contents.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingFileError(path)

    data = path.read_bytes()
    validate_bank(data, bank, name=str(path))
    return data


def iter_packets(data: bytes) -> Iterator[bytes]:
    """
    Yields the payload of each instrument packet, in order.

    The checksum byte after each payload and the size header of the
    following packet are skipped.

    Raises:
        TruncatedReadError: A packet window extends past the end of the data.
    """
    for index in range(PACKET_COUNT):
        offset = PACKET_START + index * PACKET_STRIDE
        if offset + PACKET_SIZE > len(data):
            raise TruncatedReadError(offset, PACKET_SIZE, max(len(data) - offset, 0))
        yield bytes(data[offset:offset + PACKET_SIZE])


def extract_packets(data: bytes) -> bytes:
    """
    Extracts the patch payload of a bank dump.

    Args:
        data: A validated bank file.

    Returns:
        The 48 instrument payloads concatenated (6144 bytes).
    """
    return b"".join(iter_packets(data))
