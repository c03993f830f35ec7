# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Nibble-merge transcoder for FB-01 voice data.

The FB-01 sends each voice byte as two bytes, low nibble first. SCI
stores the plain bytes, so every pair (lo, hi) becomes (hi << 4) | lo.
"""

import warnings

import numpy as np

from .constants import EXTRACTED_BANK_SIZE
from .errors import LengthMismatchError, UnexpectedLengthWarning


def denibble(data: bytes) -> bytes:
    """
    Merges each adjacent byte pair of a buffer into one byte.

    Only the low nibble of each source byte is used: the first byte of a
    pair gives the low nibble of the result, the second the high nibble.

    Args:
        data: Nibblized data, an even number of bytes.

    Returns:
        A new buffer of half the length.
    """
    if len(data) % 2:
        raise ValueError(f"Nibblized data must have an even length, got {len(data)} bytes")

    pairs = np.frombuffer(bytes(data), dtype=np.uint8).reshape(-1, 2)
    merged = ((pairs[:, 1] & 0x0F) << 4) | (pairs[:, 0] & 0x0F)
    return merged.astype(np.uint8).tobytes()


def transcode_banks(bank_a: bytes, bank_b: bytes) -> tuple[bytes, bytes]:
    """
    Denibblizes the extracted data of both banks.

    Args:
        bank_a: Extracted bank A payload.
        bank_b: Extracted bank B payload.

    Returns:
        A tuple of the transcoded bank A and bank B.

    Raises:
        LengthMismatchError: The banks are not the same length.
    """
    if len(bank_a) != len(bank_b):
        raise LengthMismatchError(
            f"Bank data have different sizes (bank A = {len(bank_a)}, bank B = {len(bank_b)})"
        )

    if len(bank_a) != EXTRACTED_BANK_SIZE:
        warnings.warn(
            f"Bank data not the expected size ({EXTRACTED_BANK_SIZE}), got {len(bank_a)} bytes",
            UnexpectedLengthWarning,
            stacklevel=2
        )

    return denibble(bank_a), denibble(bank_b)
