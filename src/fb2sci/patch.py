# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
SCI0 FB-01 patch resource writer.
"""

from pathlib import Path

from .constants import BANK_SEPARATOR, PATCH_TAG
from .errors import PatchWriteError


def make_patch(bank_a: bytes, bank_b: bytes) -> bytes:
    """
    Creates a patch resource from two transcoded banks.

    Args:
        bank_a: Transcoded bank A (instruments 0-47).
        bank_b: Transcoded bank B (instruments 48-95).

    Returns:
        The patch file contents as a bytes object.
    """
    return PATCH_TAG + bytes(bank_a) + BANK_SEPARATOR + bytes(bank_b)


def write_patch(path, bank_a: bytes, bank_b: bytes) -> int:
    """
    Writes a patch resource file.

    Returns:
        The number of bytes written.
    """
    data = make_patch(bank_a, bank_b)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise PatchWriteError(f"Could not write {Path(path)}: {e}") from e
    return len(data)
