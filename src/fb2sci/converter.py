# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
FB-01 to SCI Converter - Builds an SCI0 FB-01 patch resource from two bank dumps.

The conversion reads both sysex bank files, extracts their 48 instrument
packets each, denibblizes the voice data and writes the patch file:
- $00  : 89 00 resource tag
- $02  : bank A voice data
- $C02 : AB CD separator
- $C04 : bank B voice data
"""

from pathlib import Path

from .errors import UserAbortedError
from .patch import make_patch, write_patch
from .sysex import extract_packets, read_bank, validate_bank
from .transcoder import transcode_banks


def convert_banks(bank_a: bytes, bank_b: bytes) -> bytes:
    """
    Converts two in-memory bank dumps into patch resource bytes.

    Args:
        bank_a: The whole bank A sysex file.
        bank_b: The whole bank B sysex file.

    Returns:
        The patch file contents (6148 bytes).
    """
    validate_bank(bank_a, "A")
    validate_bank(bank_b, "B")

    data_a, data_b = transcode_banks(extract_packets(bank_a), extract_packets(bank_b))
    return make_patch(data_a, data_b)


class PatchConverter:
    """
    Converts two FB-01 bank files into an SCI patch file.
    """

    def __init__(self, bank_a_path, bank_b_path, output_path, confirm_overwrite=None):
        """
        Initializes the converter.

        Args:
            bank_a_path: Path of the bank A sysex dump.
            bank_b_path: Path of the bank B sysex dump.
            output_path: Path of the patch file to create.
            confirm_overwrite: Called with the output path when it already
                exists. A falsy return aborts the conversion. If None, an
                existing file is overwritten.
        """
        self.bank_a_path = Path(bank_a_path)
        self.bank_b_path = Path(bank_b_path)
        self.output_path = Path(output_path)
        self.confirm_overwrite = confirm_overwrite

    def convert(self):
        """
        Runs the conversion.

        Returns:
            The number of bytes written.
        """
        print(f"Reading bank A: {self.bank_a_path}")
        bank_a = read_bank(self.bank_a_path, "A")
        print(f"Reading bank B: {self.bank_b_path}")
        bank_b = read_bank(self.bank_b_path, "B")

        self._check_output()

        data_a, data_b = transcode_banks(extract_packets(bank_a), extract_packets(bank_b))
        print(f"  Denibblized {len(data_a) + len(data_b)} bytes of voice data")

        written = write_patch(self.output_path, data_a, data_b)
        print(f"  Created: {self.output_path} ({written:,} bytes)")
        print("SCI FB-01 Patch created successfully!")
        return written

    def _check_output(self):
        """
        Asks before replacing an existing output file.
        """
        if not self.output_path.exists() or self.confirm_overwrite is None:
            return

        if not self.confirm_overwrite(self.output_path):
            raise UserAbortedError(f"Not overwriting existing file {self.output_path}")
