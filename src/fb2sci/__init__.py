# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

__version__ = "1.0.0"

from .converter import PatchConverter, convert_banks
from .patch import make_patch, write_patch
from .sysex import extract_packets, read_bank, validate_bank
from .transcoder import denibble, transcode_banks

__all__ = [
    "PatchConverter",
    "convert_banks",
    "denibble",
    "extract_packets",
    "make_patch",
    "read_bank",
    "transcode_banks",
    "validate_bank",
    "write_patch"
]
