# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
FB-01 Constants - Fixed layout of FB-01 sysex bank dumps and SCI patch files

Defines constants used by the validator, extractor, transcoder and emitter.
"""

# FB-01 "send voice bank" sysex dumps
# $00 : F0 43 75 00 00 00 0n ... sysex header, n = 0 for bank A, 1 for bank B
# $4C : first instrument packet payload
BANK_SIGNATURE_SIZE = 7
BANK_A_SIGNATURE = b"\xF0\x43\x75\x00\x00\x00\x00"
BANK_B_SIGNATURE = b"\xF0\x43\x75\x00\x00\x00\x01"

BANK_SIGNATURES = {
    "A": BANK_A_SIGNATURE,
    "B": BANK_B_SIGNATURE
}

BANK_FILE_SIZE = 6363

# Instrument packets
# Each 128-byte payload is followed by its checksum byte and the
# 2-byte size header of the next packet, none of which are kept.
PACKET_START = 0x4C
PACKET_SIZE = 128
PACKET_GAP = 3
PACKET_STRIDE = PACKET_SIZE + PACKET_GAP
PACKET_COUNT = 48

EXTRACTED_BANK_SIZE = PACKET_SIZE * PACKET_COUNT
TRANSCODED_BANK_SIZE = EXTRACTED_BANK_SIZE // 2

# SCI0 FB-01 patch resource
# $00  : 89 00 ... resource type tag
# $02  : bank A voice data (48 x 64 bytes)
# $C02 : AB CD ... bank separator
# $C04 : bank B voice data (48 x 64 bytes)
PATCH_TAG = b"\x89\x00"
BANK_SEPARATOR = b"\xAB\xCD"

BANK_A_OFFSET = len(PATCH_TAG)
SEPARATOR_OFFSET = BANK_A_OFFSET + TRANSCODED_BANK_SIZE
BANK_B_OFFSET = SEPARATOR_OFFSET + len(BANK_SEPARATOR)
PATCH_FILE_SIZE = BANK_B_OFFSET + TRANSCODED_BANK_SIZE
