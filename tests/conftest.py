"""
Shared fixtures: synthetic FB-01 bank dumps built from the fixed layout.
"""

import pytest

from fb2sci.constants import (
    BANK_A_SIGNATURE,
    BANK_B_SIGNATURE,
    BANK_FILE_SIZE,
    PACKET_COUNT,
    PACKET_SIZE,
    PACKET_START,
    PACKET_STRIDE
)


def make_bank(signature, payload=None, filler=0x7F):
    """
    Builds a bank dump with the given signature.

    Args:
        signature: The 7-byte sysex header.
        payload: Function (packet, index) -> byte value for payload bytes.
        filler: Value of every byte outside the payload windows.
    """
    data = bytearray([filler] * BANK_FILE_SIZE)
    data[:len(signature)] = signature
    for packet in range(PACKET_COUNT):
        start = PACKET_START + packet * PACKET_STRIDE
        for i in range(PACKET_SIZE):
            data[start + i] = payload(packet, i) if payload else (packet + i) & 0x0F
    return bytes(data)


@pytest.fixture
def bank_a():
    return make_bank(BANK_A_SIGNATURE, lambda packet, i: i % 2)


@pytest.fixture
def bank_b():
    return make_bank(BANK_B_SIGNATURE)


@pytest.fixture
def bank_files(tmp_path, bank_a, bank_b):
    path_a = tmp_path / "bank_a.syx"
    path_b = tmp_path / "bank_b.syx"
    path_a.write_bytes(bank_a)
    path_b.write_bytes(bank_b)
    return path_a, path_b
