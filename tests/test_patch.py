"""
Patch writer and end-to-end conversion tests.
"""

import pytest

from fb2sci.constants import BANK_B_SIGNATURE, PATCH_FILE_SIZE
from fb2sci.converter import PatchConverter, convert_banks
from fb2sci.errors import InvalidLengthError, InvalidSignatureError, PatchWriteError, UserAbortedError
from fb2sci.patch import make_patch, write_patch
from conftest import make_bank


def test_make_patch_layout():
    data = make_patch(b"\x11" * 3072, b"\x22" * 3072)
    assert len(data) == PATCH_FILE_SIZE == 6148
    assert data[0:2] == b"\x89\x00"
    assert data[2:0xC02] == b"\x11" * 3072
    assert data[0xC02:0xC04] == b"\xAB\xCD"
    assert data[0xC04:] == b"\x22" * 3072


def test_write_patch(tmp_path):
    path = tmp_path / "patch.002"
    assert write_patch(path, b"\x01" * 3072, b"\x02" * 3072) == 6148
    assert path.read_bytes() == make_patch(b"\x01" * 3072, b"\x02" * 3072)


def test_write_patch_failure(tmp_path):
    with pytest.raises(PatchWriteError):
        write_patch(tmp_path / "missing" / "patch.002", b"", b"")


def test_convert_banks(bank_a, bank_b):
    data = convert_banks(bank_a, bank_b)
    assert len(data) == 6148
    assert data[0:2] == b"\x89\x00"
    assert data[0xC02:0xC04] == b"\xAB\xCD"
    # bank A payload is 00 01 repeating
    assert data[2:0xC02] == b"\x10" * 3072


def test_header_does_not_depend_on_content():
    bank_a = make_bank(b"\xF0\x43\x75\x00\x00\x00\x00", lambda packet, i: 0xFF)
    bank_b = make_bank(BANK_B_SIGNATURE, lambda packet, i: 0xAB)
    data = convert_banks(bank_a, bank_b)
    assert data[0:2] == b"\x89\x00"
    assert data[0xC02:0xC04] == b"\xAB\xCD"
    assert data[0xC04:] == b"\xBB" * 3072


def test_converter_writes_patch(tmp_path, bank_files, capsys):
    path_a, path_b = bank_files
    out = tmp_path / "patch.002"
    assert PatchConverter(path_a, path_b, out).convert() == 6148
    assert out.stat().st_size == 6148
    assert "created successfully" in capsys.readouterr().out


def test_converter_rejects_bad_signature(tmp_path, bank_files):
    path_a, path_b = bank_files
    data = bytearray(path_b.read_bytes())
    data[6] = 0x00
    path_b.write_bytes(bytes(data))
    out = tmp_path / "patch.002"
    with pytest.raises(InvalidSignatureError):
        PatchConverter(path_a, path_b, out).convert()
    assert not out.exists()


@pytest.mark.parametrize("bank", ["A", "B"])
@pytest.mark.parametrize("position", range(7))
def test_converter_rejects_any_flipped_signature_byte(tmp_path, bank_files, bank, position):
    path_a, path_b = bank_files
    target = path_a if bank == "A" else path_b
    data = bytearray(target.read_bytes())
    data[position] ^= 0xFF
    target.write_bytes(bytes(data))
    out = tmp_path / "patch.002"
    with pytest.raises(InvalidSignatureError):
        PatchConverter(path_a, path_b, out).convert()
    assert not out.exists()


@pytest.mark.parametrize("size", [6362, 6364])
def test_converter_rejects_bad_length(tmp_path, bank_files, size):
    path_a, path_b = bank_files
    path_a.write_bytes((path_a.read_bytes() + b"\xF7")[:size])
    out = tmp_path / "patch.002"
    with pytest.raises(InvalidLengthError):
        PatchConverter(path_a, path_b, out).convert()
    assert not out.exists()


def test_declined_overwrite_leaves_file(tmp_path, bank_files):
    path_a, path_b = bank_files
    out = tmp_path / "patch.002"
    out.write_bytes(b"old contents")
    asked = []

    def decline(path):
        asked.append(path)
        return False

    with pytest.raises(UserAbortedError):
        PatchConverter(path_a, path_b, out, confirm_overwrite=decline).convert()
    assert asked == [out]
    assert out.read_bytes() == b"old contents"


def test_accepted_overwrite(tmp_path, bank_files):
    path_a, path_b = bank_files
    out = tmp_path / "patch.002"
    out.write_bytes(b"old contents")
    PatchConverter(path_a, path_b, out, confirm_overwrite=lambda path: True).convert()
    assert out.stat().st_size == 6148
