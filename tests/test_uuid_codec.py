"""Tests for the identifier codec."""
import re

import pytest

from loxlink.core.uuid_codec import read_uuid, uuid_to_bytes

RAW = bytes.fromhex("00112233445566778899aabbccddeeff")


def test_read_uuid_reorders_first_three_groups():
    assert read_uuid(RAW) == "33221100-5544-7766-8899aabbccddeeff"


def test_read_uuid_is_deterministic():
    assert read_uuid(RAW) == read_uuid(RAW) == read_uuid(bytearray(RAW))


def test_read_uuid_controller_shape():
    text = read_uuid(bytes(range(0xF0, 0x100)))
    assert len(text) == 35
    assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{16}", text)


def test_read_uuid_keeps_tail_in_wire_order():
    text = read_uuid(bytes(8) + bytes(range(1, 9)))
    assert text.split("-")[-1] == "0102030405060708"


def test_read_uuid_lowercase():
    assert read_uuid(b"\xAB" * 16) == "abababab-abab-abab-abababababababab"


@pytest.mark.parametrize("size", [0, 15, 17])
def test_read_uuid_wrong_length(size):
    with pytest.raises(ValueError):
        read_uuid(b"\x00" * size)


def test_uuid_to_bytes_controller_form():
    assert uuid_to_bytes("33221100-5544-7766-8899AABBCCDDEEFF") == RAW


def test_uuid_to_bytes_standard_form():
    assert uuid_to_bytes("33221100-5544-7766-8899-aabbccddeeff") == RAW


@pytest.mark.parametrize("text", ["", "not-a-uuid", "33221100-5544-7766-8899-aabbccddeezz"])
def test_uuid_to_bytes_invalid(text):
    with pytest.raises(ValueError):
        uuid_to_bytes(text)
