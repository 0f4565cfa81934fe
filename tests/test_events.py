"""Tests for value and text event decoding."""
import struct

import pytest

from loxlink.core.uuid_codec import read_uuid, uuid_to_bytes
from loxlink.parsing.events import (
    BinaryEvent,
    DecodeStatus,
    TextEvent,
    ValueEvent,
    decode_binary_event,
    decode_text_events,
    decode_value_events,
)
from loxlink.parsing.header import EventType

UUID_A = "0f1e2d3c-4b5a-6978-8796a5b4c3d2e1f0"
UUID_B = "11223344-5566-7788-99aabbccddeeff00"


def _value_record(uuid: str, value: float) -> bytes:
    return uuid_to_bytes(uuid) + struct.pack("<d", value)


def _text_record(uuid: str, icon: str, text: bytes, pad: bool = True) -> bytes:
    record = uuid_to_bytes(uuid) + uuid_to_bytes(icon) + struct.pack("<I", len(text)) + text
    if pad:
        record += b"\x00" * ((4 - len(text) % 4) % 4)
    return record


def test_decode_value_events_in_order():
    data = b"".join(_value_record(UUID_A if i % 2 else UUID_B, float(i)) for i in range(4))
    events = decode_value_events(data)
    assert [e.value for e in events] == [0.0, 1.0, 2.0, 3.0]
    assert [e.uuid for e in events] == [UUID_B, UUID_A, UUID_B, UUID_A]


@pytest.mark.parametrize("remainder", [1, 8, 16, 23])
def test_decode_value_events_discards_trailing_bytes(remainder):
    data = _value_record(UUID_A, 21.5) * 3 + b"\xff" * remainder
    events = decode_value_events(data)
    assert len(events) == 3
    assert all(e == ValueEvent(uuid=UUID_A, value=21.5) for e in events)


def test_decode_value_event_special_floats():
    data = _value_record(UUID_A, float("-inf")) + _value_record(UUID_B, -0.25)
    events = decode_value_events(data)
    assert events[0].value == float("-inf")
    assert events[1].value == -0.25


def test_decode_value_events_uses_uuid_codec():
    raw = bytes(range(16))
    events = decode_value_events(raw + struct.pack("<d", 1.0))
    assert events[0].uuid == read_uuid(raw)


def test_decode_text_event_with_padding():
    data = _text_record(UUID_A, UUID_B, b"hello") + _text_record(UUID_B, UUID_A, b"12345678")
    assert len(data) == (36 + 5 + 3) + (36 + 8)
    events = decode_text_events(data)
    assert events == [
        TextEvent(uuid=UUID_A, uuid_icon=UUID_B, raw=b"hello"),
        TextEvent(uuid=UUID_B, uuid_icon=UUID_A, raw=b"12345678"),
    ]


def test_decode_text_event_padding_not_in_text():
    events = decode_text_events(_text_record(UUID_A, UUID_B, b"abcdefghi"))
    assert events[0].text == "abcdefghi"
    assert len(events[0].text) == 9


def test_decode_text_event_empty_text():
    data = _text_record(UUID_A, UUID_B, b"") + _text_record(UUID_A, UUID_B, b"x")
    events = decode_text_events(data)
    assert [e.text for e in events] == ["", "x"]


def test_decode_text_event_utf8():
    text = "Küche 21°C".encode("utf-8")
    events = decode_text_events(_text_record(UUID_A, UUID_B, text))
    assert events[0].text == "Küche 21°C"
    assert events[0].raw == text
    assert len(events[0].raw) == len(text) == 12


def test_decode_text_event_keeps_invalid_utf8_bytes():
    text = b"\xff\xfeab"
    data = _text_record(UUID_A, UUID_B, text) + _text_record(UUID_B, UUID_A, b"next")
    events = decode_text_events(data)
    assert events[0].raw == text
    assert len(events[0].raw) == 4
    assert events[0].text.encode("utf-8", "surrogateescape") == text
    assert events[1].text == "next"


def test_decode_text_event_stops_on_short_prefix():
    data = _text_record(UUID_A, UUID_B, b"ok!!") + b"\x00" * 35
    events = decode_text_events(data)
    assert len(events) == 1


def test_decode_text_event_stops_on_truncated_text():
    data = _text_record(UUID_A, UUID_B, b"first") + _text_record(UUID_B, UUID_A, b"second")[:-4]
    events = decode_text_events(data)
    assert [e.text for e in events] == ["first"]


def test_decode_text_event_missing_final_padding():
    data = _text_record(UUID_A, UUID_B, b"abc", pad=False)
    events = decode_text_events(data)
    assert [e.text for e in events] == ["abc"]


def test_binary_event_value_dispatch():
    result = decode_binary_event(_value_record(UUID_A, 1.0), EventType.EVENT)
    assert isinstance(result, BinaryEvent)
    assert result.status is DecodeStatus.DECODED
    assert result.supported
    assert result.events == (ValueEvent(uuid=UUID_A, value=1.0),)
    assert result.data == b""


def test_binary_event_accepts_raw_code():
    result = decode_binary_event(_text_record(UUID_A, UUID_B, b"on"), 3)
    assert result.event_type is EventType.EVENT_TEXT
    assert result.events[0].kind == "text"


@pytest.mark.parametrize(
    "event_type",
    [EventType.TEXT, EventType.FILE, EventType.DAYTIMER, EventType.OUT_OF_SERVICE, EventType.KEEPALIVE],
)
def test_binary_event_unsupported_types(event_type):
    payload = b"\x01\x02\x03\x04"
    result = decode_binary_event(payload, event_type)
    assert result.status is DecodeStatus.UNSUPPORTED
    assert result.events == ()
    assert result.data == payload
    assert not result.supported


def test_binary_event_unknown_type_keeps_data():
    payload = b"\xde\xad\xbe\xef"
    result = decode_binary_event(payload, 0x42)
    assert result.status is DecodeStatus.UNKNOWN
    assert result.event_type == 0x42
    assert result.events == ()
    assert result.data == payload


@pytest.mark.parametrize("event_type", list(EventType) + [99])
def test_empty_payload_never_fails(event_type):
    result = decode_binary_event(b"", event_type)
    assert len(result) == 0


def test_binary_event_is_iterable():
    data = _value_record(UUID_A, 1.0) + _value_record(UUID_B, 2.0)
    result = decode_binary_event(data, EventType.EVENT)
    assert [e.value for e in result] == [1.0, 2.0]


def test_event_as_dict():
    assert ValueEvent(uuid=UUID_A, value=3.0).as_dict() == {"kind": "value", "uuid": UUID_A, "value": 3.0}
    assert TextEvent(uuid=UUID_A, uuid_icon=UUID_B, raw=b"t").as_dict()["uuid_icon"] == UUID_B
