"""
Decoders for value and text event payloads.

Both payloads are a plain concatenation of records. Decoding is best-effort:
it stops quietly at the first record that isn't fully present and returns
everything decoded up to that point.
"""
from __future__ import annotations

import logging
from typing import Callable, Union

from loxlink.core.binary import ByteReader, padding_for
from loxlink.core.uuid_codec import UUID_SIZE, read_uuid
from loxlink.errors import TruncatedRecord
from loxlink.parsing.events.model import BinaryEvent, DecodeStatus, TextEvent, ValueEvent
from loxlink.parsing.header import EventType

_LOGGER = logging.getLogger(__name__)

# uuid + float64
VALUE_EVENT_SIZE = UUID_SIZE + 8
# uuid + icon uuid + uint32 text length
TEXT_EVENT_PREFIX_SIZE = UUID_SIZE * 2 + 4


def decode_value_events(data: bytes) -> list[ValueEvent]:
    """
    Decode a payload of fixed 24 byte value event records.

    Trailing bytes that don't form a complete record are discarded.
    """
    reader = ByteReader(data)
    events: list[ValueEvent] = []
    while reader.has(VALUE_EVENT_SIZE):
        uuid = read_uuid(reader.read_bytes(UUID_SIZE))
        events.append(ValueEvent(uuid=uuid, value=reader.read_float64()))

    if reader.remaining:
        _LOGGER.debug("Discarding %d trailing bytes of value event payload", reader.remaining)
    return events


def decode_text_events(data: bytes) -> list[TextEvent]:
    """
    Decode a payload of variable length text event records.

    Each record is ``uuid, icon uuid, uint32 N, N text bytes`` padded to a
    4 byte boundary. The padding of the final record may be cut off.
    """
    reader = ByteReader(data)
    events: list[TextEvent] = []
    while reader.has(TEXT_EVENT_PREFIX_SIZE):
        start = reader.offset
        uuid = read_uuid(reader.read_bytes(UUID_SIZE))
        uuid_icon = read_uuid(reader.read_bytes(UUID_SIZE))
        text_size = reader.read_uint32()
        try:
            raw_text = reader.read_bytes(text_size)
        except TruncatedRecord as exc:
            _LOGGER.debug("Text event at offset %d is truncated: %s", start, exc)
            return events

        reader.skip(min(padding_for(text_size), reader.remaining))
        events.append(
            TextEvent(
                uuid=uuid,
                uuid_icon=uuid_icon,
                raw=raw_text,
            )
        )

    if reader.remaining:
        _LOGGER.debug("Discarding %d trailing bytes of text event payload", reader.remaining)
    return events


_DECODERS: dict[EventType, Callable[[bytes], list]] = {
    EventType.EVENT: decode_value_events,
    EventType.EVENT_TEXT: decode_text_events,
}


def decode_binary_event(data: bytes, event_type: Union[EventType, int]) -> BinaryEvent:
    """
    Decode an event payload according to its header event type.

    Value and text events are decoded. Other known types (day timers,
    files, ...) yield an empty ``UNSUPPORTED`` result and unknown codes an
    empty ``UNKNOWN`` result; both keep the raw payload in ``data``.

    Args:
        data: The payload bytes that followed the header.
        event_type: The header's event type or raw type code.

    Returns:
        A ``BinaryEvent``. No error is raised for malformed payloads.
    """
    data = bytes(data)
    event_type = EventType.from_code(int(event_type))

    decoder = _DECODERS.get(event_type) if isinstance(event_type, EventType) else None
    if decoder is not None:
        return BinaryEvent(event_type=event_type, events=tuple(decoder(data)))

    if isinstance(event_type, EventType):
        _LOGGER.debug("No decoder for %s, keeping %d raw bytes", event_type.name, len(data))
        return BinaryEvent(event_type=event_type, data=data, status=DecodeStatus.UNSUPPORTED)

    _LOGGER.debug("Unknown event type %d, keeping %d raw bytes", event_type, len(data))
    return BinaryEvent(event_type=event_type, data=data, status=DecodeStatus.UNKNOWN)
