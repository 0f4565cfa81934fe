"""
Value and text event decoding.

Value events carry a numeric state per control identifier; text events carry
a text state together with an icon identifier.
"""
from loxlink.parsing.events.decode import (
    TEXT_EVENT_PREFIX_SIZE,
    VALUE_EVENT_SIZE,
    decode_binary_event,
    decode_text_events,
    decode_value_events,
)
from loxlink.parsing.events.model import BinaryEvent, DecodeStatus, Event, TextEvent, ValueEvent

__all__ = [
    "BinaryEvent",
    "DecodeStatus",
    "Event",
    "TextEvent",
    "ValueEvent",
    "TEXT_EVENT_PREFIX_SIZE",
    "VALUE_EVENT_SIZE",
    "decode_binary_event",
    "decode_text_events",
    "decode_value_events",
]
