"""
Decoder for the 8 byte binary message header.

Layout: ``[reserved] [event type] [info flags] [reserved] [uint32 LE length]``.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from loxlink.errors import InvalidHeaderLength

HEADER_SIZE = 8

# Info flag marking the length as an estimate.
ESTIMATED_FLAG = 0x80


class EventType(IntEnum):
    """Event type codes announced in the header."""
    TEXT = 0
    FILE = 1
    EVENT = 2
    EVENT_TEXT = 3
    DAYTIMER = 4
    OUT_OF_SERVICE = 5
    KEEPALIVE = 6
    WEATHER = 7

    @classmethod
    def from_code(cls, code: int) -> Union["EventType", int]:
        """Return the matching member, or the plain code if it is unknown."""
        try:
            return cls(code)
        except ValueError:
            return int(code)


@dataclass(frozen=True)
class Header:
    """
    A decoded message header.

    Attributes:
        event_type: An ``EventType`` member, or the raw ``int`` code for
            types this library doesn't know.
        length: Size of the payload that follows, in bytes.
        estimated: Whether the controller flagged ``length`` as an estimate.
        empty: Marks the end-of-stream sentinel rather than a real header.
    """
    event_type: Union[EventType, int] = EventType.TEXT
    length: int = 0
    estimated: bool = False
    empty: bool = False

    @property
    def known(self) -> bool:
        return isinstance(self.event_type, EventType)


EMPTY_HEADER = Header(empty=True)


def identify_header(data: bytes) -> Header:
    """
    Decode an 8 byte message header.

    Args:
        data: The raw header bytes.

    Returns:
        The decoded ``Header``.

    Raises:
        InvalidHeaderLength: If ``data`` is not exactly 8 bytes.
    """
    if len(data) != HEADER_SIZE:
        raise InvalidHeaderLength(len(data))

    (length,) = struct.unpack_from("<I", data, 4)
    return Header(
        event_type=EventType.from_code(data[1]),
        length=length,
        estimated=data[2] == ESTIMATED_FLAG,
    )
