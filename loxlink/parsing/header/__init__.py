"""
Message header identification.

Every binary message from the controller is preceded by an 8 byte header
announcing the event type and the size of the payload that follows.
"""
from loxlink.parsing.header.decode import (
    EMPTY_HEADER,
    HEADER_SIZE,
    ESTIMATED_FLAG,
    EventType,
    Header,
    identify_header,
)

__all__ = [
    "EMPTY_HEADER",
    "HEADER_SIZE",
    "ESTIMATED_FLAG",
    "EventType",
    "Header",
    "identify_header",
]
