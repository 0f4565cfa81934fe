"""
Reads header/payload pairs from a caller-owned binary stream.

Each header is followed by exactly one payload read of ``Header.length``
bytes before the next header is read.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

from loxlink.config import DecoderSettings, get_settings
from loxlink.errors import InvalidHeaderLength, PayloadTooLarge, TruncatedRecord
from loxlink.parsing.header import EMPTY_HEADER, HEADER_SIZE, Header, identify_header
from loxlink.parsing.message import DecodedMessage, decode_message

_LOGGER = logging.getLogger(__name__)


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)


def read_header(stream: BinaryIO) -> Header:
    """
    Read the next header.

    Returns:
        The decoded header, or ``EMPTY_HEADER`` when the stream has ended.

    Raises:
        InvalidHeaderLength: If the stream ends part way through a header.
    """
    raw = _read_exactly(stream, HEADER_SIZE)
    if not raw:
        return EMPTY_HEADER
    if len(raw) != HEADER_SIZE:
        raise InvalidHeaderLength(len(raw))
    return identify_header(raw)


def read_payload(stream: BinaryIO, header: Header, settings: Optional[DecoderSettings] = None) -> bytes:
    """
    Read the payload announced by ``header``.

    Raises:
        PayloadTooLarge: If the declared length exceeds ``max_payload_length``.
        TruncatedRecord: If the stream ends before the payload is complete.
    """
    settings = settings or get_settings()
    if header.length > settings.max_payload_length:
        raise PayloadTooLarge(header.length, settings.max_payload_length)

    if header.estimated:
        # Length is the controller's estimate; it is still read as a byte count.
        _LOGGER.debug("Reading %d bytes announced by an estimated header", header.length)

    payload = _read_exactly(stream, header.length)
    if len(payload) != header.length:
        raise TruncatedRecord(needed=header.length, remaining=len(payload))
    return payload


def iter_messages(
    stream: BinaryIO,
    settings: Optional[DecoderSettings] = None,
) -> Iterator[tuple[Header, DecodedMessage]]:
    """Yield ``(header, decoded payload)`` pairs until the stream ends."""
    settings = settings or get_settings()
    count = 0
    while True:
        header = read_header(stream)
        if header.empty:
            _LOGGER.debug("Stream ended after %d message(s)", count)
            return
        payload = read_payload(stream, header, settings)
        count += 1
        yield header, decode_message(header, payload, settings)
