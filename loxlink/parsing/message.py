"""
Routes a header/payload pair to the matching payload decoder.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from loxlink.config import DecoderSettings
from loxlink.logging import hexdump
from loxlink.parsing.events import BinaryEvent, decode_binary_event
from loxlink.parsing.header import EventType, Header
from loxlink.parsing.weather import WeatherEventTable, decode_weather_payload, decode_weather_tables

_LOGGER = logging.getLogger(__name__)

DecodedMessage = Union[BinaryEvent, list[WeatherEventTable]]


def decode_message(
    header: Header,
    payload: bytes,
    settings: Optional[DecoderSettings] = None,
) -> DecodedMessage:
    """
    Decode the payload announced by ``header``.

    Args:
        header: The header read immediately before ``payload``.
        payload: The payload bytes.
        settings: Optional decoder settings. When
            ``weather_partial_results`` is set, tables decoded before a
            weather failure are returned instead of an empty list.

    Returns:
        A list of ``WeatherEventTable`` for weather payloads, otherwise a
        ``BinaryEvent``.

    Raises:
        ValueError: If ``header`` is the end-of-stream sentinel.
    """
    if header.empty:
        raise ValueError("Cannot decode a payload for an empty header")

    if len(payload) != header.length:
        _LOGGER.warning(
            "Header announced %d bytes but payload has %d",
            header.length,
            len(payload),
            extra={"details": {"payload": hexdump(payload)}},
        )

    if header.event_type == EventType.WEATHER:
        if settings is not None and settings.weather_partial_results:
            result = decode_weather_payload(payload)
            if result.error is not None:
                _LOGGER.warning("Returning %d weather table(s) before error: %s", len(result.tables), result.error)
            return list(result.tables)
        return decode_weather_tables(payload)

    return decode_binary_event(payload, header.event_type)
