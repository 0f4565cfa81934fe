"""
Decoder for weather table payloads.

A weather payload is a concatenation of tables. Each table starts with a
24 byte header (uuid, int32 entry count, uint32 last update) followed by
the declared number of 68 byte entries. Timestamps count seconds from the
controller's epoch, 2009-01-01T00:00:00Z.
"""
from __future__ import annotations

import datetime as dt
import logging

from loxlink.core.binary import ByteReader
from loxlink.core.uuid_codec import UUID_SIZE, read_uuid
from loxlink.errors import MalformedWeatherPayload, TruncatedRecord
from loxlink.parsing.weather.model import WeatherDecodeResult, WeatherEvent, WeatherEventTable

_LOGGER = logging.getLogger(__name__)

# 2009-01-01T00:00:00Z in Unix seconds.
LOX_EPOCH_OFFSET = 1230768000
_UNIX_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

WEATHER_TABLE_HEADER_SIZE = UUID_SIZE + 4 + 4
# 5 x int32 + 6 x float64
WEATHER_ENTRY_SIZE = 5 * 4 + 6 * 8


def from_device_time(seconds: int) -> dt.datetime:
    """Convert controller seconds into an aware UTC datetime."""
    return _UNIX_EPOCH + dt.timedelta(seconds=seconds + LOX_EPOCH_OFFSET)


def _read_entry(reader: ByteReader) -> WeatherEvent:
    timestamp = from_device_time(reader.read_int32())
    weather_type = reader.read_int32()
    wind_direction = reader.read_int32()
    solar_radiation = reader.read_int32()
    relative_humidity = reader.read_int32()
    return WeatherEvent(
        timestamp=timestamp,
        weather_type=weather_type,
        wind_direction=wind_direction,
        solar_radiation=solar_radiation,
        relative_humidity=relative_humidity,
        temperature=reader.read_float64(),
        perceived_temperature=reader.read_float64(),
        dew_point=reader.read_float64(),
        precipitation=reader.read_float64(),
        wind_speed=reader.read_float64(),
        barometric_pressure=reader.read_float64(),
    )


def _read_table(reader: ByteReader) -> WeatherEventTable:
    uuid = read_uuid(reader.read_bytes(UUID_SIZE))
    no_of_entries = reader.read_int32()
    last_updated = from_device_time(reader.read_uint32())
    entries = tuple(_read_entry(reader) for _ in range(max(no_of_entries, 0)))
    return WeatherEventTable(
        uuid=uuid,
        no_of_entries=no_of_entries,
        last_updated=last_updated,
        entries=entries,
    )


def decode_weather_payload(data: bytes) -> WeatherDecodeResult:
    """
    Decode a weather payload, keeping the tables read before any failure.

    Args:
        data: The payload bytes that followed a weather header.

    Returns:
        A ``WeatherDecodeResult`` with every fully decoded table and, if a
        field could not be read, the ``MalformedWeatherPayload`` error.
    """
    reader = ByteReader(data)
    tables: list[WeatherEventTable] = []
    while reader.has(WEATHER_TABLE_HEADER_SIZE):
        start = reader.offset
        try:
            tables.append(_read_table(reader))
        except TruncatedRecord as exc:
            error = MalformedWeatherPayload(
                offset=start, tables_decoded=len(tables), reason=str(exc)
            )
            return WeatherDecodeResult(tables=tuple(tables), error=error)

    if reader.remaining:
        _LOGGER.debug("Ignoring %d trailing bytes of weather payload", reader.remaining)
    return WeatherDecodeResult(tables=tuple(tables))


def decode_weather_tables(data: bytes) -> list[WeatherEventTable]:
    """
    Decode a weather payload into its tables.

    A single unreadable field anywhere in the payload discards the whole
    payload, including tables that were decoded before it.
    """
    result = decode_weather_payload(data)
    if result.error is not None:
        _LOGGER.error("Error parsing weather event: %s", result.error)
        return []
    return list(result.tables)
