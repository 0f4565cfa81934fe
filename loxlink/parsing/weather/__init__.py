"""
Weather table decoding.

Weather payloads carry one table per weather control, each holding hourly
observations and forecasts.
"""
from loxlink.parsing.weather.decode import (
    LOX_EPOCH_OFFSET,
    WEATHER_ENTRY_SIZE,
    WEATHER_TABLE_HEADER_SIZE,
    decode_weather_payload,
    decode_weather_tables,
    from_device_time,
)
from loxlink.parsing.weather.model import WeatherDecodeResult, WeatherEvent, WeatherEventTable

__all__ = [
    "LOX_EPOCH_OFFSET",
    "WEATHER_ENTRY_SIZE",
    "WEATHER_TABLE_HEADER_SIZE",
    "WeatherDecodeResult",
    "WeatherEvent",
    "WeatherEventTable",
    "decode_weather_payload",
    "decode_weather_tables",
    "from_device_time",
]
