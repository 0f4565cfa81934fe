from importlib.metadata import PackageNotFoundError, version

from loxlink.core.uuid_codec import read_uuid, uuid_to_bytes
from loxlink.errors import (
    InvalidHeaderLength,
    LoxLinkError,
    MalformedWeatherPayload,
    PayloadTooLarge,
    TruncatedRecord,
)
from loxlink.parsing.events import BinaryEvent, DecodeStatus, TextEvent, ValueEvent, decode_binary_event
from loxlink.parsing.header import EMPTY_HEADER, EventType, Header, identify_header
from loxlink.parsing.message import decode_message
from loxlink.parsing.weather import (
    LOX_EPOCH_OFFSET,
    WeatherDecodeResult,
    WeatherEvent,
    WeatherEventTable,
    decode_weather_payload,
    decode_weather_tables,
)
from loxlink.stream import iter_messages, read_header, read_payload

__all__ = [
    "BinaryEvent",
    "DecodeStatus",
    "EMPTY_HEADER",
    "EventType",
    "Header",
    "InvalidHeaderLength",
    "LOX_EPOCH_OFFSET",
    "LoxLinkError",
    "MalformedWeatherPayload",
    "PayloadTooLarge",
    "TextEvent",
    "TruncatedRecord",
    "ValueEvent",
    "WeatherDecodeResult",
    "WeatherEvent",
    "WeatherEventTable",
    "decode_binary_event",
    "decode_message",
    "decode_weather_payload",
    "decode_weather_tables",
    "identify_header",
    "iter_messages",
    "read_header",
    "read_payload",
    "read_uuid",
    "uuid_to_bytes",
]

try:
    __version__ = version("loxlink")
except PackageNotFoundError:
    __version__ = "0.0.0"
