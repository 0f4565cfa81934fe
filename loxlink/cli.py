import argparse
import json
import math
import sys
from typing import Any, BinaryIO, Optional

from pydantic import ValidationError

from loxlink.config import DecoderSettings, get_settings
from loxlink.errors import LoxLinkError
from loxlink.logging import create_logger, ring_buffer
from loxlink.parsing.events import BinaryEvent
from loxlink.parsing.header import EventType, Header
from loxlink.stream import iter_messages


def _event_type_name(event_type: Any) -> str:
    return event_type.name if isinstance(event_type, EventType) else f"unknown_{int(event_type)}"


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("Infinity" if value > 0 else "-Infinity")
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def message_as_dict(header: Header, decoded: Any) -> dict[str, Any]:
    result: dict[str, Any] = {
        "event_type": _event_type_name(header.event_type),
        "length": header.length,
        "estimated": header.estimated,
    }
    if isinstance(decoded, BinaryEvent):
        result["status"] = decoded.status.value
        result["events"] = [event.as_dict() for event in decoded.events]
        if decoded.data:
            result["data"] = decoded.data.hex()
    else:
        result["tables"] = [table.as_dict() for table in decoded]
    return result


def decode_stream(stream: BinaryIO, out, settings: DecoderSettings) -> int:
    logger = create_logger(ring_size=settings.log_ring_size, level=settings.log_level)
    handler = ring_buffer(logger)
    if handler:
        handler.clear()
    try:
        for header, decoded in iter_messages(stream, settings):
            out.write(json.dumps(_json_safe(message_as_dict(header, decoded)), allow_nan=False) + "\n")
    except LoxLinkError as exc:
        logger.error("Stream desynchronized: %s", exc)
        for event in handler.get_events() if handler else []:
            print(f"{event['level']} {event['logger']}: {event['event']}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Decode a capture of binary controller messages.")
    parser.add_argument("file", help="Capture file of concatenated header/payload messages, or '-' for stdin.")
    parser.add_argument("--partial-weather", action="store_true", help="Keep weather tables decoded before an error.")
    parser.add_argument("--log-level", type=str, default=None, help="Log level for decoder diagnostics.")
    args = parser.parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.partial_weather:
        overrides["weather_partial_results"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        settings = DecoderSettings(**overrides) if overrides else get_settings()
    except ValidationError as exc:
        parser.error(str(exc))

    if args.file == "-":
        return decode_stream(sys.stdin.buffer, sys.stdout, settings)
    with open(args.file, "rb") as fh:
        return decode_stream(fh, sys.stdout, settings)


if __name__ == "__main__":
    sys.exit(main())
