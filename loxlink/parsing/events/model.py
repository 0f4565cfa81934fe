from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from loxlink.parsing.header import EventType


class DecodeStatus(str, Enum):
    """Outcome of decoding an event payload."""
    DECODED = "decoded"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ValueEvent:
    """A state change carrying a numeric value."""
    uuid: str
    value: float

    @property
    def kind(self) -> str:
        return "value"

    def as_dict(self) -> dict:
        return {"kind": self.kind, "uuid": self.uuid, "value": self.value}


@dataclass(frozen=True)
class TextEvent:
    """
    A state change carrying a text value and an icon identifier.

    ``raw`` holds exactly the text bytes declared on the wire, padding
    excluded. ``text`` decodes them as UTF-8, mapping invalid bytes to
    surrogates so that ``text.encode("utf-8", "surrogateescape") == raw``.
    """
    uuid: str
    uuid_icon: str
    raw: bytes

    @property
    def text(self) -> str:
        return self.raw.decode("utf-8", errors="surrogateescape")

    @property
    def kind(self) -> str:
        return "text"

    def as_dict(self) -> dict:
        return {
            "kind": self.kind,
            "uuid": self.uuid,
            "uuid_icon": self.uuid_icon,
            "text": self.text,
            "raw": self.raw.hex(),
        }


Event = Union[ValueEvent, TextEvent]


@dataclass(frozen=True)
class BinaryEvent:
    """
    A decoded event payload.

    Attributes:
        event_type: The event type from the header, or its raw code.
        events: Decoded events in payload order.
        data: The raw payload for results that weren't decoded, else empty.
        status: Whether the payload was decoded, recognized but not
            supported, or of an unknown type.
    """
    event_type: Union[EventType, int]
    events: tuple[Event, ...] = field(default_factory=tuple)
    data: bytes = b""
    status: DecodeStatus = DecodeStatus.DECODED

    @property
    def supported(self) -> bool:
        return self.status is DecodeStatus.DECODED

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)
