from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from loxlink.errors import MalformedWeatherPayload


@dataclass(frozen=True)
class WeatherEvent:
    """A single weather observation or forecast entry."""
    timestamp: datetime
    weather_type: int
    wind_direction: int
    solar_radiation: int
    relative_humidity: int
    temperature: float
    perceived_temperature: float
    dew_point: float
    precipitation: float
    wind_speed: float
    barometric_pressure: float

    def as_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "weather_type": self.weather_type,
            "wind_direction": self.wind_direction,
            "solar_radiation": self.solar_radiation,
            "relative_humidity": self.relative_humidity,
            "temperature": self.temperature,
            "perceived_temperature": self.perceived_temperature,
            "dew_point": self.dew_point,
            "precipitation": self.precipitation,
            "wind_speed": self.wind_speed,
            "barometric_pressure": self.barometric_pressure,
        }


@dataclass(frozen=True)
class WeatherEventTable:
    """
    The weather entries published for one weather control.

    Attributes:
        uuid: Identifier of the weather control.
        no_of_entries: Entry count declared in the table header.
        last_updated: When the controller last refreshed the table.
        entries: The decoded entries in payload order.
    """
    uuid: str
    no_of_entries: int
    last_updated: datetime
    entries: tuple[WeatherEvent, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return {
            "uuid": self.uuid,
            "no_of_entries": self.no_of_entries,
            "last_updated": self.last_updated.isoformat(),
            "entries": [entry.as_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class WeatherDecodeResult:
    """Tables decoded from a weather payload plus the error that stopped decoding, if any."""
    tables: tuple[WeatherEventTable, ...] = field(default_factory=tuple)
    error: Optional[MalformedWeatherPayload] = None

    @property
    def complete(self) -> bool:
        return self.error is None
