from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    weather_partial_results: bool = Field(False, validation_alias="LOXLINK_WEATHER_PARTIAL_RESULTS")
    max_payload_length: int = Field(16 * 1024 * 1024, gt=0, validation_alias="LOXLINK_MAX_PAYLOAD_LENGTH")

    log_level: str = Field("WARNING", validation_alias="LOXLINK_LOG_LEVEL")
    log_ring_size: int = Field(200, gt=0, validation_alias="LOXLINK_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
