"""Polling configuration schema."""

from pydantic import BaseModel, Field


class PollingSettings(BaseModel):
    """Wait ceilings for one resource kind."""

    max_interval_seconds: float = Field(30, gt=0, description="Upper bound between two polls")
    max_wait_seconds: float = Field(1200, gt=0, description="Give up after this many seconds")


class EnginePollingConfig(BaseModel):
    """Polling ceilings per resource kind."""

    compute: PollingSettings = Field(default_factory=PollingSettings)
    dbaas: PollingSettings = Field(
        default_factory=lambda: PollingSettings(max_interval_seconds=900, max_wait_seconds=21_600)
    )
    volume: PollingSettings = Field(default_factory=PollingSettings)
    attachment: PollingSettings = Field(default_factory=PollingSettings)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("console", description="console or json")
