"""Configuration schemas."""

from .driver_schema import (
    DbaasConfig,
    ProvisionerInfo,
    ProvisioningConfig,
    ShapeConfig,
    UserDataItem,
    VolumeConfig,
)
from .polling_schema import EnginePollingConfig, LoggingConfig, PollingSettings

__all__: list[str] = [
    "DbaasConfig",
    "EnginePollingConfig",
    "LoggingConfig",
    "PollingSettings",
    "ProvisionerInfo",
    "ProvisioningConfig",
    "ShapeConfig",
    "UserDataItem",
    "VolumeConfig",
]
