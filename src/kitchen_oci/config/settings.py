"""Engine settings loaded with dynaconf.

Settings come from ``kitchen_oci.toml`` in the working directory, a ``.env``
file, and ``KITCHEN_OCI_`` prefixed environment variables, e.g.::

    KITCHEN_OCI_LOG_LEVEL=DEBUG
    KITCHEN_OCI_POLLING__DBAAS__MAX_WAIT_SECONDS=28800
"""

from collections.abc import Mapping
from typing import Any, Optional

from dynaconf import Dynaconf

from kitchen_oci.config.schemas.polling_schema import EnginePollingConfig, LoggingConfig

settings = Dynaconf(
    envvar_prefix="KITCHEN_OCI",
    settings_files=["kitchen_oci.toml"],
    environments=False,
    load_dotenv=True,
)


def _lower_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


def _section(source: Any, name: str) -> dict[str, Any]:
    raw = source.get(name) or source.get(name.upper()) or {}
    return _lower_keys(raw)


def get_polling_config(source: Optional[Any] = None) -> EnginePollingConfig:
    """Build per-kind polling ceilings from settings, on top of the per-kind defaults."""
    source = settings if source is None else source
    merged = EnginePollingConfig().model_dump()
    for kind, overrides in _section(source, "polling").items():
        if kind in merged and isinstance(overrides, Mapping):
            merged[kind].update(overrides)
    return EnginePollingConfig.model_validate(merged)


def get_logging_config(source: Optional[Any] = None) -> LoggingConfig:
    """Build logging configuration from settings."""
    source = settings if source is None else source
    data: dict[str, Any] = {}
    for key in ("level", "format"):
        value = source.get(f"log_{key}") or source.get(f"LOG_{key.upper()}")
        if value:
            data[key] = value
    return LoggingConfig.model_validate(data)
