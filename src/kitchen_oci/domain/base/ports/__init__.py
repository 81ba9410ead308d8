"""Domain ports."""

from .logging_port import LoggingPort
from .provider_port import (
    BlockStorageClientPort,
    ComputeClientPort,
    DatabaseClientPort,
    NetworkClientPort,
)
from .template_renderer_port import BootstrapRendererPort

__all__: list[str] = [
    "BlockStorageClientPort",
    "BootstrapRendererPort",
    "ComputeClientPort",
    "DatabaseClientPort",
    "LoggingPort",
    "NetworkClientPort",
]
