"""Resource handlers, one per OCI resource kind."""

from .base_handler import ResourceHandler
from .compute_handler import ComputeInstanceHandler
from .dbaas_handler import DbSystemHandler
from .volume_attachment_handler import (
    IscsiAttachmentHandler,
    ParavirtualAttachmentHandler,
    VolumeAttachmentHandler,
)
from .volume_handler import BlockVolumeHandler

__all__: list[str] = [
    "BlockVolumeHandler",
    "ComputeInstanceHandler",
    "DbSystemHandler",
    "IscsiAttachmentHandler",
    "ParavirtualAttachmentHandler",
    "ResourceHandler",
    "VolumeAttachmentHandler",
]
