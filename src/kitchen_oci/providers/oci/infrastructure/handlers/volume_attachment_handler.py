"""Volume attachment handlers, one per attachment type."""

from abc import abstractmethod
from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig, VolumeConfig
from kitchen_oci.config.schemas.polling_schema import PollingSettings
from kitchen_oci.domain.base.ports.provider_port import BlockStorageClientPort
from kitchen_oci.domain.base.value_objects import VolumeAttachmentInfo
from kitchen_oci.providers.oci.domain.launch_details import (
    LIFECYCLE_STATE_ATTACHED,
    LIFECYCLE_STATE_DETACHED,
    LIFECYCLE_STATE_DETACHING,
    AttachVolumeDetails,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import BuildContext, BuilderStep
from kitchen_oci.providers.oci.infrastructure.builders.volume_steps import ATTACHMENT_STEPS
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator


class VolumeAttachmentHandler(ResourceHandler):
    """Attach a volume to the instance recorded in the state, and detach it."""

    kind = "attachment"
    id_key = "attachment_id"
    attachment_type: str = ""
    ready_states = (LIFECYCLE_STATE_ATTACHED,)
    gone_states = (LIFECYCLE_STATE_DETACHING, LIFECYCLE_STATE_DETACHED)
    failed_states = (LIFECYCLE_STATE_DETACHING, LIFECYCLE_STATE_DETACHED)

    def __init__(
        self,
        config: ProvisioningConfig,
        volume: VolumeConfig,
        volume_id: str,
        block_storage_client: BlockStorageClientPort,
        polling: Optional[PollingSettings] = None,
        generator: Optional[RandomGenerator] = None,
        logger: Any = None,
    ) -> None:
        super().__init__(config, polling, generator, logger=logger)
        self.volume = volume
        self.volume_id = volume_id
        self.block_storage_client = block_storage_client
        self._attachment_id: Optional[str] = None

    @property
    def steps(self) -> list[BuilderStep]:
        return ATTACHMENT_STEPS

    def new_context(self, state: dict[str, Any]) -> BuildContext:
        return self._context(
            state,
            AttachVolumeDetails(type=self.attachment_type),
            volume=self.volume,
            volume_id=self.volume_id,
            server_id=state.get("server_id"),
        )

    def submit(self, request: AttachVolumeDetails) -> str:
        return self.block_storage_client.attach_volume(request)

    def get_lifecycle_state(self, resource_id: str) -> str:
        return self.block_storage_client.get_volume_attachment(resource_id).lifecycle_state

    def record_id(self, state: dict[str, Any], resource_id: str) -> None:
        self._attachment_id = resource_id
        self._state_entry(state, resource_id)

    def resource_id(self, state: dict[str, Any]) -> Optional[str]:
        return self._attachment_id

    def resolve_state(self, state: dict[str, Any], resource_id: str) -> None:
        info = self.block_storage_client.get_volume_attachment(resource_id)
        self._state_entry(state, resource_id).update(self.state_fragment(info))

    def _state_entry(self, state: dict[str, Any], resource_id: str) -> dict[str, Any]:
        """Entry for ``resource_id`` in ``state["volume_attachments"]``, added if missing."""
        attachments = state.setdefault("volume_attachments", [])
        for entry in attachments:
            if entry.get("id") == resource_id:
                return entry
        entry = {
            "id": resource_id,
            "volume_id": self.volume_id,
            "display_name": self.volume.name,
            "type": self.attachment_type,
        }
        attachments.append(entry)
        return entry

    def submit_terminate(self, resource_id: str) -> None:
        self.block_storage_client.detach_volume(resource_id)

    @abstractmethod
    def state_fragment(self, info: VolumeAttachmentInfo) -> dict[str, Any]:
        """Attachment details stored in the state."""

    @classmethod
    def for_existing(
        cls,
        config: ProvisioningConfig,
        entry: dict[str, Any],
        block_storage_client: BlockStorageClientPort,
        **kwargs: Any,
    ) -> "VolumeAttachmentHandler":
        """Handler for an attachment already recorded in the state, used on teardown."""
        volume = VolumeConfig(name=entry.get("display_name") or entry["id"])
        handler = cls(config, volume, entry.get("volume_id", ""), block_storage_client, **kwargs)
        handler._attachment_id = entry["id"]
        return handler


class IscsiAttachmentHandler(VolumeAttachmentHandler):
    """iSCSI attachment; the state keeps what the guest needs to log in to the target."""

    attachment_type = "iscsi"

    def state_fragment(self, info: VolumeAttachmentInfo) -> dict[str, Any]:
        return {
            "id": info.id,
            "volume_id": self.volume_id,
            "display_name": self.volume.name,
            "type": self.attachment_type,
            "iqn_ipv4": info.ipv4,
            "iqn": info.iqn,
            "port": info.port,
        }


class ParavirtualAttachmentHandler(VolumeAttachmentHandler):
    attachment_type = "paravirtualized"

    def state_fragment(self, info: VolumeAttachmentInfo) -> dict[str, Any]:
        return {
            "id": info.id,
            "volume_id": self.volume_id,
            "display_name": self.volume.name,
            "type": self.attachment_type,
        }


ATTACHMENT_HANDLERS: dict[str, type[VolumeAttachmentHandler]] = {
    "iscsi": IscsiAttachmentHandler,
    "paravirtual": ParavirtualAttachmentHandler,
    "paravirtualized": ParavirtualAttachmentHandler,
}


def attachment_handler_for(volume_type: str) -> type[VolumeAttachmentHandler]:
    """Handler class for a configured volume type."""
    return ATTACHMENT_HANDLERS[volume_type]
