"""Block volume handler."""

from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig, VolumeConfig
from kitchen_oci.config.schemas.polling_schema import PollingSettings
from kitchen_oci.domain.base.ports.provider_port import BlockStorageClientPort
from kitchen_oci.providers.oci.domain.launch_details import (
    LIFECYCLE_STATE_AVAILABLE,
    LIFECYCLE_STATE_TERMINATED,
    LIFECYCLE_STATE_TERMINATING,
    CreateVolumeDetails,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import BuildContext, BuilderStep
from kitchen_oci.providers.oci.infrastructure.builders.volume_steps import VOLUME_STEPS
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator


class BlockVolumeHandler(ResourceHandler):
    """Create and delete one block volume described by a :class:`VolumeConfig`."""

    kind = "volume"
    id_key = "volume_id"
    ready_states = (LIFECYCLE_STATE_AVAILABLE,)
    gone_states = (LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)
    failed_states = ("FAULTY", LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)

    def __init__(
        self,
        config: ProvisioningConfig,
        volume: VolumeConfig,
        block_storage_client: BlockStorageClientPort,
        polling: Optional[PollingSettings] = None,
        generator: Optional[RandomGenerator] = None,
        logger: Any = None,
    ) -> None:
        super().__init__(config, polling, generator, logger=logger)
        self.volume = volume
        self.block_storage_client = block_storage_client
        self._volume_id: Optional[str] = None

    @property
    def steps(self) -> list[BuilderStep]:
        return VOLUME_STEPS

    def new_context(self, state: dict[str, Any]) -> BuildContext:
        return self._context(state, CreateVolumeDetails(), volume=self.volume)

    def submit(self, request: CreateVolumeDetails) -> str:
        return self.block_storage_client.create_volume(request)

    def get_lifecycle_state(self, resource_id: str) -> str:
        return self.block_storage_client.get_volume(resource_id).lifecycle_state

    def record_id(self, state: dict[str, Any], resource_id: str) -> None:
        self._volume_id = resource_id
        state.setdefault("volumes", []).append(
            {
                "id": resource_id,
                "display_name": self.volume.name,
                "type": self.volume.type,
            }
        )

    def resource_id(self, state: dict[str, Any]) -> Optional[str]:
        return self._volume_id

    def resolve_state(self, state: dict[str, Any], resource_id: str) -> None:
        self._logger.info("Volume %s (%s) is available", self.volume.name, resource_id)

    def submit_terminate(self, resource_id: str) -> None:
        self.block_storage_client.delete_volume(resource_id)

    @classmethod
    def for_existing(
        cls,
        config: ProvisioningConfig,
        entry: dict[str, Any],
        block_storage_client: BlockStorageClientPort,
        **kwargs: Any,
    ) -> "BlockVolumeHandler":
        """Handler for a volume already recorded in the state, used on teardown."""
        volume = VolumeConfig(
            name=entry.get("display_name") or entry["id"],
            type=entry.get("type", "paravirtual"),
        )
        handler = cls(config, volume, block_storage_client, **kwargs)
        handler._volume_id = entry["id"]
        return handler
