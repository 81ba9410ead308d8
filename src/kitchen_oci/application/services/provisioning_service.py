"""Create and destroy one instance, with its block volumes, on behalf of a test run."""

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.config.schemas.polling_schema import EnginePollingConfig
from kitchen_oci.config.settings import get_polling_config
from kitchen_oci.domain.base.ports.logging_port import LoggingPort
from kitchen_oci.domain.base.ports.provider_port import (
    BlockStorageClientPort,
    ComputeClientPort,
    DatabaseClientPort,
    NetworkClientPort,
)
from kitchen_oci.domain.base.ports.template_renderer_port import BootstrapRendererPort
from kitchen_oci.infrastructure.logging.logging_adapter import LoggingAdapter
from kitchen_oci.infrastructure.template.bootstrap_renderer import JinjaBootstrapRenderer
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler
from kitchen_oci.providers.oci.infrastructure.handlers.compute_handler import ComputeInstanceHandler
from kitchen_oci.providers.oci.infrastructure.handlers.dbaas_handler import DbSystemHandler
from kitchen_oci.providers.oci.infrastructure.handlers.volume_attachment_handler import (
    attachment_handler_for,
)
from kitchen_oci.providers.oci.infrastructure.handlers.volume_handler import BlockVolumeHandler
from kitchen_oci.providers.oci.infrastructure.lifecycle_controller import LifecycleController
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator
from kitchen_oci.providers.oci.utilities.user_data import UserDataEncoder


@dataclass
class ProviderClients:
    """Provider SDK clients used by one service."""

    compute: ComputeClientPort
    network: NetworkClientPort
    database: Optional[DatabaseClientPort] = None
    block_storage: Optional[BlockStorageClientPort] = None


class ProvisioningService:
    """Entry point for the create and destroy actions of the driver."""

    def __init__(
        self,
        clients: ProviderClients,
        logger: Optional[LoggingPort] = None,
        renderer: Optional[BootstrapRendererPort] = None,
        generator: Optional[RandomGenerator] = None,
        polling: Optional[EnginePollingConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.clients = clients
        self.logger = logger or LoggingAdapter(__name__)
        self.renderer = renderer or JinjaBootstrapRenderer()
        self.generator = generator or RandomGenerator()
        self.encoder = UserDataEncoder(self.generator)
        self.polling = polling or get_polling_config()
        self._sleep = sleep
        self._clock = clock
        self.effective_config: Optional[ProvisioningConfig] = None

    def create(self, config_mapping: Mapping[str, Any], state: dict[str, Any]) -> dict[str, Any]:
        """
        Launch the configured instance and attach its volumes.

        Args:
            config_mapping: Driver configuration as supplied by the caller
            state: State record, filled in place

        Returns:
            The state record
        """
        config = self._effective(config_mapping)
        self.logger.info("Creating %s in %s", config.instance_type, config.availability_domain)

        self._controller(self._instance_handler(config)).launch(state)

        if config.instance_type == "compute":
            for volume in config.volumes:
                self._create_volume(config, volume, state)
        elif config.volumes:
            self.logger.warning("Ignoring %d volume(s): volumes attach to compute instances only", len(config.volumes))
        return state

    def destroy(self, config_mapping: Mapping[str, Any], state: dict[str, Any]) -> dict[str, Any]:
        """Detach and delete recorded volumes, then terminate the instance."""
        if not state.get("server_id"):
            self.logger.info("Nothing to destroy, no server_id in state")
            return state

        config = self._effective(config_mapping)
        storage = self.clients.block_storage
        for entry in state.get("volume_attachments", []):
            handler = attachment_handler_for(entry.get("type", "paravirtualized")).for_existing(
                config, entry, storage, polling=self.polling.attachment, generator=self.generator
            )
            self._controller(handler).terminate(state)
        for entry in state.get("volumes", []):
            handler = BlockVolumeHandler.for_existing(
                config, entry, storage, polling=self.polling.volume, generator=self.generator
            )
            self._controller(handler).terminate(state)
        state.pop("volume_attachments", None)
        state.pop("volumes", None)

        self._controller(self._instance_handler(config)).terminate(state)
        self.logger.info("Destroyed %s %s", config.instance_type, state["server_id"])
        return state

    def _effective(self, config_mapping: Mapping[str, Any]) -> ProvisioningConfig:
        """Fresh effective config for one create or destroy attempt."""
        self.effective_config = ProvisioningConfig.from_mapping(config_mapping)
        return self.effective_config

    def _create_volume(self, config: ProvisioningConfig, volume: Any, state: dict[str, Any]) -> None:
        storage = self.clients.block_storage
        volume_handler = BlockVolumeHandler(
            config, volume, storage, polling=self.polling.volume, generator=self.generator
        )
        self._controller(volume_handler).launch(state)

        attachment_cls = attachment_handler_for(volume.type)
        attachment = attachment_cls(
            config,
            volume,
            volume_handler.resource_id(state),
            storage,
            polling=self.polling.attachment,
            generator=self.generator,
        )
        self._controller(attachment).launch(state)

    def _instance_handler(self, config: ProvisioningConfig) -> ResourceHandler:
        if config.instance_type == "dbaas":
            return DbSystemHandler(
                config,
                self.clients.database,
                self.clients.network,
                polling=self.polling.dbaas,
                generator=self.generator,
                logger=self.logger,
            )
        return ComputeInstanceHandler(
            config,
            self.clients.compute,
            self.clients.network,
            polling=self.polling.compute,
            generator=self.generator,
            encoder=self.encoder,
            renderer=self.renderer,
            logger=self.logger,
        )

    def _controller(self, handler: ResourceHandler) -> LifecycleController:
        return LifecycleController(handler, logger=self.logger, sleep=self._sleep, clock=self._clock)
