"""Compute instance handler."""

from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.config.schemas.polling_schema import PollingSettings
from kitchen_oci.domain.base.ports.provider_port import ComputeClientPort, NetworkClientPort
from kitchen_oci.domain.base.ports.template_renderer_port import BootstrapRendererPort
from kitchen_oci.providers.oci.domain.launch_details import (
    LIFECYCLE_STATE_RUNNING,
    LIFECYCLE_STATE_TERMINATED,
    LIFECYCLE_STATE_TERMINATING,
    LaunchInstanceDetails,
)
from kitchen_oci.providers.oci.infrastructure.builders.common_steps import COMMON_STEPS
from kitchen_oci.providers.oci.infrastructure.builders.compute_steps import INSTANCE_STEPS
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import BuildContext, BuilderStep
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler
from kitchen_oci.providers.oci.infrastructure.network_resolver import (
    InstanceAddressResolver,
    PublicIpPolicy,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator
from kitchen_oci.providers.oci.utilities.user_data import UserDataEncoder

WINRM_PASSWORD_SPECIAL_CHARS = ["@", "-", "(", ")", "."]


class ComputeInstanceHandler(ResourceHandler):
    """Launch and terminate a compute instance."""

    kind = "compute"
    ready_states = (LIFECYCLE_STATE_RUNNING,)
    gone_states = (LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)
    failed_states = (LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)

    def __init__(
        self,
        config: ProvisioningConfig,
        compute_client: ComputeClientPort,
        network_client: NetworkClientPort,
        polling: Optional[PollingSettings] = None,
        generator: Optional[RandomGenerator] = None,
        encoder: Optional[UserDataEncoder] = None,
        renderer: Optional[BootstrapRendererPort] = None,
        public_ip: Optional[PublicIpPolicy] = None,
        logger: Any = None,
    ) -> None:
        super().__init__(config, polling, generator, encoder, renderer, logger)
        self.compute_client = compute_client
        self.network_client = network_client
        self.public_ip = public_ip or PublicIpPolicy(network_client, config.subnet_id)

    @property
    def steps(self) -> list[BuilderStep]:
        return COMMON_STEPS + INSTANCE_STEPS

    def new_context(self, state: dict[str, Any]) -> BuildContext:
        return self._context(state, LaunchInstanceDetails(), public_ip=self.public_ip)

    def prepare_launch(self, state: dict[str, Any]) -> None:
        """Store WinRM credentials before the bootstrap script is rendered."""
        if not self.config.setup_winrm or state.get("password"):
            return
        if self.config.winrm_password is None:
            self.config.winrm_password = self.generator.random_password(WINRM_PASSWORD_SPECIAL_CHARS)
        state["username"] = self.config.winrm_user
        state["password"] = self.config.winrm_password

    def submit(self, request: LaunchInstanceDetails) -> str:
        return self.compute_client.launch_instance(request)

    def get_lifecycle_state(self, resource_id: str) -> str:
        return self.compute_client.get_instance(resource_id).lifecycle_state

    def resolve_state(self, state: dict[str, Any], resource_id: str) -> None:
        resolver = InstanceAddressResolver(
            self.compute_client,
            self.network_client,
            self.public_ip,
            self.config.compartment_id,
            use_private_ip=self.config.use_private_ip,
            logger=self._logger,
        )
        state["hostname"] = resolver.resolve(resource_id)

    def submit_terminate(self, resource_id: str) -> None:
        self.compute_client.terminate_instance(resource_id)
