"""Database system handler."""

from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.config.schemas.polling_schema import PollingSettings
from kitchen_oci.domain.base.ports.provider_port import DatabaseClientPort, NetworkClientPort
from kitchen_oci.providers.oci.domain.launch_details import (
    LIFECYCLE_STATE_AVAILABLE,
    LIFECYCLE_STATE_TERMINATED,
    LIFECYCLE_STATE_TERMINATING,
    CreateDatabaseDetails,
    CreateDbHomeDetails,
    LaunchDbSystemDetails,
)
from kitchen_oci.providers.oci.infrastructure.builders.common_steps import COMMON_STEPS
from kitchen_oci.providers.oci.infrastructure.builders.dbaas_steps import DB_SYSTEM_STEPS
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import BuildContext, BuilderStep
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler
from kitchen_oci.providers.oci.infrastructure.network_resolver import (
    DbSystemAddressResolver,
    PublicIpPolicy,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator

# DB systems take hours to provision
DBAAS_POLLING = PollingSettings(max_interval_seconds=900, max_wait_seconds=21_600)


class DbSystemHandler(ResourceHandler):
    """Launch and terminate a database system with one DB home and database."""

    kind = "dbaas"
    ready_states = (LIFECYCLE_STATE_AVAILABLE,)
    gone_states = (LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)
    failed_states = ("FAILED", LIFECYCLE_STATE_TERMINATING, LIFECYCLE_STATE_TERMINATED)

    def __init__(
        self,
        config: ProvisioningConfig,
        database_client: DatabaseClientPort,
        network_client: NetworkClientPort,
        polling: Optional[PollingSettings] = None,
        generator: Optional[RandomGenerator] = None,
        public_ip: Optional[PublicIpPolicy] = None,
        logger: Any = None,
    ) -> None:
        super().__init__(config, polling or DBAAS_POLLING, generator, logger=logger)
        self.database_client = database_client
        self.network_client = network_client
        self.public_ip = public_ip or PublicIpPolicy(network_client, config.subnet_id)

    @property
    def steps(self) -> list[BuilderStep]:
        return COMMON_STEPS + DB_SYSTEM_STEPS

    def new_context(self, state: dict[str, Any]) -> BuildContext:
        return self._context(
            state,
            LaunchDbSystemDetails(),
            public_ip=self.public_ip,
            database_details=CreateDatabaseDetails(),
            db_home_details=CreateDbHomeDetails(),
        )

    def submit(self, request: LaunchDbSystemDetails) -> str:
        return self.database_client.launch_db_system(request)

    def get_lifecycle_state(self, resource_id: str) -> str:
        return self.database_client.get_db_system(resource_id).lifecycle_state

    def resolve_state(self, state: dict[str, Any], resource_id: str) -> None:
        resolver = DbSystemAddressResolver(
            self.database_client,
            self.network_client,
            self.public_ip,
            self.config.compartment_id,
            logger=self._logger,
        )
        state["hostname"] = resolver.resolve(resource_id)

    def submit_terminate(self, resource_id: str) -> None:
        self.database_client.terminate_db_system(resource_id)
