"""Resolve the address reported back for a launched resource."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from kitchen_oci.domain.base.exceptions import NoAttachmentsFoundError
from kitchen_oci.domain.base.ports.provider_port import (
    ComputeClientPort,
    DatabaseClientPort,
    NetworkClientPort,
)
from kitchen_oci.domain.base.value_objects import Vnic
from kitchen_oci.infrastructure.logging.logger import get_logger


class PublicIpPolicy:
    """Whether the subnet allows public IPs, queried once per provisioning attempt."""

    def __init__(self, network_client: NetworkClientPort, subnet_id: str) -> None:
        self.network_client = network_client
        self.subnet_id = subnet_id
        self._allowed: Optional[bool] = None

    @property
    def allowed(self) -> bool:
        if self._allowed is None:
            self._allowed = bool(self.network_client.is_public_ip_allowed(self.subnet_id))
        return self._allowed


class AddressResolver(ABC):
    """Pick the hostname to store in the state record."""

    def __init__(
        self,
        network_client: NetworkClientPort,
        policy: PublicIpPolicy,
        compartment_id: str,
        logger: Any = None,
    ) -> None:
        self.network_client = network_client
        self.policy = policy
        self.compartment_id = compartment_id
        self._logger = logger or get_logger(__name__)

    @abstractmethod
    def resolve(self, resource_id: str) -> str:
        """Return the address of the resource."""


class InstanceAddressResolver(AddressResolver):
    """Primary VNIC of a compute instance; honors ``use_private_ip``."""

    def __init__(
        self,
        compute_client: ComputeClientPort,
        network_client: NetworkClientPort,
        policy: PublicIpPolicy,
        compartment_id: str,
        use_private_ip: bool = False,
        logger: Any = None,
    ) -> None:
        super().__init__(network_client, policy, compartment_id, logger)
        self.compute_client = compute_client
        self.use_private_ip = use_private_ip

    def vnics(self, instance_id: str) -> list[Vnic]:
        attachments = self.compute_client.list_vnic_attachments(self.compartment_id, instance_id)
        if not attachments:
            raise NoAttachmentsFoundError(instance_id)
        return [
            self.network_client.get_vnic(att.vnic_id) for att in attachments if att.vnic_id
        ]

    def resolve(self, resource_id: str) -> str:
        vnics = self.vnics(resource_id)
        primary = next((vnic for vnic in vnics if vnic.is_primary), None)
        if primary is None:
            raise NoAttachmentsFoundError(resource_id)

        if self.policy.allowed and not self.use_private_ip:
            address = primary.public_ip
        else:
            address = primary.private_ip
        self._logger.debug("Resolved %s to %s via VNIC %s", resource_id, address, primary.id)
        return address


class DbSystemAddressResolver(AddressResolver):
    """VNIC of the first node of a DB system."""

    def __init__(
        self,
        database_client: DatabaseClientPort,
        network_client: NetworkClientPort,
        policy: PublicIpPolicy,
        compartment_id: str,
        logger: Any = None,
    ) -> None:
        super().__init__(network_client, policy, compartment_id, logger)
        self.database_client = database_client

    def resolve(self, resource_id: str) -> str:
        nodes = self.database_client.list_db_nodes(self.compartment_id, resource_id)
        node = next((n for n in nodes if n.vnic_id), None)
        if node is None:
            raise NoAttachmentsFoundError(resource_id)

        vnic = self.network_client.get_vnic(node.vnic_id)
        address = vnic.public_ip if self.policy.allowed else vnic.private_ip
        self._logger.debug("Resolved DB system %s to %s via node %s", resource_id, address, node.id)
        return address
