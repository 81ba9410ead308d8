"""Domain ports for the provider SDK clients driven by the engine."""

from abc import ABC, abstractmethod
from typing import Any

from kitchen_oci.domain.base.value_objects import (
    DbNode,
    ResourceStatus,
    Vnic,
    VnicAttachment,
    VolumeAttachmentInfo,
)


class ComputeClientPort(ABC):
    """Compute service: instances and their VNIC attachments."""

    @abstractmethod
    def launch_instance(self, launch_details: Any) -> str:
        """Submit a launch request and return the new instance OCID."""

    @abstractmethod
    def get_instance(self, instance_id: str) -> ResourceStatus:
        """Get the current lifecycle status of an instance."""

    @abstractmethod
    def terminate_instance(self, instance_id: str) -> None:
        """Request termination of an instance."""

    @abstractmethod
    def list_vnic_attachments(self, compartment_id: str, instance_id: str) -> list[VnicAttachment]:
        """List the VNIC attachments of an instance."""


class DatabaseClientPort(ABC):
    """Database service: DB systems and their nodes."""

    @abstractmethod
    def launch_db_system(self, launch_details: Any) -> str:
        """Submit a DB system launch request and return its OCID."""

    @abstractmethod
    def get_db_system(self, db_system_id: str) -> ResourceStatus:
        """Get the current lifecycle status of a DB system."""

    @abstractmethod
    def terminate_db_system(self, db_system_id: str) -> None:
        """Request termination of a DB system."""

    @abstractmethod
    def list_db_nodes(self, compartment_id: str, db_system_id: str) -> list[DbNode]:
        """List the nodes of a DB system."""


class NetworkClientPort(ABC):
    """Virtual network service: VNICs and subnets."""

    @abstractmethod
    def get_vnic(self, vnic_id: str) -> Vnic:
        """Get a VNIC with its public and private addresses."""

    @abstractmethod
    def is_public_ip_allowed(self, subnet_id: str) -> bool:
        """Return False when the subnet prohibits public IPs on VNICs."""


class BlockStorageClientPort(ABC):
    """Block storage service: volumes and volume attachments."""

    @abstractmethod
    def create_volume(self, volume_details: Any) -> str:
        """Create a block volume and return its OCID."""

    @abstractmethod
    def get_volume(self, volume_id: str) -> ResourceStatus:
        """Get the current lifecycle status of a volume."""

    @abstractmethod
    def delete_volume(self, volume_id: str) -> None:
        """Request deletion of a volume."""

    @abstractmethod
    def attach_volume(self, attachment_details: Any) -> str:
        """Attach a volume to an instance and return the attachment OCID."""

    @abstractmethod
    def get_volume_attachment(self, attachment_id: str) -> VolumeAttachmentInfo:
        """Get an attachment, including iSCSI connection details."""

    @abstractmethod
    def detach_volume(self, attachment_id: str) -> None:
        """Request detachment of a volume."""
