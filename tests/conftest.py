"""Global test configuration and fixtures."""

import random
import sys
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kitchen_oci.domain.base.exceptions import ResourceNotFoundError
from kitchen_oci.domain.base.ports.provider_port import (
    BlockStorageClientPort,
    ComputeClientPort,
    DatabaseClientPort,
    NetworkClientPort,
)
from kitchen_oci.domain.base.value_objects import (
    DbNode,
    ResourceStatus,
    Vnic,
    VnicAttachment,
    VolumeAttachmentInfo,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator

INSTANCE_ID = "ocid1.instance.oc1.phx.test"
DB_SYSTEM_ID = "ocid1.dbsystem.oc1.phx.test"
PUBLIC_IP = "203.0.113.10"
PRIVATE_IP = "10.0.0.10"
SSH_PUBLIC_KEY = "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQC test@kitchen"


class FakeClock:
    """Monotonic clock advanced only by the fake sleep."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def generator() -> RandomGenerator:
    """Seeded generator so names are reproducible."""
    return RandomGenerator(random.Random(1234))


@pytest.fixture
def ssh_key_file(tmp_path: Path) -> Path:
    key_file = tmp_path / "id_rsa.pub"
    key_file.write_text(f"{SSH_PUBLIC_KEY}\nsecond line is ignored\n")
    return key_file


@pytest.fixture
def compute_config(ssh_key_file: Path) -> dict[str, Any]:
    """Minimal compute driver configuration."""
    return {
        "compartment_id": "ocid1.compartment.oc1..test",
        "availability_domain": "abCD:PHX-AD-1",
        "shape": "VM.Standard.E4.Flex",
        "subnet_id": "ocid1.subnet.oc1.phx.test",
        "image_id": "ocid1.image.oc1.phx.test",
        "hostname_prefix": "kitchen",
        "ssh_keypath": str(ssh_key_file),
    }


@pytest.fixture
def dbaas_config(compute_config: dict[str, Any]) -> dict[str, Any]:
    """Minimal database system driver configuration."""
    config = dict(compute_config)
    config.pop("image_id")
    config.update(
        {
            "instance_type": "dbaas",
            "shape": "VM.Standard2.1",
            "hostname_prefix": "kitchen-db",
            "dbaas": {"db_version": "19.0.0.0"},
        }
    )
    return config


@pytest.fixture
def network_client() -> Mock:
    client = Mock(spec=NetworkClientPort)
    client.is_public_ip_allowed.return_value = True
    client.get_vnic.return_value = Vnic(
        id="ocid1.vnic.oc1.phx.primary",
        is_primary=True,
        public_ip=PUBLIC_IP,
        private_ip=PRIVATE_IP,
    )
    return client


@pytest.fixture
def compute_client() -> Mock:
    """Compute client whose instance is RUNNING and terminates on request."""
    client = Mock(spec=ComputeClientPort)
    terminated: set[str] = set()

    def get_instance(instance_id: str) -> ResourceStatus:
        state = "TERMINATED" if instance_id in terminated else "RUNNING"
        return ResourceStatus(id=instance_id, lifecycle_state=state)

    client.launch_instance.return_value = INSTANCE_ID
    client.get_instance.side_effect = get_instance
    client.terminate_instance.side_effect = terminated.add
    client.list_vnic_attachments.return_value = [
        VnicAttachment(vnic_id="ocid1.vnic.oc1.phx.primary", instance_id=INSTANCE_ID)
    ]
    return client


@pytest.fixture
def database_client() -> Mock:
    """Database client whose DB system is AVAILABLE and terminates on request."""
    client = Mock(spec=DatabaseClientPort)
    terminated: set[str] = set()

    def get_db_system(db_system_id: str) -> ResourceStatus:
        if db_system_id in terminated:
            raise ResourceNotFoundError(f"{db_system_id} not found")
        return ResourceStatus(id=db_system_id, lifecycle_state="AVAILABLE")

    client.launch_db_system.return_value = DB_SYSTEM_ID
    client.get_db_system.side_effect = get_db_system
    client.terminate_db_system.side_effect = terminated.add
    client.list_db_nodes.return_value = [DbNode(id="ocid1.dbnode.oc1.phx.test", vnic_id="ocid1.vnic.oc1.phx.db")]
    return client


@pytest.fixture
def block_storage_client() -> Mock:
    """Block storage client that hands out sequential volume and attachment ids."""
    client = Mock(spec=BlockStorageClientPort)
    deleted: set[str] = set()
    detached: set[str] = set()
    volume_ids = iter(f"ocid1.volume.oc1.phx.{n}" for n in range(1, 10))
    attachment_ids = iter(f"ocid1.volumeattachment.oc1.phx.{n}" for n in range(1, 10))

    def get_volume(volume_id: str) -> ResourceStatus:
        state = "TERMINATED" if volume_id in deleted else "AVAILABLE"
        return ResourceStatus(id=volume_id, lifecycle_state=state)

    def get_volume_attachment(attachment_id: str) -> VolumeAttachmentInfo:
        return VolumeAttachmentInfo(
            id=attachment_id,
            lifecycle_state="DETACHED" if attachment_id in detached else "ATTACHED",
            iqn="iqn.2015-12.com.oracleiaas:test",
            ipv4="169.254.2.2",
            port=3260,
        )

    client.create_volume.side_effect = lambda details: next(volume_ids)
    client.get_volume.side_effect = get_volume
    client.delete_volume.side_effect = deleted.add
    client.attach_volume.side_effect = lambda details: next(attachment_ids)
    client.get_volume_attachment.side_effect = get_volume_attachment
    client.detach_volume.side_effect = detached.add
    return client
