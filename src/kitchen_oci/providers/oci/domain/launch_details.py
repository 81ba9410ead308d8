"""OCI launch request models.

Builder steps fill these field by field. ``to_payload`` renders the camelCase
body the OCI API expects.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LIFECYCLE_STATE_RUNNING = "RUNNING"
LIFECYCLE_STATE_AVAILABLE = "AVAILABLE"
LIFECYCLE_STATE_TERMINATING = "TERMINATING"
LIFECYCLE_STATE_TERMINATED = "TERMINATED"
LIFECYCLE_STATE_ATTACHED = "ATTACHED"
LIFECYCLE_STATE_DETACHING = "DETACHING"
LIFECYCLE_STATE_DETACHED = "DETACHED"

LICENSE_MODEL_BRING_YOUR_OWN_LICENSE = "BRING_YOUR_OWN_LICENSE"
DATABASE_EDITION_ENTERPRISE_EDITION = "ENTERPRISE_EDITION"
DB_WORKLOAD_OLTP = "OLTP"


class OCIModel(BaseModel):
    """Base for request models: snake_case attributes, camelCase payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the OCI request body, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CreateVnicDetails(OCIModel):
    assign_public_ip: Optional[bool] = None
    display_name: Optional[str] = None
    hostname_label: Optional[str] = None
    nsg_ids: Optional[list[str]] = None
    subnet_id: Optional[str] = None


class InstanceSourceViaImageDetails(OCIModel):
    source_type: str = "image"
    image_id: Optional[str] = None
    boot_volume_size_in_gbs: Optional[int] = Field(None, alias="bootVolumeSizeInGBs")


class LaunchInstanceShapeConfigDetails(OCIModel):
    ocpus: Optional[float] = None
    memory_in_gbs: Optional[float] = Field(None, alias="memoryInGBs")
    baseline_ocpu_utilization: Optional[str] = None


class TerminatePreemptionAction(OCIModel):
    type: str = "TERMINATE"
    preserve_boot_volume: bool = True


class PreemptibleInstanceConfigDetails(OCIModel):
    preemption_action: TerminatePreemptionAction = Field(default_factory=TerminatePreemptionAction)


class LaunchInstanceDetails(OCIModel):
    """Request body for ``LaunchInstance``."""

    compartment_id: Optional[str] = None
    availability_domain: Optional[str] = None
    shape: Optional[str] = None
    display_name: Optional[str] = None
    create_vnic_details: Optional[CreateVnicDetails] = None
    source_details: Optional[InstanceSourceViaImageDetails] = None
    shape_config: Optional[LaunchInstanceShapeConfigDetails] = None
    preemptible_instance_config: Optional[PreemptibleInstanceConfigDetails] = None
    metadata: Optional[dict[str, str]] = None
    freeform_tags: Optional[dict[str, str]] = None
    defined_tags: Optional[dict[str, dict[str, Any]]] = None


class DbBackupConfig(OCIModel):
    auto_backup_enabled: bool = False


class CreateDatabaseDetails(OCIModel):
    db_name: Optional[str] = None
    pdb_name: Optional[str] = None
    admin_password: Optional[str] = None
    character_set: Optional[str] = None
    ncharacter_set: Optional[str] = None
    db_workload: Optional[str] = None
    db_backup_config: Optional[DbBackupConfig] = None


class CreateDbHomeDetails(OCIModel):
    db_version: Optional[str] = None
    display_name: Optional[str] = None
    database: Optional[CreateDatabaseDetails] = None


class LaunchDbSystemDetails(OCIModel):
    """Request body for ``LaunchDbSystem``."""

    compartment_id: Optional[str] = None
    availability_domain: Optional[str] = None
    shape: Optional[str] = None
    hostname: Optional[str] = None
    display_name: Optional[str] = None
    cluster_name: Optional[str] = None
    cpu_core_count: Optional[int] = None
    database_edition: Optional[str] = None
    db_home: Optional[CreateDbHomeDetails] = None
    subnet_id: Optional[str] = None
    nsg_ids: Optional[list[str]] = None
    ssh_public_keys: Optional[list[str]] = None
    initial_data_storage_size_in_gb: Optional[int] = Field(None, alias="initialDataStorageSizeInGB")
    node_count: Optional[int] = None
    license_model: Optional[str] = None
    freeform_tags: Optional[dict[str, str]] = None
    defined_tags: Optional[dict[str, dict[str, Any]]] = None


class CreateVolumeDetails(OCIModel):
    """Request body for ``CreateVolume``."""

    compartment_id: Optional[str] = None
    availability_domain: Optional[str] = None
    display_name: Optional[str] = None
    size_in_gbs: Optional[int] = Field(None, alias="sizeInGBs")
    vpus_per_gb: Optional[int] = Field(None, alias="vpusPerGB")
    freeform_tags: Optional[dict[str, str]] = None
    defined_tags: Optional[dict[str, dict[str, Any]]] = None


class AttachVolumeDetails(OCIModel):
    """Request body for ``AttachVolume``; ``type`` selects the attachment kind."""

    type: str
    display_name: Optional[str] = None
    volume_id: Optional[str] = None
    instance_id: Optional[str] = None
    device: Optional[str] = None
