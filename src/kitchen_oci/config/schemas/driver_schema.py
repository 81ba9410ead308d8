"""Driver configuration schema."""

import copy
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserDataItem(BaseModel):
    """One part of a multi-part cloud-init payload."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field("x-shellscript", description="MIME subtype, rendered as text/<type>")
    filename: str = Field(..., description="Attachment filename")
    path: Optional[str] = Field(None, description="File to read the part content from")
    inline: Optional[str] = Field(None, description="Literal part content")


class ShapeConfig(BaseModel):
    """Flexible shape sizing."""

    model_config = ConfigDict(extra="ignore")

    ocpus: Optional[float] = None
    memory_in_gbs: Optional[float] = None
    baseline_ocpu_utilization: Optional[str] = None

    def is_empty(self) -> bool:
        return self.ocpus is None and self.memory_in_gbs is None and self.baseline_ocpu_utilization is None


class DbaasConfig(BaseModel):
    """Database system options. Missing values are filled in during the build."""

    model_config = ConfigDict(extra="ignore")

    db_version: Optional[str] = None
    cpu_core_count: Optional[int] = None
    license_model: Optional[str] = None
    initial_data_storage_size_in_gb: Optional[int] = None
    database_edition: Optional[str] = None
    db_name: Optional[str] = None
    pdb_name: Optional[str] = None
    admin_password: Optional[str] = None
    character_set: Optional[str] = None
    ncharacter_set: Optional[str] = None
    db_workload: Optional[str] = None


class VolumeConfig(BaseModel):
    """A block volume to create and attach to a compute instance."""

    model_config = ConfigDict(extra="ignore")

    name: str
    size_in_gbs: int = 50
    type: Literal["iscsi", "paravirtual"] = "paravirtual"
    vpus_per_gb: Optional[int] = None
    device: Optional[str] = None


class ProvisionerInfo(BaseModel):
    """Values copied from the provisioner into freeform tags."""

    model_config = ConfigDict(extra="ignore")

    run_list: list[str] = Field(default_factory=list)
    policyfile: Optional[Union[str, list[str]]] = None

    @field_validator("run_list", mode="before")
    @classmethod
    def _none_run_list(cls, value: Any) -> Any:
        return [] if value is None else value


class ProvisioningConfig(BaseModel):
    """Effective configuration for one provisioning attempt.

    Built from the caller's mapping with :meth:`from_mapping`, which works on a
    deep copy: defaults filled in by builder steps land here and never in the
    caller's data.
    """

    model_config = ConfigDict(extra="ignore")

    instance_type: Literal["compute", "dbaas"] = "compute"
    compartment_id: str
    availability_domain: str
    shape: str
    subnet_id: str
    hostname_prefix: Optional[str] = None
    image_id: Optional[str] = None
    boot_volume_size_in_gbs: Optional[int] = None
    nsg_ids: Optional[list[str]] = None
    ssh_keypath: Optional[str] = None
    use_private_ip: bool = False
    preemptible_instance: bool = False
    shape_config: ShapeConfig = Field(default_factory=ShapeConfig)
    custom_metadata: dict[str, str] = Field(default_factory=dict)
    freeform_tags: dict[str, str] = Field(default_factory=dict)
    defined_tags: dict[str, dict[str, Any]] = Field(default_factory=dict)
    user_data: Optional[Union[str, list[UserDataItem]]] = None
    setup_winrm: bool = False
    winrm_user: str = "opc"
    winrm_password: Optional[str] = None
    dbaas: DbaasConfig = Field(default_factory=DbaasConfig)
    volumes: list[VolumeConfig] = Field(default_factory=list)
    provisioner: ProvisionerInfo = Field(default_factory=ProvisionerInfo)

    @field_validator(
        "shape_config",
        "dbaas",
        "provisioner",
        "custom_metadata",
        "freeform_tags",
        "defined_tags",
        mode="before",
    )
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("volumes", mode="before")
    @classmethod
    def _none_volumes(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProvisioningConfig":
        """Validate a caller-supplied mapping without touching it."""
        return cls.model_validate(copy.deepcopy(dict(data)))
