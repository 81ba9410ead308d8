"""Unit tests for the driver configuration schema."""

import pytest
from pydantic import ValidationError

from kitchen_oci.config.schemas import ProvisioningConfig, UserDataItem, VolumeConfig


@pytest.mark.unit
class TestProvisioningConfig:
    """Validation of the caller's driver configuration."""

    def test_defaults(self, compute_config):
        config = ProvisioningConfig.from_mapping(compute_config)

        assert config.instance_type == "compute"
        assert config.use_private_ip is False
        assert config.preemptible_instance is False
        assert config.setup_winrm is False
        assert config.winrm_user == "opc"
        assert config.shape_config.is_empty()
        assert config.volumes == []
        assert config.freeform_tags == {}
        assert config.user_data is None

    def test_null_sections_become_empty(self, compute_config):
        compute_config.update(
            {"freeform_tags": None, "defined_tags": None, "dbaas": None, "volumes": None, "provisioner": None}
        )

        config = ProvisioningConfig.from_mapping(compute_config)

        assert config.freeform_tags == {}
        assert config.defined_tags == {}
        assert config.dbaas.db_version is None
        assert config.volumes == []
        assert config.provisioner.run_list == []

    def test_unknown_keys_ignored(self, compute_config):
        compute_config["driver_plugin"] = "oci"

        config = ProvisioningConfig.from_mapping(compute_config)

        assert not hasattr(config, "driver_plugin")

    def test_missing_required_field(self, compute_config):
        del compute_config["subnet_id"]

        with pytest.raises(ValidationError):
            ProvisioningConfig.from_mapping(compute_config)

    def test_unknown_instance_type(self, compute_config):
        compute_config["instance_type"] = "container"

        with pytest.raises(ValidationError):
            ProvisioningConfig.from_mapping(compute_config)

    def test_user_data_forms(self, compute_config):
        compute_config["user_data"] = [{"filename": "init.sh", "inline": "echo hi"}]

        items = ProvisioningConfig.from_mapping(compute_config).user_data

        assert items == [UserDataItem(type="x-shellscript", filename="init.sh", inline="echo hi")]

        compute_config["user_data"] = "echo hi"
        assert ProvisioningConfig.from_mapping(compute_config).user_data == "echo hi"

    def test_from_mapping_copies(self, compute_config):
        compute_config["freeform_tags"] = {"team": "qa"}

        config = ProvisioningConfig.from_mapping(compute_config)
        config.freeform_tags["extra"] = "x"

        assert compute_config["freeform_tags"] == {"team": "qa"}


@pytest.mark.unit
class TestVolumeConfig:
    def test_defaults(self):
        volume = VolumeConfig(name="data")

        assert volume.size_in_gbs == 50
        assert volume.type == "paravirtual"

    def test_invalid_type(self):
        with pytest.raises(ValidationError):
            VolumeConfig(name="data", type="nvme")
