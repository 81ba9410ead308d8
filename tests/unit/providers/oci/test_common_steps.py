"""Unit tests for steps shared by every instance kind."""

import pytest

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.providers.oci.infrastructure.builders.common_steps import (
    COMMON_STEPS,
    process_freeform_tags,
)


@pytest.mark.unit
class TestFreeformTags:
    """User tags merged with provisioner details and the kitchen marker."""

    def test_kitchen_marker_is_always_set(self, compute_config):
        tags = process_freeform_tags(ProvisioningConfig.from_mapping(compute_config))

        assert tags == {"kitchen": "true"}

    def test_user_tags_are_kept(self, compute_config):
        compute_config["freeform_tags"] = {"team": "qa", "kitchen": "false"}

        tags = process_freeform_tags(ProvisioningConfig.from_mapping(compute_config))

        assert tags == {"team": "qa", "kitchen": "true"}

    def test_provisioner_values_joined_with_commas(self, compute_config):
        compute_config["provisioner"] = {
            "run_list": ["recipe[base]", "recipe[web::default]"],
            "policyfile": "Policyfile.rb",
        }

        tags = process_freeform_tags(ProvisioningConfig.from_mapping(compute_config))

        assert tags["run_list"] == "recipe[base],recipe[web::default]"
        assert tags["policyfile"] == "Policyfile.rb"

    def test_provisioner_overwrites_user_key(self, compute_config):
        compute_config["freeform_tags"] = {"run_list": "stale"}
        compute_config["provisioner"] = {"run_list": ["recipe[base]"]}

        tags = process_freeform_tags(ProvisioningConfig.from_mapping(compute_config))

        assert tags["run_list"] == "recipe[base]"
        assert list(tags).count("run_list") == 1

    def test_config_tags_are_not_mutated(self, compute_config):
        compute_config["freeform_tags"] = {"team": "qa"}
        config = ProvisioningConfig.from_mapping(compute_config)

        process_freeform_tags(config)

        assert config.freeform_tags == {"team": "qa"}


@pytest.mark.unit
class TestCommonStepOrder:
    def test_names(self):
        assert [step.name for step in COMMON_STEPS] == [
            "compartment_id",
            "availability_domain",
            "shape",
            "freeform_tags",
            "defined_tags",
        ]
