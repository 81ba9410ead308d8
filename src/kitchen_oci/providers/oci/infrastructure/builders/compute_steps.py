"""Builder steps for compute instances."""

from typing import Optional

from kitchen_oci.config.schemas.driver_schema import UserDataItem
from kitchen_oci.domain.base.exceptions import ConfigurationError
from kitchen_oci.providers.oci.domain.launch_details import (
    CreateVnicDetails,
    InstanceSourceViaImageDetails,
    LaunchInstanceShapeConfigDetails,
    PreemptibleInstanceConfigDetails,
    TerminatePreemptionAction,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import (
    BuildContext,
    builder_step,
    read_public_key,
    require,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator

# hostname_label limit on a VNIC
HOSTNAME_MAX_LENGTH = 63
HOSTNAME_SUFFIX_LENGTH = 6
WINRM_SCRIPT_FILENAME = "setup_winrm.ps1"
DEFAULT_BASELINE_OCPU_UTILIZATION = "BASELINE_1_1"


def compute_hostname(prefix: Optional[str], generator: RandomGenerator) -> str:
    """``<prefix>-<6 random letters>``, with the prefix trimmed to fit the label limit."""
    suffix = generator.random_string(HOSTNAME_SUFFIX_LENGTH)
    if not prefix:
        return suffix
    prefix = prefix[: HOSTNAME_MAX_LENGTH - HOSTNAME_SUFFIX_LENGTH - 1]
    return f"{prefix}-{suffix}"


@builder_step("hostname_display_name")
def hostname_display_name(context: BuildContext) -> None:
    config = context.config
    name = compute_hostname(config.hostname_prefix, context.generator)
    context.request.display_name = name
    context.request.create_vnic_details = CreateVnicDetails(
        assign_public_ip=context.public_ip.allowed,
        display_name=name,
        hostname_label=name,
        nsg_ids=config.nsg_ids,
        subnet_id=config.subnet_id,
    )


@builder_step("instance_source_details")
def instance_source_details(context: BuildContext) -> None:
    config = context.config
    context.request.source_details = InstanceSourceViaImageDetails(
        image_id=require(config.image_id, "image_id", "compute"),
        boot_volume_size_in_gbs=config.boot_volume_size_in_gbs,
    )


@builder_step("inject_bootstrap_user_data")
def inject_bootstrap_user_data(context: BuildContext) -> None:
    """Append the rendered WinRM setup script to the user data, once."""
    config = context.config
    if not config.setup_winrm:
        return
    if context.renderer is None:
        raise ConfigurationError("setup_winrm requires a bootstrap renderer")

    items = config.user_data
    if isinstance(items, str):
        items = [UserDataItem(type="x-shellscript", inline=items, filename="user_data")]
    items = list(items or [])
    if any(item.filename == WINRM_SCRIPT_FILENAME for item in items):
        config.user_data = items
        return

    script = context.renderer.render(
        {
            "username": context.state.get("username", config.winrm_user),
            "password": context.state.get("password") or config.winrm_password,
        }
    )
    items.append(UserDataItem(type="x-shellscript", inline=script, filename=WINRM_SCRIPT_FILENAME))
    config.user_data = items


@builder_step("instance_metadata")
def instance_metadata(context: BuildContext) -> None:
    config = context.config
    metadata = dict(config.custom_metadata)
    metadata["ssh_authorized_keys"] = read_public_key(
        require(config.ssh_keypath, "ssh_keypath", "compute")
    )
    encoded = context.encoder.encode(config.user_data)
    if encoded:
        metadata["user_data"] = encoded
    context.request.metadata = metadata


@builder_step("preemptible_instance_config")
def preemptible_instance_config(context: BuildContext) -> None:
    if not context.config.preemptible_instance:
        return
    context.request.preemptible_instance_config = PreemptibleInstanceConfigDetails(
        preemption_action=TerminatePreemptionAction(type="TERMINATE", preserve_boot_volume=True)
    )


@builder_step("shape_config")
def shape_config(context: BuildContext) -> None:
    shape = context.config.shape_config
    if shape.is_empty():
        return
    context.request.shape_config = LaunchInstanceShapeConfigDetails(
        ocpus=shape.ocpus,
        memory_in_gbs=shape.memory_in_gbs,
        baseline_ocpu_utilization=shape.baseline_ocpu_utilization or DEFAULT_BASELINE_OCPU_UTILIZATION,
    )


INSTANCE_STEPS = [
    hostname_display_name,
    instance_source_details,
    inject_bootstrap_user_data,
    instance_metadata,
    preemptible_instance_config,
    shape_config,
]
