"""Builder steps for block volumes and volume attachments."""

from kitchen_oci.providers.oci.infrastructure.builders.common_steps import (
    availability_domain,
    compartment_id,
    defined_tags,
    freeform_tags,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import (
    BuildContext,
    builder_step,
    require,
)

ATTACHMENT_DISPLAY_NAMES = {
    "iscsi": "iSCSIAttachment",
    "paravirtualized": "ParavirtualizedAttachment",
}


@builder_step("volume_display_name")
def volume_display_name(context: BuildContext) -> None:
    context.request.display_name = context.volume.name


@builder_step("volume_size")
def volume_size(context: BuildContext) -> None:
    context.request.size_in_gbs = context.volume.size_in_gbs
    context.request.vpus_per_gb = context.volume.vpus_per_gb


@builder_step("attachment_target")
def attachment_target(context: BuildContext) -> None:
    context.request.volume_id = require(context.volume_id, "volume_id", "attachment")
    context.request.instance_id = require(context.server_id, "server_id", "attachment")


@builder_step("attachment_display_name")
def attachment_display_name(context: BuildContext) -> None:
    context.request.display_name = ATTACHMENT_DISPLAY_NAMES.get(context.request.type)


@builder_step("attachment_device")
def attachment_device(context: BuildContext) -> None:
    if context.volume is not None and context.volume.device:
        context.request.device = context.volume.device


VOLUME_STEPS = [
    compartment_id,
    availability_domain,
    freeform_tags,
    defined_tags,
    volume_display_name,
    volume_size,
]

ATTACHMENT_STEPS = [attachment_target, attachment_display_name, attachment_device]
