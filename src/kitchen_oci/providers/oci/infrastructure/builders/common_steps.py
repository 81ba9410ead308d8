"""Builder steps shared by every instance kind."""

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import BuildContext, builder_step

PROVISIONER_TAGS = ("run_list", "policyfile")


def process_freeform_tags(config: ProvisioningConfig) -> dict[str, str]:
    """User tags, plus provisioner run list and policyfile, plus the kitchen marker."""
    tags = dict(config.freeform_tags)
    for tag in PROVISIONER_TAGS:
        value = getattr(config.provisioner, tag)
        if not value:
            continue
        tags[tag] = value if isinstance(value, str) else ",".join(value)
    tags["kitchen"] = "true"
    return tags


@builder_step("compartment_id")
def compartment_id(context: BuildContext) -> None:
    context.request.compartment_id = context.config.compartment_id


@builder_step("availability_domain")
def availability_domain(context: BuildContext) -> None:
    context.request.availability_domain = context.config.availability_domain


@builder_step("shape")
def shape(context: BuildContext) -> None:
    context.request.shape = context.config.shape


@builder_step("freeform_tags")
def freeform_tags(context: BuildContext) -> None:
    context.request.freeform_tags = process_freeform_tags(context.config)


@builder_step("defined_tags")
def defined_tags(context: BuildContext) -> None:
    if context.config.defined_tags:
        context.request.defined_tags = dict(context.config.defined_tags)


COMMON_STEPS = [compartment_id, availability_domain, shape, freeform_tags, defined_tags]
