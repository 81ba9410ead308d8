"""Unit tests for the builder-step pipeline and its helpers."""

from unittest.mock import Mock

import pytest

from kitchen_oci.config.schemas.driver_schema import DbaasConfig
from kitchen_oci.domain.base.exceptions import MissingRequiredConfigError
from kitchen_oci.providers.oci.domain.launch_details import LaunchInstanceDetails
from kitchen_oci.providers.oci.infrastructure.builders import (
    BuildContext,
    BuilderStep,
    FunctionStep,
    LaunchPipeline,
    builder_step,
)
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import (
    fill_default,
    read_public_key,
    require,
)


def make_context(request=None):
    return BuildContext(config=Mock(), request=request or LaunchInstanceDetails(), generator=Mock(), encoder=Mock())


@pytest.mark.unit
class TestLaunchPipeline:
    """Ordered execution of builder steps."""

    def test_steps_run_in_declared_order(self):
        calls = []
        steps = [builder_step(name)(lambda ctx, name=name: calls.append(name)) for name in ("a", "b", "c")]

        LaunchPipeline(steps).build(make_context())

        assert calls == ["a", "b", "c"]

    def test_build_returns_the_mutated_request(self):
        @builder_step("shape")
        def set_shape(context):
            context.request.shape = "VM.Standard.E4.Flex"

        request = LaunchInstanceDetails()
        result = LaunchPipeline([set_shape]).build(make_context(request))

        assert result is request
        assert result.shape == "VM.Standard.E4.Flex"

    def test_step_names(self):
        steps = [builder_step("first")(lambda ctx: None), builder_step("second")(lambda ctx: None)]

        assert LaunchPipeline(steps).step_names == ["first", "second"]

    def test_decorated_function_is_a_builder_step(self):
        step = builder_step("noop")(lambda ctx: None)

        assert isinstance(step, FunctionStep)
        assert isinstance(step, BuilderStep)
        assert step.name == "noop"

    def test_step_error_stops_the_build(self):
        later = Mock()

        @builder_step("fails")
        def fails(context):
            raise MissingRequiredConfigError("image_id", "compute")

        with pytest.raises(MissingRequiredConfigError):
            LaunchPipeline([fails, builder_step("later")(later)]).build(make_context())

        later.assert_not_called()


@pytest.mark.unit
class TestPipelineHelpers:
    """fill_default, require and read_public_key."""

    def test_fill_default_writes_back(self):
        dbaas = DbaasConfig()

        assert fill_default(dbaas, "cpu_core_count", 2) == 2
        assert dbaas.cpu_core_count == 2

    def test_fill_default_keeps_existing_value(self):
        dbaas = DbaasConfig(cpu_core_count=4)
        factory = Mock(return_value=2)

        assert fill_default(dbaas, "cpu_core_count", factory) == 4
        factory.assert_not_called()

    def test_fill_default_evaluates_callable_once(self):
        dbaas = DbaasConfig()
        factory = Mock(return_value="s3cret")

        fill_default(dbaas, "admin_password", factory)
        fill_default(dbaas, "admin_password", factory)

        factory.assert_called_once_with()
        assert dbaas.admin_password == "s3cret"

    @pytest.mark.parametrize("value", [None, ""])
    def test_require_rejects_missing(self, value):
        with pytest.raises(MissingRequiredConfigError) as exc_info:
            require(value, "db_version", "dbaas")

        assert str(exc_info.value) == "dbaas.db_version cannot be nil!"
        assert exc_info.value.field == "dbaas.db_version"

    def test_require_returns_value(self):
        assert require("19.0.0.0", "db_version") == "19.0.0.0"

    def test_read_public_key_first_line(self, ssh_key_file):
        assert read_public_key(str(ssh_key_file)) == "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQC test@kitchen"
