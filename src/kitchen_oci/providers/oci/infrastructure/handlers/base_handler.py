"""
Base class for OCI resource handlers.

A handler describes one resource kind to the lifecycle controller: how to
build its launch request, which client calls submit, poll and terminate it,
which lifecycle states count as ready or gone, and what to record in the
state once it is ready.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig
from kitchen_oci.config.schemas.polling_schema import PollingSettings
from kitchen_oci.domain.base.ports.template_renderer_port import BootstrapRendererPort
from kitchen_oci.infrastructure.logging.logger import get_logger
from kitchen_oci.providers.oci.domain.launch_details import OCIModel
from kitchen_oci.providers.oci.infrastructure.builders.pipeline import (
    BuildContext,
    BuilderStep,
    LaunchPipeline,
)
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator
from kitchen_oci.providers.oci.utilities.user_data import UserDataEncoder


class ResourceHandler(ABC):
    """Common interface and shared plumbing for every resource kind."""

    kind: str = "resource"
    id_key: str = "server_id"
    ready_states: tuple[str, ...] = ()
    gone_states: tuple[str, ...] = ()
    failed_states: tuple[str, ...] = ()

    def __init__(
        self,
        config: ProvisioningConfig,
        polling: Optional[PollingSettings] = None,
        generator: Optional[RandomGenerator] = None,
        encoder: Optional[UserDataEncoder] = None,
        renderer: Optional[BootstrapRendererPort] = None,
        logger: Any = None,
    ) -> None:
        """
        Initialize the handler for one provisioning attempt.

        Args:
            config: Effective configuration, owned by this attempt
            polling: Wait ceilings for this kind
            generator: Random source for names and credentials
            encoder: User-data encoder
            renderer: Bootstrap script renderer (Windows compute only)
            logger: Logger, defaults to the module logger
        """
        self.config = config
        self.polling = polling or PollingSettings()
        self.generator = generator or RandomGenerator()
        self.encoder = encoder or UserDataEncoder(self.generator)
        self.renderer = renderer
        self._logger = logger or get_logger(__name__)

    @property
    @abstractmethod
    def steps(self) -> list[BuilderStep]:
        """Ordered builder steps for this kind."""

    @abstractmethod
    def new_context(self, state: dict[str, Any]) -> BuildContext:
        """Context holding a fresh request object for this kind."""

    @abstractmethod
    def submit(self, request: OCIModel) -> str:
        """Send the launch request and return the new resource identifier."""

    @abstractmethod
    def get_lifecycle_state(self, resource_id: str) -> str:
        """Current provider lifecycle state of the resource."""

    @abstractmethod
    def resolve_state(self, state: dict[str, Any], resource_id: str) -> None:
        """Record what is known about the ready resource in the state."""

    @abstractmethod
    def submit_terminate(self, resource_id: str) -> None:
        """Send the terminate, delete or detach call."""

    def prepare_launch(self, state: dict[str, Any]) -> None:
        """Hook run before the request is built."""

    def build_request(self, state: dict[str, Any]) -> OCIModel:
        """Run every builder step for this kind and return the request."""
        pipeline = LaunchPipeline(self.steps)
        self._logger.debug("Building %s request with steps: %s", self.kind, ", ".join(pipeline.step_names))
        return pipeline.build(self.new_context(state))

    def record_id(self, state: dict[str, Any], resource_id: str) -> None:
        """Store the identifier as soon as the provider returns it."""
        state[self.id_key] = resource_id

    def resource_id(self, state: dict[str, Any]) -> Optional[str]:
        """Identifier of the resource to terminate."""
        return state.get(self.id_key)

    def _context(self, state: dict[str, Any], request: OCIModel, **kwargs: Any) -> BuildContext:
        return BuildContext(
            config=self.config,
            request=request,
            generator=self.generator,
            encoder=self.encoder,
            state=state,
            renderer=self.renderer,
            **kwargs,
        )
