"""
Ordered builder-step pipeline that assembles launch requests.

Each resource kind declares a fixed list of steps. A step reads the effective
configuration (and earlier steps' output) and writes fields into the request
object held by the :class:`BuildContext`. Steps that compute a default write it
back into the effective configuration so later steps and later phases of the
same provisioning attempt see the same value.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from kitchen_oci.config.schemas.driver_schema import ProvisioningConfig, VolumeConfig
from kitchen_oci.domain.base.exceptions import MissingRequiredConfigError
from kitchen_oci.domain.base.ports.template_renderer_port import BootstrapRendererPort
from kitchen_oci.infrastructure.logging.logger import get_logger
from kitchen_oci.providers.oci.domain.launch_details import (
    CreateDatabaseDetails,
    CreateDbHomeDetails,
    OCIModel,
)
from kitchen_oci.providers.oci.infrastructure.network_resolver import PublicIpPolicy
from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator
from kitchen_oci.providers.oci.utilities.user_data import UserDataEncoder

logger = get_logger(__name__)


@dataclass
class BuildContext:
    """Everything a builder step may read or write during one build."""

    config: ProvisioningConfig
    request: OCIModel
    generator: RandomGenerator
    encoder: UserDataEncoder
    state: dict[str, Any] = field(default_factory=dict)
    public_ip: Optional[PublicIpPolicy] = None
    renderer: Optional[BootstrapRendererPort] = None
    database_details: Optional[CreateDatabaseDetails] = None
    db_home_details: Optional[CreateDbHomeDetails] = None
    volume: Optional[VolumeConfig] = None
    volume_id: Optional[str] = None
    server_id: Optional[str] = None


@runtime_checkable
class BuilderStep(Protocol):
    """A named unit that fills part of a launch request."""

    name: str

    def apply(self, context: BuildContext) -> None:
        """Mutate the context's request."""


@dataclass(frozen=True)
class FunctionStep:
    """Builder step backed by a plain function."""

    name: str
    func: Callable[[BuildContext], None]

    def apply(self, context: BuildContext) -> None:
        self.func(context)


def builder_step(name: str) -> Callable[[Callable[[BuildContext], None]], FunctionStep]:
    """Decorator turning ``func(context)`` into a named :class:`FunctionStep`."""

    def decorator(func: Callable[[BuildContext], None]) -> FunctionStep:
        return FunctionStep(name=name, func=func)

    return decorator


class LaunchPipeline:
    """Run a fixed sequence of builder steps against a context."""

    def __init__(self, steps: Iterable[BuilderStep]) -> None:
        self.steps: list[BuilderStep] = list(steps)

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]

    def build(self, context: BuildContext) -> OCIModel:
        """
        Apply every step in order and return the populated request.

        :param context: Build context holding a fresh request object.
        :return: The request object, mutated in place.
        """
        for step in self.steps:
            logger.debug("Applying builder step %s", step.name)
            step.apply(context)
        return context.request


def fill_default(model: BaseModel, name: str, default: Any) -> Any:
    """Return ``model.name``, storing ``default`` first if it is unset.

    ``default`` may be a zero-argument callable, evaluated only when needed.
    """
    value = getattr(model, name)
    if value is None:
        value = default() if callable(default) else default
        setattr(model, name, value)
    return value


def require(value: Any, name: str, kind: Optional[str] = None) -> Any:
    """Raise :class:`MissingRequiredConfigError` when ``value`` is unset."""
    if value is None or value == "":
        raise MissingRequiredConfigError(name, kind)
    return value


def read_public_key(path: str) -> str:
    """First line of an SSH public key file, without the line ending."""
    with open(path, encoding="utf-8") as key_file:
        return key_file.readline().rstrip("\r\n")
