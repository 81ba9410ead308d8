"""
Launch and teardown state machine shared by every resource kind.

The controller drives a :class:`ResourceHandler` through build, submit, poll
and resolve. It never retries a submit call: a failure is reported once, the
identifier already stored in the state is kept so a later teardown can find
the resource.
"""

import time
from collections.abc import Callable, Iterable
from typing import Any, Optional, Union

from kitchen_oci.domain.base.exceptions import (
    DomainException,
    InfrastructureError,
    PollTimeoutError,
    ResourceNotFoundError,
    SubmissionError,
)
from kitchen_oci.domain.base.value_objects import LaunchPhase, TerminatePhase
from kitchen_oci.infrastructure.logging.logger import get_logger
from kitchen_oci.providers.oci.infrastructure.handlers.base_handler import ResourceHandler

logger = get_logger(__name__)

# Reported by the terminate fetch when the provider no longer knows the resource
NOT_FOUND = "NOT_FOUND"


def wait_until(
    fetch: Callable[[], str],
    targets: Iterable[str],
    max_interval_seconds: float,
    max_wait_seconds: float,
    resource_id: str = "",
    failed: Iterable[str] = (),
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Poll ``fetch`` until it returns one of ``targets``.

    The first poll happens immediately. Between polls the delay doubles from
    one second, capped at ``max_interval_seconds`` and at the time left.

    Args:
        fetch: Returns the current lifecycle state
        targets: States that end the wait successfully
        max_interval_seconds: Upper bound between two polls
        max_wait_seconds: Total time allowed
        resource_id: Used in error messages
        failed: States that end the wait with an error
        sleep: Sleep function
        clock: Monotonic clock

    Returns:
        Number of polls performed

    Raises:
        PollTimeoutError: When ``max_wait_seconds`` elapses first
        InfrastructureError: When a failed state is observed
    """
    targets = list(targets)
    failed = set(failed) - set(targets)
    started = clock()
    polls = 0
    attempt = 0

    while True:
        current = fetch()
        polls += 1
        if current in targets:
            logger.debug("%s reached %s after %d poll(s)", resource_id, current, polls)
            return polls
        if current in failed:
            raise InfrastructureError(
                f"{resource_id} entered {current} while waiting for {'/'.join(targets)}",
                details={"resource_id": resource_id, "lifecycle_state": current},
            )

        elapsed = clock() - started
        remaining = max_wait_seconds - elapsed
        if remaining <= 0:
            raise PollTimeoutError(resource_id, targets, current, max_wait_seconds)

        delay = min(2**attempt, max_interval_seconds, remaining)
        logger.debug("%s is %s, next poll in %ss", resource_id, current, delay)
        sleep(delay)
        attempt += 1


class LifecycleController:
    """Run one launch or one teardown of the resource described by a handler."""

    def __init__(
        self,
        handler: ResourceHandler,
        logger: Any = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.handler = handler
        self._logger = logger or get_logger(__name__)
        self._sleep = sleep
        self._clock = clock
        self.phase: Union[LaunchPhase, TerminatePhase] = LaunchPhase.NOT_STARTED
        self.polls = 0

    def launch(self, state: dict[str, Any]) -> dict[str, Any]:
        """Build, submit and poll the resource, then record it in ``state``."""
        handler = self.handler
        try:
            self.phase = LaunchPhase.BUILDING
            handler.prepare_launch(state)
            request = handler.build_request(state)

            resource_id = self._submit(handler.submit, request)
            self.phase = LaunchPhase.SUBMITTED
            handler.record_id(state, resource_id)
            self._logger.info("Submitted %s %s", handler.kind, resource_id)

            self.phase = LaunchPhase.POLLING
            self.polls = wait_until(
                lambda: handler.get_lifecycle_state(resource_id),
                handler.ready_states,
                handler.polling.max_interval_seconds,
                handler.polling.max_wait_seconds,
                resource_id=resource_id,
                failed=handler.failed_states,
                sleep=self._sleep,
                clock=self._clock,
            )

            handler.resolve_state(state, resource_id)
            self.phase = LaunchPhase.READY
            self._logger.info("%s %s is ready", handler.kind, resource_id)
            return state
        except Exception as e:
            self.phase = LaunchPhase.FAILED
            self._logger.error("Failed to launch %s: %s", handler.kind, e)
            raise

    def terminate(self, state: dict[str, Any]) -> dict[str, Any]:
        """Submit the terminate call and poll until the resource is gone."""
        handler = self.handler
        resource_id = handler.resource_id(state)
        self.phase = TerminatePhase.RUNNING
        if not resource_id:
            self._logger.debug("No %s recorded in state, nothing to terminate", handler.kind)
            self.phase = TerminatePhase.GONE
            return state

        try:
            self._submit(handler.submit_terminate, resource_id)
            self.phase = TerminatePhase.TERMINATE_SUBMITTED
            self._logger.info("Terminating %s %s", handler.kind, resource_id)

            self.phase = TerminatePhase.POLLING
            self.polls = wait_until(
                lambda: self._state_or_not_found(resource_id),
                (*handler.gone_states, NOT_FOUND),
                handler.polling.max_interval_seconds,
                handler.polling.max_wait_seconds,
                resource_id=resource_id,
                sleep=self._sleep,
                clock=self._clock,
            )
            self.phase = TerminatePhase.GONE
            self._logger.info("%s %s is gone", handler.kind, resource_id)
            return state
        except Exception as e:
            self.phase = TerminatePhase.FAILED
            self._logger.error("Failed to terminate %s %s: %s", handler.kind, resource_id, e)
            raise

    def _state_or_not_found(self, resource_id: str) -> str:
        try:
            return self.handler.get_lifecycle_state(resource_id)
        except ResourceNotFoundError:
            return NOT_FOUND

    def _submit(self, call: Callable[[Any], Optional[str]], argument: Any) -> Any:
        try:
            return call(argument)
        except DomainException:
            raise
        except Exception as e:
            raise SubmissionError(
                f"{self.handler.kind} request was rejected: {e}",
                details={"kind": self.handler.kind},
            ) from e
