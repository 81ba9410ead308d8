"""Domain exceptions raised by the provisioning engine."""

from typing import Any, Optional


class DomainException(Exception):
    """Base class for all provisioning errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.replace("Error", "").upper()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when input data is malformed."""


class ConfigurationError(DomainException):
    """Raised when the driver configuration is incomplete."""


class InfrastructureError(DomainException):
    """Raised when the cloud provider rejects or fails an operation."""


class InvalidUserDataError(ValidationError):
    """A user-data item has neither a path nor inline content."""


class MissingRequiredConfigError(ConfigurationError):
    """A field required by the resource kind is absent."""

    def __init__(self, field: str, kind: Optional[str] = None) -> None:
        location = f"{kind}.{field}" if kind else field
        super().__init__(f"{location} cannot be nil!", details={"field": location})
        self.field = location


class NoAttachmentsFoundError(InfrastructureError):
    """A launched resource has no network interface attachments."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(
            f"Could not find any VNIC attachments for {resource_id}",
            details={"resource_id": resource_id},
        )
        self.resource_id = resource_id


class SubmissionError(InfrastructureError):
    """The provider client rejected a launch, attach or terminate call."""


class PollTimeoutError(InfrastructureError):
    """A resource did not reach its terminal status in time."""

    def __init__(
        self,
        resource_id: str,
        targets: list[str],
        last_state: Optional[str],
        max_wait_seconds: float,
    ) -> None:
        super().__init__(
            f"Timed out after {max_wait_seconds}s waiting for {resource_id} to reach "
            f"{'/'.join(targets)} (last state: {last_state})",
            details={
                "resource_id": resource_id,
                "targets": targets,
                "last_state": last_state,
                "max_wait_seconds": max_wait_seconds,
            },
        )
        self.resource_id = resource_id
        self.last_state = last_state


class ResourceNotFoundError(InfrastructureError):
    """Raised by provider clients when a resource no longer exists."""
