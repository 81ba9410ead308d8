"""Unit tests for domain exceptions."""

import pytest

from kitchen_oci.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    InfrastructureError,
    InvalidUserDataError,
    MissingRequiredConfigError,
    NoAttachmentsFoundError,
    PollTimeoutError,
    ResourceNotFoundError,
    SubmissionError,
    ValidationError,
)


@pytest.mark.unit
class TestDomainExceptions:
    """Hierarchy, messages and serialization."""

    @pytest.mark.parametrize(
        "error_cls,base",
        [
            (InvalidUserDataError, ValidationError),
            (MissingRequiredConfigError, ConfigurationError),
            (NoAttachmentsFoundError, InfrastructureError),
            (SubmissionError, InfrastructureError),
            (PollTimeoutError, InfrastructureError),
            (ResourceNotFoundError, InfrastructureError),
        ],
    )
    def test_hierarchy(self, error_cls, base):
        assert issubclass(error_cls, base)
        assert issubclass(error_cls, DomainException)

    def test_missing_required_config(self):
        error = MissingRequiredConfigError("compartment_id")

        assert str(error) == "compartment_id cannot be nil!"
        assert error.details == {"field": "compartment_id"}

    def test_to_dict(self):
        error = SubmissionError("rejected", details={"kind": "compute"})

        assert error.to_dict() == {
            "error_type": "SubmissionError",
            "error_code": "SUBMISSION",
            "message": "rejected",
            "details": {"kind": "compute"},
        }

    def test_explicit_error_code(self):
        assert InfrastructureError("boom", error_code="OCI_500").error_code == "OCI_500"

    def test_poll_timeout_message(self):
        error = PollTimeoutError("ocid1.instance", ["RUNNING"], "PROVISIONING", 1200)

        assert "ocid1.instance" in error.message
        assert "RUNNING" in error.message
        assert error.details["last_state"] == "PROVISIONING"
