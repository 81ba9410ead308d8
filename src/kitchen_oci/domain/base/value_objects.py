"""Records returned by provider clients and lifecycle phase enums."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LaunchPhase(str, Enum):
    """Phases of a launch."""

    NOT_STARTED = "not_started"
    BUILDING = "building"
    SUBMITTED = "submitted"
    POLLING = "polling"
    READY = "ready"
    FAILED = "failed"


class TerminatePhase(str, Enum):
    """Phases of a teardown."""

    RUNNING = "running"
    TERMINATE_SUBMITTED = "terminate_submitted"
    POLLING = "polling"
    GONE = "gone"
    FAILED = "failed"


class ClientRecord(BaseModel):
    """Base for records handed back by provider clients."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class ResourceStatus(ClientRecord):
    """Lifecycle status of an instance, DB system, volume or attachment."""

    id: str
    lifecycle_state: str


class VnicAttachment(ClientRecord):
    """Attachment of a VNIC to a compute instance."""

    vnic_id: Optional[str] = None
    instance_id: Optional[str] = None
    lifecycle_state: Optional[str] = None


class Vnic(ClientRecord):
    """Virtual network interface card with its addresses."""

    id: str
    is_primary: bool = False
    public_ip: Optional[str] = None
    private_ip: Optional[str] = None


class DbNode(ClientRecord):
    """Node of a database system."""

    id: str
    vnic_id: Optional[str] = None


class VolumeAttachmentInfo(ClientRecord):
    """Volume attachment, with iSCSI connection details when applicable."""

    id: str
    lifecycle_state: str
    attachment_type: Optional[str] = None
    iqn: Optional[str] = None
    ipv4: Optional[str] = None
    port: Optional[int] = None
