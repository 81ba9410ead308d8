"""Application services."""

from .provisioning_service import ProviderClients, ProvisioningService

__all__: list[str] = ["ProviderClients", "ProvisioningService"]
