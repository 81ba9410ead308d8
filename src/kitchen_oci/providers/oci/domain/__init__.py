"""OCI request models."""
