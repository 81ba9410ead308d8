"""OCI infrastructure: builders, handlers, address resolution and lifecycle control."""
