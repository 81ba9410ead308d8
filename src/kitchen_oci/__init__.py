"""kitchen-oci - Oracle Cloud Infrastructure driver engine for Test Kitchen style test runs.

Creates one compute instance or database system per test run, optionally with
block volumes attached, waits for it to become usable, and records how to
reach it. Tears it all down again afterwards.

Key Components:
    - application: Create and destroy use cases
    - config: Driver configuration schema and engine settings
    - domain: Exceptions, client records and ports
    - infrastructure: Logging and template rendering
    - providers: OCI launch request builders, resource handlers and lifecycle controller

Note:
    Provider SDK clients are injected through the ports in ``domain.base.ports``;
    the engine holds no credentials of its own.
"""

__version__ = "0.1.0"
