"""OCI helpers: random names and credentials, user-data encoding."""
