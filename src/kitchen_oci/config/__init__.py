"""Configuration: driver schema and engine settings."""
