"""Bootstrap script templates."""

from .bootstrap_renderer import JinjaBootstrapRenderer

__all__: list[str] = ["JinjaBootstrapRenderer"]
