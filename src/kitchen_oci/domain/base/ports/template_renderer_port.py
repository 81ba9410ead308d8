"""Domain port for rendering bootstrap scripts."""

from abc import ABC, abstractmethod
from typing import Any


class BootstrapRendererPort(ABC):
    """Produces the text of a bootstrap script from a set of parameters."""

    @abstractmethod
    def render(self, params: dict[str, Any]) -> str:
        """Render the script."""
