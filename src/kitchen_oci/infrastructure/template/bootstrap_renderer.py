"""Jinja2 renderer for the Windows WinRM bootstrap script."""

from typing import Any, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined

from kitchen_oci.domain.base.ports.template_renderer_port import BootstrapRendererPort


class JinjaBootstrapRenderer(BootstrapRendererPort):
    """Render a packaged Jinja2 template into bootstrap script text."""

    def __init__(
        self,
        template_name: str = "setup_winrm.ps1.j2",
        environment: Optional[Environment] = None,
    ) -> None:
        self.template_name = template_name
        self._env = environment or Environment(
            loader=PackageLoader("kitchen_oci", "templates"),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, params: dict[str, Any]) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(**params)
