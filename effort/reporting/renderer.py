"""Jinja2 rendering with effort methods bound per analysis run."""

import logging
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, FileSystemLoader, Template

from effort.core.logging import bind_context, correlation_context
from effort.graph import GraphRewrite

from .registry import MethodRegistry, get_registry

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders report templates with template methods available as globals.

    Methods are bound to the event of each ``render`` call and passed as
    render variables, so the Jinja2 environment itself holds no
    run-specific state. Log lines emitted during a render carry the run id
    as their correlation ID. Any exception a method raises fails the render.
    """

    def __init__(
        self,
        template_dir: Path | str | None = None,
        registry: MethodRegistry | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            template_dir: Directory of named templates for ``render_template``.
            registry: Template method registry. Defaults to the global one.
        """
        loader = FileSystemLoader(str(template_dir)) if template_dir else BaseLoader()
        self._env = Environment(loader=loader, autoescape=True)
        self._registry = registry

    @property
    def registry(self) -> MethodRegistry:
        return self._registry or get_registry()

    def render(self, source: str, event: GraphRewrite, **variables: Any) -> str:
        """Render a template given as a string.

        Args:
            source: Template source.
            event: Analysis run the template reports on.
            **variables: Additional template variables.

        Returns:
            Rendered text.
        """
        return self._render(self._env.from_string(source), event, variables)

    def render_template(self, name: str, event: GraphRewrite, **variables: Any) -> str:
        """Render a named template from ``template_dir``."""
        return self._render(self._env.get_template(name), event, variables)

    def _render(
        self, template: Template, event: GraphRewrite, variables: dict[str, Any]
    ) -> str:
        with (
            correlation_context(event.run_id),
            bind_context(template=template.name or "<string>"),
        ):
            methods = self.registry.bind(event)
            logger.debug("Rendering template with methods %s", list(methods))
            return template.render({**variables, **methods})
