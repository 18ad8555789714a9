"""Jinja2 rendering for inline scaffold templates.

Every generated file is described by a template string kept next to the
function that renders it.  The strings only use plain ``{{ name }}``
interpolation; rendering is pure and never touches the filesystem.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders inline Jinja2 template strings for project scaffolding.

    Undefined variables raise instead of rendering as empty strings, so a
    template that references a parameter its caller did not pass fails loudly.
    """

    def __init__(self) -> None:
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render_string(self, template_string: str, context: dict[str, Any] | None = None) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**(context or {}))


_renderer = TemplateRenderer()


def render(template_string: str, **context: Any) -> str:
    """Render *template_string* with the shared renderer."""
    return _renderer.render_string(template_string, context)
