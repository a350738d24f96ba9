"""Jinja2 template rendering for scaffold files.

Provides the TemplateRenderer class which renders a scaffold file's
``template_body`` with the file itself as the context.  Undefined
references fail loudly: a template that names a field the file does not
have raises ``TemplateRenderError`` instead of producing partial output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError


# ---------------------------------------------------------------------------
# Template loading
# ---------------------------------------------------------------------------


def load_template(directory: str | Path, name: str) -> str:
    """Read the raw template body *name* from *directory*."""
    return (Path(directory) / name).read_text(encoding="utf-8")


class TemplateRenderError(Exception):
    """Raised when a template references an undefined field or is malformed."""


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders scaffold template bodies with Jinja2.

    The environment is strict about undefined names and keeps Go-friendly
    whitespace: block tags on their own line vanish from the output and the
    trailing newline of a template is preserved.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Raises:
            TemplateRenderError: The template is malformed or references a
                name missing from *context*.
        """
        try:
            template = self.env.from_string(template_string)
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(str(exc)) from exc

    def render_file(self, file: Any) -> str:
        """Render *file*'s ``template_body`` with the file as the context.

        Every model field of *file* is exposed to the template by name.
        """
        return self.render_string(file.template_body, dict(file))

