"""Jinja2 template rendering for the generated backend files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``backend_scaffold/scaffolder/templates/`` directory and renders them with a
small context built from the project configuration.  Module-syntax helpers
live in the shared ``_module.j2`` macro file so that every template switches
between ``require``/``module.exports`` and ``import``/``export`` the same way.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the packaged ``.j2`` templates.

    Rendering is pure: the same template and context always produce the same
    text, and nothing is written to disk here.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"router.js.j2"``).
            context: Dictionary of variables available inside the template.
                Source templates expect an ``esm`` boolean.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def list_templates(self) -> list[str]:
        """Return a sorted list of renderable template names.

        Macro files (names starting with ``_``) are excluded.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.name
            for p in self.template_dir.glob("*.j2")
            if not p.name.startswith("_")
        )


_default_renderer: TemplateRenderer | None = None


def get_renderer() -> TemplateRenderer:
    """Return the shared renderer for the packaged templates."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer
