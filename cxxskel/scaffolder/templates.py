"""Jinja2 template rendering for skeleton generation.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cxxskel/scaffolder/templates/`` directory and renders them with a context
built from the skeleton configuration.  Rendering never touches the file
system beyond reading templates; writing is left to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

BANNER_RULE = "# " + "_" * 63


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for skeleton generation.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined variables are errors rather than empty
    strings, so a typo in a template cannot silently drop a makefile line.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["banner"] = _banner_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"makefile/basic_setup.mk.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _banner_filter(title: str) -> str:
    """Turn a section title into the two-line makefile section banner."""
    return f"{BANNER_RULE}\n# {title}"
