"""Placeholder C++ sources.

Writes just enough code for the generated makefile to have something to
build: a ``dummy`` function with its header, plus an optional Python
extension wrapper and an optional ``main``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cxxskel.config import DUMMY_NAME, GENERATOR_NAME, SkeletonConfig
from cxxskel.utils import write_text_file

from .templates import TemplateRenderer

DUMMY_ERROR_VALUE = 42
MAIN_GREETING = "hello world, dummy says %i"


class SourceWriter:
    """Renders the placeholder sources for one :class:`SkeletonConfig`."""

    def __init__(
        self, config: SkeletonConfig, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Output names ------------------------------------------------------

    @property
    def header_name(self) -> str:
        return f"{DUMMY_NAME}.hh"

    def planned_files(self) -> list[Path]:
        """Relative paths of every file :meth:`write` will create, in order."""
        layout = self.config.layout
        files = [
            Path(layout.include) / self.header_name,
            Path(layout.src) / f"{DUMMY_NAME}.cxx",
        ]
        if self.config.python_lib is not None:
            files.append(Path(layout.src) / f"{self.config.python_lib}.cxx")
        if self.config.exe_prefix is not None:
            files.append(Path(layout.src) / f"{self.config.exe_prefix}main.cxx")
        return files

    # -- Rendering ---------------------------------------------------------

    def _context(self) -> dict[str, Any]:
        return {
            "generator": GENERATOR_NAME,
            "header_name": self.header_name,
            "include_guard": f"{DUMMY_NAME.upper()}_HH",
            "error_value": DUMMY_ERROR_VALUE,
            "module_name": self.config.python_lib,
            "greeting": MAIN_GREETING,
        }

    def render_all(self) -> dict[Path, str]:
        """Return ``{relative path: content}`` for every placeholder source."""
        ctx = self._context()
        templates = ["dummy.hh.j2", "dummy.cxx.j2"]
        if self.config.python_lib is not None:
            templates.append("python_module.cxx.j2")
        if self.config.exe_prefix is not None:
            templates.append("main.cxx.j2")

        return {
            path: self.renderer.render(f"sources/{template}", ctx)
            for path, template in zip(self.planned_files(), templates)
        }

    # -- Writing -----------------------------------------------------------

    def write(
        self, root: str | Path, rendered: dict[Path, str] | None = None
    ) -> list[Path]:
        """Write every placeholder source under *root*.

        *rendered* is the output of an earlier :meth:`render_all` call; the
        sources are rendered here when it is omitted.

        Returns:
            The written paths, in creation order.
        """
        if rendered is None:
            rendered = self.render_all()
        root_path = Path(root)
        return [write_text_file(root_path / rel, content) for rel, content in rendered.items()]
