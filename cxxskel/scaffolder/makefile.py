"""Makefile rendering.

The generated makefile is the concatenation of a fixed, ordered tuple of
render functions.  Each one takes the frozen :class:`SkeletonConfig` and
returns a text fragment, or an empty string when the feature it covers is
turned off.  None of them touch the file system or share state.

Order matters: ``all`` is the first rule (so it is the default goal) and
every make variable is assigned before the line that first reads it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cxxskel.config import GENERATOR_NAME, SkeletonConfig

from .templates import TemplateRenderer

RenderFunction = Callable[[SkeletonConfig], str]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

_renderer = TemplateRenderer()


def _render(template_name: str, config: SkeletonConfig, **extra: Any) -> str:
    context: dict[str, Any] = {
        "layout": config.layout,
        "python_lib": config.python_lib,
        "exe_prefix": config.exe_prefix,
        **extra,
    }
    return _renderer.render(f"makefile/{template_name}", context)


def _banner(title: str, config: SkeletonConfig) -> str:
    return _render("banner.mk.j2", config, title=title)


# ---------------------------------------------------------------------------
# Header and basic setup
# ---------------------------------------------------------------------------


def render_header(config: SkeletonConfig) -> str:
    """Comment block naming the generator, the timestamp and the libraries."""
    return _render(
        "header.mk.j2",
        config,
        generator=GENERATOR_NAME,
        timestamp=config.generated_at.strftime(TIMESTAMP_FORMAT).strip(),
        libraries=config.enabled_libraries,
    )


def render_basic_setup(config: SkeletonConfig) -> str:
    """Directory variables, compiler defaults and the wildcard object list."""
    return _render("basic_setup.mk.j2", config)


# ---------------------------------------------------------------------------
# Top level objects
# ---------------------------------------------------------------------------


def render_top_level_banner(config: SkeletonConfig) -> str:
    return _banner("Add Top Level Objects", config)


def render_python_objects(config: SkeletonConfig) -> str:
    """Extension module object and shared library target."""
    if config.python_lib is None:
        return ""
    return _render("python_objects.mk.j2", config)


def render_exe_objects(config: SkeletonConfig) -> str:
    """One executable per ``$(SRC)/<prefix>*.cxx`` file."""
    if config.exe_prefix is None:
        return ""
    return _render("exe_objects.mk.j2", config)


# ---------------------------------------------------------------------------
# Libraries
# ---------------------------------------------------------------------------


def render_libraries_banner(config: SkeletonConfig) -> str:
    if not config.enabled_libraries:
        return ""
    return _banner("Add Libraries", config)


def render_root_config(config: SkeletonConfig) -> str:
    if not config.with_root:
        return ""
    return _render("root.mk.j2", config)


def render_hdf5_config(config: SkeletonConfig) -> str:
    """HDF5 block.

    This is the only library block that stops the build (through
    ``$(error ...)``) when its helper program prints nothing.
    """
    if not config.with_hdf5:
        return ""
    return _render("hdf5.mk.j2", config)


def render_ndhist_config(config: SkeletonConfig) -> str:
    if not config.with_ndhist:
        return ""
    return _render("ndhist.mk.j2", config)


def render_python_config(config: SkeletonConfig) -> str:
    if config.python_lib is None:
        return ""
    return _render("python.mk.j2", config)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def render_all_rule(config: SkeletonConfig) -> str:
    return _render("all.mk.j2", config)


def render_build_rules_banner(config: SkeletonConfig) -> str:
    return _banner("Build Rules", config)


def render_python_link_rule(config: SkeletonConfig) -> str:
    if config.python_lib is None:
        return ""
    return _render("python_link.mk.j2", config)


def render_exe_link_rule(config: SkeletonConfig) -> str:
    if config.exe_prefix is None:
        return ""
    return _render("exe_link.mk.j2", config)


def render_compile_rule(config: SkeletonConfig) -> str:
    return _render("compile.mk.j2", config)


def render_dependencies(config: SkeletonConfig) -> str:
    """Auto dependency generation plus the ``clean`` and ``rmdep`` rules."""
    return _render("dependencies.mk.j2", config)


MAKEFILE_SECTIONS: tuple[RenderFunction, ...] = (
    render_header,
    render_basic_setup,
    render_top_level_banner,
    render_python_objects,
    render_exe_objects,
    render_libraries_banner,
    render_root_config,
    render_hdf5_config,
    render_ndhist_config,
    render_python_config,
    render_all_rule,
    render_build_rules_banner,
    render_python_link_rule,
    render_exe_link_rule,
    render_compile_rule,
    render_dependencies,
)


def render_makefile(config: SkeletonConfig) -> str:
    """Concatenate every section, in order, into the full makefile text."""
    return "".join(section(config) for section in MAKEFILE_SECTIONS)
