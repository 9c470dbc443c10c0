"""Shared pytest fixtures for the cxx-skeleton test suite.

Provides reusable fixtures for:
- Empty target directories (optionally as the working directory)
- Deterministic skeleton configurations
- Makefile inspection helpers
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from cxxskel.config import SkeletonConfig


FIXED_TIME = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Empty directory to scaffold into (auto-cleanup)."""
    target = tmp_path / "skeleton"
    target.mkdir()
    yield target


@pytest.fixture
def in_empty_dir(empty_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty directory that is also the current working directory."""
    monkeypatch.chdir(empty_dir)
    yield empty_dir


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., SkeletonConfig]:
    """Factory for configs with a fixed timestamp."""

    def _make(**kwargs: Any) -> SkeletonConfig:
        kwargs.setdefault("generated_at", FIXED_TIME)
        config, _ = SkeletonConfig.from_flags(**kwargs)
        return config

    return _make


@pytest.fixture
def exe_config(make_config) -> SkeletonConfig:
    """Executable-only config with the default prefix and no libraries."""
    return make_config()


@pytest.fixture
def python_config(make_config) -> SkeletonConfig:
    """Python-module-only config."""
    return make_config(python_lib="foo")


@pytest.fixture
def full_config(make_config) -> SkeletonConfig:
    """Every library, a Python module and executables."""
    return make_config(
        with_root=True,
        with_hdf5=True,
        with_ndhist=True,
        python_lib="pyskel",
        exe_prefix="run-",
    )


# ---------------------------------------------------------------------------
# Makefile inspection
# ---------------------------------------------------------------------------

_ASSIGNMENT = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*(?::=|\?=|\+=|=)")
_REFERENCE = re.compile(r"\$\(([A-Z_][A-Z0-9_]*)[:)]")
_MAKE_BUILTINS = {"MAKECMDGOALS"}


def undefined_references(makefile_text: str) -> list[str]:
    """Return ``$(VAR)`` references that appear before any assignment of VAR."""
    defined: set[str] = set()
    missing: list[str] = []
    for line in makefile_text.splitlines():
        if line.lstrip().startswith("#"):
            continue
        for name in _REFERENCE.findall(line):
            if name not in defined and name not in _MAKE_BUILTINS:
                missing.append(name)
        match = _ASSIGNMENT.match(line)
        if match:
            defined.add(match.group(1))
    return missing


def conditional_depth_ok(makefile_text: str) -> bool:
    """True when every ``ifeq/ifneq/ifdef/ifndef`` has a matching ``endif``."""
    depth = 0
    for line in makefile_text.splitlines():
        word = line.strip().split(" ", 1)[0]
        if word in ("ifeq", "ifneq", "ifdef", "ifndef"):
            depth += 1
        elif word == "endif":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def section_between(text: str, start_title: str, end_title: str) -> str:
    """Return the makefile text between two section banners."""
    start = text.index(f"# {start_title}\n")
    end = text.index(f"# {end_title}\n", start)
    return text[start:end]
