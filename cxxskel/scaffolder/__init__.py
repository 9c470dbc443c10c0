"""cxx-skeleton scaffolder -- generates C++ project skeletons.

This module takes a ``SkeletonConfig`` and writes a makefile plus
placeholder sources into an empty directory.

Quick usage::

    from cxxskel.config import SkeletonConfig
    from cxxskel.scaffolder import SkeletonGenerator

    config, warnings = SkeletonConfig.from_flags(with_hdf5=True, exe_prefix="run-")
    written = SkeletonGenerator(config).generate("/tmp/empty-dir")
"""

from cxxskel.scaffolder.generator import DirectoryNotEmptyError, SkeletonGenerator
from cxxskel.scaffolder.makefile import MAKEFILE_SECTIONS, render_makefile
from cxxskel.scaffolder.sources import SourceWriter
from cxxskel.scaffolder.templates import TemplateRenderer

__all__ = [
    "DirectoryNotEmptyError",
    "MAKEFILE_SECTIONS",
    "SkeletonGenerator",
    "SourceWriter",
    "TemplateRenderer",
    "render_makefile",
]
