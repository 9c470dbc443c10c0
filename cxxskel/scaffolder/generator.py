"""Main scaffolding orchestrator.

Takes a :class:`SkeletonConfig` and writes the skeleton into a target
directory: the generated makefile first, then the placeholder sources.
Nothing is written unless the target directory is empty.
"""

from __future__ import annotations

from pathlib import Path

from cxxskel.config import SkeletonConfig
from cxxskel.utils import list_directory_entries, write_text_file

from .makefile import render_makefile
from .sources import SourceWriter
from .templates import TemplateRenderer


class DirectoryNotEmptyError(RuntimeError):
    """Raised when the target directory already holds files."""

    def __init__(self, directory: Path, entries: list[str]) -> None:
        self.entries = entries
        shown = ", ".join(entries[:5])
        if len(entries) > 5:
            shown += f", ... ({len(entries)} entries)"
        super().__init__(f"directory '{directory}' is not empty: {shown}")


class SkeletonGenerator:
    """Scaffolding orchestrator.

    Given a ``SkeletonConfig``, generates:
    - a makefile wired for the requested libraries and targets
    - ``include/dummy.hh`` and ``src/dummy.cxx``
    - ``src/<python_lib>.cxx`` when a Python module is requested
    - ``src/<exe_prefix>main.cxx`` when an executable prefix is set
    """

    def __init__(self, config: SkeletonConfig) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.sources = SourceWriter(config, self.renderer)

    # -- Public API --------------------------------------------------------

    @staticmethod
    def check_target_empty(target_dir: str | Path) -> None:
        """Raise :class:`DirectoryNotEmptyError` unless *target_dir* is empty.

        Hidden entries count.
        """
        target = Path(target_dir)
        entries = list_directory_entries(target)
        if entries:
            raise DirectoryNotEmptyError(target, entries)

    def planned_files(self) -> list[Path]:
        """Relative paths of every file :meth:`generate` writes, in order."""
        return [Path(self.config.layout.makefile), *self.sources.planned_files()]

    def generate(self, target_dir: str | Path) -> list[Path]:
        """Generate the skeleton inside *target_dir*.

        Args:
            target_dir: Existing, empty directory.

        Returns:
            Paths of the written files, makefile first.

        Raises:
            DirectoryNotEmptyError: If *target_dir* has any entries.
        """
        target = Path(target_dir)
        self.check_target_empty(target)

        # Render everything before the first write.
        makefile = render_makefile(self.config)
        sources = self.sources.render_all()

        written = [write_text_file(target / self.config.layout.makefile, makefile)]
        written.extend(self.sources.write(target, sources))
        return written
