"""Command-line front end for cxx-skeleton.

Usage::

    cxx-skeleton                  # executables named test-*, no libraries
    cxx-skeleton -r -e run-       # ROOT, executables named run-*
    cxx-skeleton -n -p mymodule   # HDF5 + ndhist, Python module mymodule

Exit status is 0 on success and 1 for help, bad flags, conflicting values or
a non-empty working directory.  Nothing is written unless every check passes.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cxxskel.config import (
    DEFAULT_EXE_PREFIX,
    DUMMY_NAME,
    ConfigurationError,
    SkeletonConfig,
)
from cxxskel.scaffolder import DirectoryNotEmptyError, SkeletonGenerator
from cxxskel.utils import print_error, print_success, print_summary_table, print_warning


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="cxx-skeleton",
        description=(
            "Generate a makefile and placeholder C++ sources in the current "
            "(empty) directory."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog=(
            "Examples:\n"
            "  cxx-skeleton\n"
            "  cxx-skeleton -r -d -e run-\n"
            "  cxx-skeleton -n -p mymodule\n"
            "\n"
            f"With neither -p nor -e, executables use the prefix '{DEFAULT_EXE_PREFIX}'.\n"
            f"NAME must not be '{DUMMY_NAME}' or start with PREFIX, and '{DUMMY_NAME}'\n"
            "must not start with PREFIX, since src/PREFIX*.cxx are all linked as\n"
            "executables.\n"
        ),
    )
    parser.add_argument("-h", dest="help", action="store_true", help="show this help and exit")
    parser.add_argument("-r", dest="with_root", action="store_true", help="use ROOT")
    parser.add_argument("-d", dest="with_hdf5", action="store_true", help="use HDF5")
    parser.add_argument(
        "-n", dest="with_ndhist", action="store_true", help="use ndhist (turns on -d)"
    )
    parser.add_argument(
        "-p",
        dest="python_lib",
        metavar="NAME",
        help="build a Python extension module NAME (a C identifier)",
    )
    parser.add_argument(
        "-e", dest="exe_prefix", metavar="PREFIX", help="build executables from src/PREFIX*.cxx"
    )
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def _usage_failure(parser: argparse.ArgumentParser, message: str) -> int:
    parser.print_usage(sys.stderr)
    print_error(message)
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``cxx-skeleton`` and ``python -m cxxskel``."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        return _usage_failure(parser, str(exc))

    if args.help:
        parser.print_help()
        return 1

    if args.extra:
        return _usage_failure(
            parser, f"unexpected arguments: {' '.join(args.extra)}"
        )

    try:
        config, warnings = SkeletonConfig.from_flags(
            with_root=args.with_root,
            with_hdf5=args.with_hdf5,
            with_ndhist=args.with_ndhist,
            python_lib=args.python_lib,
            exe_prefix=args.exe_prefix,
        )
    except ConfigurationError as exc:
        return _usage_failure(parser, str(exc))

    for warning in warnings:
        print_warning(warning)

    generator = SkeletonGenerator(config)
    try:
        written = generator.generate(Path.cwd())
    except DirectoryNotEmptyError as exc:
        return _usage_failure(parser, f"{exc}; run this in an empty directory")

    summary = config.summary()
    summary["Files"] = "\n".join(str(path) for path in generator.planned_files())
    print_summary_table(summary, title="Skeleton")
    print_success(f"Wrote {len(written)} files, run `make` to build.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
