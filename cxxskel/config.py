"""cxx-skeleton configuration.

Immutable, typed description of the skeleton to generate. The values come
from command-line flags, are resolved once by :meth:`SkeletonConfig.from_flags`
and are then passed unchanged to every render function. Pydantic v2 enforces
the cross-flag invariants at construction time, so any instance that exists
is a valid one.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

DEFAULT_EXE_PREFIX = "test-"
DUMMY_NAME = "dummy"
GENERATOR_NAME = "cxx-skeleton"

_C_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_BAD_PREFIX_CHARS = re.compile(r"[\s/\\]")


class ConfigurationError(ValueError):
    """Raised when command-line values conflict or are malformed."""


class LayoutConfig(BaseModel):
    """Directory layout of the generated project.

    These names are baked into the generated makefile as ``BUILD``, ``SRC``,
    ``INC``, ``OUTPUT`` and ``LIB``.
    """

    model_config = ConfigDict(frozen=True)

    build: str = Field(default="build")
    src: str = Field(default="src")
    include: str = Field(default="include")
    output: str = Field(default="bin")
    lib: str = Field(default="lib")
    makefile: str = Field(default="makefile")


class SkeletonConfig(BaseModel):
    """Everything the generator needs to know about one skeleton.

    Instances are frozen: the CLI builds one with :meth:`from_flags` and the
    makefile sections and source writers only ever read it.
    """

    model_config = ConfigDict(frozen=True)

    with_root: bool = Field(default=False, description="Wire in ROOT via root-config")
    with_hdf5: bool = Field(default=False, description="Wire in HDF5 via h5c++")
    with_ndhist: bool = Field(default=False, description="Wire in ndhist (needs HDF5)")
    python_lib: str | None = Field(default=None, description="Python extension module name")
    exe_prefix: str | None = Field(default=None, description="Prefix for executable sources")
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @field_validator("python_lib")
    @classmethod
    def _check_python_lib(cls, value: str | None) -> str | None:
        if value is not None and not _C_IDENTIFIER.match(value):
            raise ValueError(
                f"python module name '{value}' must be a valid C identifier"
            )
        return value

    @field_validator("exe_prefix")
    @classmethod
    def _check_exe_prefix(cls, value: str | None) -> str | None:
        if value is not None and (not value or _BAD_PREFIX_CHARS.search(value)):
            raise ValueError(
                f"executable prefix '{value}' must be non-empty and contain "
                "no whitespace or path separators"
            )
        return value

    @model_validator(mode="after")
    def _check_combination(self) -> "SkeletonConfig":
        if self.with_ndhist and not self.with_hdf5:
            raise ValueError("ndhist requires HDF5")
        if self.python_lib is None and self.exe_prefix is None:
            raise ValueError("need a python module name or an executable prefix")
        if self.python_lib is not None and self.python_lib == self.exe_prefix:
            raise ValueError("python module name and executable prefix must differ")
        if (
            self.python_lib is not None
            and self.exe_prefix is not None
            and self.python_lib.startswith(self.exe_prefix)
        ):
            # src/<python_lib>.cxx would also match the $(EXE_PREFIX)*.cxx wildcard
            raise ValueError(
                f"python module name '{self.python_lib}' starts with executable "
                f"prefix '{self.exe_prefix}'"
            )
        if self.python_lib == DUMMY_NAME:
            raise ValueError(
                f"python module name '{DUMMY_NAME}' collides with "
                f"{self.layout.src}/{DUMMY_NAME}.cxx"
            )
        if self.exe_prefix is not None and DUMMY_NAME.startswith(self.exe_prefix):
            # the $(EXE_PREFIX)*.cxx wildcard would pick up src/dummy.cxx
            raise ValueError(
                f"executable prefix '{self.exe_prefix}' would match "
                f"{self.layout.src}/{DUMMY_NAME}.cxx"
            )
        return self

    # ------------------------------------------------------------------
    # Construction from flags
    # ------------------------------------------------------------------

    @classmethod
    def from_flags(
        cls,
        *,
        with_root: bool = False,
        with_hdf5: bool = False,
        with_ndhist: bool = False,
        python_lib: str | None = None,
        exe_prefix: str | None = None,
        **extra: Any,
    ) -> tuple["SkeletonConfig", list[str]]:
        """Resolve raw flag values into a config plus advisory warnings.

        Rules are applied in a fixed order: default the executable prefix,
        then force HDF5 on for ndhist, then reject equal names.

        Raises:
            ConfigurationError: If the values conflict or are malformed.
        """
        warnings: list[str] = []

        if python_lib is None and exe_prefix is None:
            exe_prefix = DEFAULT_EXE_PREFIX
            warnings.append(
                f"no python module or executable prefix given, "
                f"using executable prefix '{DEFAULT_EXE_PREFIX}'"
            )

        if with_ndhist and not with_hdf5:
            with_hdf5 = True
            warnings.append("ndhist requires HDF5, turning on HDF5 support")

        if python_lib is not None and python_lib == exe_prefix:
            raise ConfigurationError(
                f"python module name and executable prefix are both '{python_lib}', "
                "output files would collide"
            )

        try:
            config = cls(
                with_root=with_root,
                with_hdf5=with_hdf5,
                with_ndhist=with_ndhist,
                python_lib=python_lib,
                exe_prefix=exe_prefix,
                **extra,
            )
        except ValidationError as exc:
            message = exc.errors()[0]["msg"]
            raise ConfigurationError(message.removeprefix("Value error, ")) from exc

        return config, warnings

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def enabled_libraries(self) -> list[str]:
        """Names of the external libraries wired into the makefile, in order."""
        libs: list[str] = []
        if self.with_root:
            libs.append("ROOT")
        if self.with_hdf5:
            libs.append("HDF5")
        if self.with_ndhist:
            libs.append("ndhist")
        if self.python_lib is not None:
            libs.append("Python")
        return libs

    def summary(self) -> dict[str, str]:
        """Return a label/value mapping suitable for a summary table."""
        return {
            "Executable prefix": self.exe_prefix or "-",
            "Python module": self.python_lib or "-",
            "Libraries": ", ".join(self.enabled_libraries) or "none",
        }
