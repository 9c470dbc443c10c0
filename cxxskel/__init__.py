"""cxx-skeleton: scaffold a makefile-based C++ project in an empty directory."""

__version__ = "0.1.0"
