"""Entry point for ``python -m cxxskel``."""

import sys

from cxxskel.cli import main

sys.exit(main())
