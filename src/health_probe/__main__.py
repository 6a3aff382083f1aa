"""Run the health probe CLI with ``python -m health_probe``."""

import sys

from .cli import main

sys.exit(main())
