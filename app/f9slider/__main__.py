"""Allow running the CLI with python -m f9slider."""

import sys

from .cli import main

sys.exit(main())
