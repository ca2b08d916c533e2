"""Allow running wrapgen as ``python -m wrapgen``."""

import sys

from .cli import main

sys.exit(main())
