"""Allow ``python -m shiftswap``."""

import sys

from .cli import main

sys.exit(main())
