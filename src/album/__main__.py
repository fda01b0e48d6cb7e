"""Allow running the album examples with ``python -m src.album``."""

import sys

from .cli import main

sys.exit(main())
