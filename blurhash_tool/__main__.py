"""Allow ``python -m blurhash_tool``."""

import sys

from .main import main

sys.exit(main())
