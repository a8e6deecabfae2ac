#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the Blurhash Tool.
"""

import os
from typing import Dict, Set, Tuple

# Recognized image extensions (case-sensitive, without the leading dot)
IMAGE_EXT: Set[str] = {"jpg", "jpeg", "png"}
CANONICAL_EXT = "jpg"

# Pillow format used to decode each extension; anything else is read as JPEG
EXTENSION_FORMATS: Dict[str, str] = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG"}
DEFAULT_FORMAT = "JPEG"

# Images above this pixel count are skipped
MAX_PIXELS = 10_000_000

# Blurhash grid (x components, y components)
BLURHASH_COMPONENTS: Tuple[int, int] = (4, 4)

# Processing defaults
DEFAULT_CHUNK_SIZE = 100
DEFAULT_WORKERS = os.cpu_count() or 1
