#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Extension classification and normalization.

Entries without a recognized image extension are renamed in place to the
canonical extension before decoding. The rename is durable and applies to
every such entry, whatever its content.
"""

import logging
from pathlib import Path
from typing import Set

from ..config import IMAGE_EXT, CANONICAL_EXT

logger = logging.getLogger(__name__)


class FileClassifier:
    """Decides whether a path looks like an image and renames it if not."""

    def __init__(self, image_ext: Set[str] = IMAGE_EXT, canonical_ext: str = CANONICAL_EXT):
        self.image_ext = image_ext
        self.canonical_ext = canonical_ext

    def is_image(self, path: Path) -> bool:
        """Case-sensitive extension check."""
        return path.suffix[1:] in self.image_ext

    def normalize(self, path: Path) -> Path:
        """
        Return a path carrying a recognized extension.

        Raises:
            OSError: the rename failed (missing entry, permissions, ...)
        """
        if self.is_image(path):
            return path
        new_path = path.with_suffix(f".{self.canonical_ext}")
        path.rename(new_path)
        logger.debug("Renamed %s to %s", path, new_path)
        return new_path
