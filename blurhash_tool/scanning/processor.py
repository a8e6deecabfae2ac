#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-item processing: classify, decode, guard, encode.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from ..config import MAX_PIXELS, BLURHASH_COMPONENTS
from ..models.image import BlurhashResult
from ..utils.counter import AtomicCounter
from ..utils.path import display_path
from .classifier import FileClassifier
from .decoder import ImageDecoder, ImageOpenError, ImageDecodeError
from .encoder import BlurhashEncoder, BlurhashEncodeError

logger = logging.getLogger(__name__)


class ItemProcessor:
    """
    Turns one directory entry into a BlurhashResult or None.

    Failures stay local to the item. Whatever the outcome, the shared
    progress counter advances exactly once per call.
    """

    def __init__(self, decoder: Optional[ImageDecoder] = None,
                 encoder: Optional[BlurhashEncoder] = None,
                 classifier: Optional[FileClassifier] = None,
                 max_pixels: int = MAX_PIXELS,
                 components: Tuple[int, int] = BLURHASH_COMPONENTS):
        self.decoder = decoder or ImageDecoder()
        self.encoder = encoder or BlurhashEncoder()
        self.classifier = classifier or FileClassifier()
        self.max_pixels = max_pixels
        self.components = components
        self.renamed = AtomicCounter()

    def process(self, path: Path, counter: AtomicCounter, total: int) -> Optional[BlurhashResult]:
        try:
            return self._process(Path(path))
        finally:
            current = counter.increment()
            logger.info("Progress: %d/%d", current, total)

    def _process(self, path: Path) -> Optional[BlurhashResult]:
        if not self.classifier.is_image(path):
            try:
                new_path = self.classifier.normalize(path)
            except OSError as e:
                logger.error("Failed to rename %s to %s: %s",
                             path, path.with_suffix(f".{self.classifier.canonical_ext}"), e)
                return None
            self.renamed.increment()
            path = new_path

        try:
            image = self.decoder.decode(path)
        except ImageOpenError as e:
            logger.error("Failed to open file: %s (%s)", path, e)
            return None
        except ImageDecodeError as e:
            logger.error("Failed to open image: %s (%s)", path, e)
            return None

        if image.pixel_count > self.max_pixels:
            logger.warning("Skipping large image: %s (%dx%d)", path, image.width, image.height)
            return None

        width, height = image.width, image.height
        rgba = image.to_rgba()
        del image

        try:
            blurhash = self.encoder.encode(rgba, width, height, self.components)
        except BlurhashEncodeError as e:
            logger.error("Failed to generate blurhash for %s (%s)", path, e)
            return None

        return BlurhashResult(file=display_path(path), blurhash=blurhash)
