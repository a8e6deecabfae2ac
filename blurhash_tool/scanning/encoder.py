#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Blurhash encoding adapter backed by blurhash-python.
"""

from typing import Tuple

import blurhash
from PIL import Image

from ..config import BLURHASH_COMPONENTS


class BlurhashEncodeError(Exception):
    """The blurhash could not be computed."""


class BlurhashEncoder:
    """Encodes an RGBA buffer into a blurhash string."""

    def encode(self, pixels: bytes, width: int, height: int,
               components: Tuple[int, int] = BLURHASH_COMPONENTS) -> str:
        x_components, y_components = components
        try:
            image = Image.frombytes("RGBA", (width, height), pixels)
            return blurhash.encode(image, x_components, y_components)
        except Exception as e:
            raise BlurhashEncodeError(str(e)) from e
