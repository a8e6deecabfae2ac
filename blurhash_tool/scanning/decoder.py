#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Image decoding adapter backed by Pillow.
"""

import logging
import warnings
from pathlib import Path
from typing import Dict

from PIL import Image

from ..config import EXTENSION_FORMATS, DEFAULT_FORMAT
from ..models.image import DecodedImage, MODE_BYTES_PER_PIXEL

logging.getLogger("PIL.TiffImagePlugin").setLevel(logging.WARNING)

# Suppress PIL warnings
warnings.filterwarnings("ignore", category=UserWarning,
                       message=".*Palette images with Transparency expressed in bytes.*")


class ImageOpenError(Exception):
    """The file could not be opened."""


class ImageDecodeError(Exception):
    """The file was opened but is not a decodable image."""


class ImageDecoder:
    """Opens a file and decodes it into a DecodedImage."""

    def __init__(self, formats: Dict[str, str] = EXTENSION_FORMATS,
                 default_format: str = DEFAULT_FORMAT):
        self.formats = formats
        self.default_format = default_format

    def format_for(self, path: Path) -> str:
        """Pillow format name implied by the file extension."""
        return self.formats.get(path.suffix[1:], self.default_format)

    def decode(self, path: Path) -> DecodedImage:
        try:
            fh = path.open('rb')
        except OSError as e:
            raise ImageOpenError(str(e)) from e

        with fh:
            try:
                with Image.open(fh, formats=[self.format_for(path)]) as img:
                    img.load()
                    if img.mode not in MODE_BYTES_PER_PIXEL:
                        img = img.convert("RGBA")
                    return DecodedImage(
                        pixels=img.tobytes(),
                        width=img.width,
                        height=img.height,
                        mode=img.mode,
                    )
            except Exception as e:
                raise ImageDecodeError(str(e)) from e
