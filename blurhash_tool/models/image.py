#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for decoded images and per-item results.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Iterator

from PIL import Image

# Pillow modes kept as decoded, with their bytes per pixel
MODE_BYTES_PER_PIXEL: Dict[str, int] = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


@dataclass
class DecodedImage:
    """Pixel buffer owned by the processing of a single file."""
    pixels: bytes
    width: int
    height: int
    mode: str = "RGBA"

    def __post_init__(self):
        if self.mode not in MODE_BYTES_PER_PIXEL:
            raise ValueError(f"Unsupported pixel mode: {self.mode}")
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"Buffer length {len(self.pixels)} does not match "
                f"{self.width}x{self.height} {self.mode} ({expected} bytes)"
            )

    @property
    def bytes_per_pixel(self) -> int:
        return MODE_BYTES_PER_PIXEL[self.mode]

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def to_rgba(self) -> bytes:
        """Return the buffer in 4-channel RGBA layout."""
        if self.mode == "RGBA":
            return self.pixels
        image = Image.frombytes(self.mode, (self.width, self.height), self.pixels)
        return image.convert("RGBA").tobytes()


@dataclass(frozen=True)
class BlurhashResult:
    """Successful outcome for one file."""
    file: str
    blurhash: str

    def __iter__(self) -> Iterator[str]:
        # Unpacks as a (path, hash) pair
        return iter((self.file, self.blurhash))

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
