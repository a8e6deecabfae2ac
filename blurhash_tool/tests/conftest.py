#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Shared fixtures for the Blurhash Tool tests.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pytest
from PIL import Image

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from blurhash_tool.models.image import DecodedImage
from blurhash_tool.scanning.decoder import ImageOpenError, ImageDecodeError
from blurhash_tool.scanning.encoder import BlurhashEncodeError


def make_image(path: Path, size: Tuple[int, int], fmt: str = "PNG", mode: str = "RGB") -> Path:
    """Write a small gradient image to path."""
    width, height = size
    img = Image.new(mode, size)
    if mode == "RGB":
        img.putdata([
            ((x * 255) // max(width - 1, 1), (y * 255) // max(height - 1, 1), 128)
            for y in range(height) for x in range(width)
        ])
    img.save(path, format=fmt)
    return path


@pytest.fixture
def scenario_dir(tmp_path):
    """a.png decodable, b.txt not an image, c.jpeg decodable."""
    folder = tmp_path / "images"
    folder.mkdir()
    make_image(folder / "a.png", (100, 100), "PNG")
    (folder / "b.txt").write_text("definitely not an image\n")
    make_image(folder / "c.jpeg", (50, 50), "JPEG")
    return folder


@pytest.fixture
def clean_image_dir(tmp_path):
    """Only files that already carry recognized extensions."""
    folder = tmp_path / "clean"
    folder.mkdir()
    make_image(folder / "one.png", (40, 30), "PNG")
    make_image(folder / "two.jpg", (64, 48), "JPEG")
    make_image(folder / "three.jpeg", (20, 20), "JPEG")
    return folder


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by the CLI (e.g. --json mode)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


class StubDecoder:
    """Decoder returning canned outcomes keyed by file name."""

    def __init__(self, outcomes: Dict[str, Union[Tuple[int, int], Exception]] = None,
                 default: Tuple[int, int] = (4, 4)):
        self.outcomes = outcomes or {}
        self.default = default
        self.calls: List[Path] = []
        self._lock = threading.Lock()

    def decode(self, path: Path) -> DecodedImage:
        with self._lock:
            self.calls.append(path)
        outcome = self.outcomes.get(path.name, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        width, height = outcome
        return DecodedImage(pixels=bytes(width * height), width=width, height=height, mode="L")


class StubEncoder:
    """Encoder that derives a fake hash from the dimensions."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []
        self._lock = threading.Lock()

    def encode(self, pixels, width, height, components=(4, 4)):
        with self._lock:
            self.calls.append((len(pixels), width, height, components))
        if self.fail:
            raise BlurhashEncodeError("stub failure")
        return f"hash-{width}x{height}"


@pytest.fixture
def stub_decoder():
    return StubDecoder()


@pytest.fixture
def stub_encoder():
    return StubEncoder()


