#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for path display helpers.
"""

from pathlib import Path

from blurhash_tool.utils.path import display_path


class TestDisplayPath:

    def test_plain_path_unchanged(self):
        assert display_path(Path("photos") / "a.png") == str(Path("photos") / "a.png")

    def test_non_ascii_kept(self):
        assert display_path("fotos/größe.png") == "fotos/größe.png"

    def test_undecodable_bytes_replaced(self):
        # os.fsdecode turns the byte 0xff into the lone surrogate U+DCFF
        assert display_path("fotos/\udcff.png") == "fotos/�.png"
