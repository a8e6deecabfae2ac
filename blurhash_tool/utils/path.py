#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for the Blurhash Tool.
"""

import os
from pathlib import Path
from typing import Union


def display_path(path: Union[str, Path]) -> str:
    """Printable form of a path; undecodable name bytes become U+FFFD."""
    return os.fsencode(path).decode("utf-8", "replace")
