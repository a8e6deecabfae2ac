#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Directory enumeration for the Blurhash Tool.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def validate_folder(folder: Path) -> None:
    """Raise NotADirectoryError unless folder exists and is a directory."""
    if not folder.exists() or not folder.is_dir():
        raise NotADirectoryError(f"'{folder}' is not a valid directory")


def list_directory_entries(folder: Path, sample: Optional[int] = None) -> List[Path]:
    """
    List every entry of folder in OS enumeration order.

    Args:
        folder: Directory to enumerate (not recursive)
        sample: Keep only the first N entries when given

    Returns:
        Entry paths joined onto folder, subdirectories included
    """
    folder = Path(folder)
    validate_folder(folder)
    if sample is not None and sample < 0:
        raise ValueError(f"sample must be non-negative, got {sample}")

    paths = []
    with os.scandir(folder) as entries:
        for entry in entries:
            if sample is not None and len(paths) >= sample:
                break
            paths.append(Path(entry.path))

    logger.debug("Enumerated %d entries in %s", len(paths), folder)
    return paths
