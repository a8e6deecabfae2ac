"""Utility functions for the Blurhash Tool."""

from .counter import AtomicCounter
from .path import display_path
from .time import utc_now_str

__all__ = ['AtomicCounter', 'display_path', 'utc_now_str']
