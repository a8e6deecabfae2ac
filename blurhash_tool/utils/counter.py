#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Thread-safe counter shared by concurrent workers.
"""

from threading import Lock


class AtomicCounter:
    """Monotonic integer with increment-and-fetch semantics."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicCounter({self.value})"
