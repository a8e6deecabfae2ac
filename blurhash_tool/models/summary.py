#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Run summary reported at the end of a generate run.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class RunSummary:
    folder: str
    output: str
    total: int
    attempted: int = 0
    succeeded: int = 0
    renamed: int = 0
    chunk_size: int = 0
    chunks: int = 0
    started_at: Optional[str] = None
    finished_at: Optional[str] = None

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['failed'] = self.failed
        return data
