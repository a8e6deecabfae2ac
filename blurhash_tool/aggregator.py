#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Progress accounting and result collection for a run.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .models.image import BlurhashResult
from .utils.counter import AtomicCounter


class ResultAggregator:
    """
    Holds the shared progress counter and the ordered result list.

    The counter is incremented by worker threads. The result list is only
    extended by the scheduling thread between chunks.
    """

    def __init__(self):
        self.progress = AtomicCounter()
        self.results: List[BlurhashResult] = []

    def extend(self, results: Iterable[BlurhashResult]) -> None:
        self.results.extend(results)

    def __len__(self) -> int:
        return len(self.results)

    def to_document(self) -> Dict[str, Any]:
        return {"results": [result.to_dict() for result in self.results]}

    def write(self, output_path: Path) -> None:
        """Write the whole document once, replacing any existing file."""
        # Serialize before opening so a failure leaves the old file intact
        text = json.dumps(self.to_document(), indent=2, ensure_ascii=False) + "\n"
        with Path(output_path).open('w', encoding='utf-8') as f:
            f.write(text)
