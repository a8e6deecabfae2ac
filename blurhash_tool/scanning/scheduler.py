#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Chunked parallel scheduling for the Blurhash Tool.

Chunks run strictly one after another; the items inside a chunk run on a
fixed-size thread pool. At most one chunk of decoded images is in flight.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from tqdm import tqdm

from ..aggregator import ResultAggregator
from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS
from ..models.image import BlurhashResult
from .processor import ItemProcessor

logger = logging.getLogger(__name__)


class ChunkedScheduler:
    """Feeds paths to an ItemProcessor chunk by chunk."""

    def __init__(self, processor: ItemProcessor, chunk_size: int = DEFAULT_CHUNK_SIZE,
                 workers: Optional[int] = None, show_progress: bool = False):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.processor = processor
        self.chunk_size = chunk_size
        self.workers = workers or DEFAULT_WORKERS
        self.show_progress = show_progress

    def chunks(self, paths: Sequence[Path]) -> Iterator[Sequence[Path]]:
        """Consecutive slices of at most chunk_size paths."""
        for start in range(0, len(paths), self.chunk_size):
            yield paths[start:start + self.chunk_size]

    def chunk_count(self, paths: Sequence[Path]) -> int:
        return (len(paths) + self.chunk_size - 1) // self.chunk_size

    def run(self, paths: Sequence[Path], aggregator: ResultAggregator) -> ResultAggregator:
        """Process every path, appending each chunk's results before the next chunk starts."""
        total = len(paths)
        total_chunks = self.chunk_count(paths)
        logger.debug("Scheduling %d files in %d chunks of %d with %d workers",
                     total, total_chunks, self.chunk_size, self.workers)

        with ThreadPoolExecutor(max_workers=self.workers) as executor, \
                tqdm(total=total, unit="img", disable=not self.show_progress) as bar:
            for chunk_idx, chunk in enumerate(self.chunks(paths)):
                logger.info("Processing chunk %d/%d (%d files)", chunk_idx + 1, total_chunks, len(chunk))
                chunk_results = self._process_chunk(executor, chunk, aggregator, total, bar)
                aggregator.extend(chunk_results)

        return aggregator

    def _process_chunk(self, executor: ThreadPoolExecutor, chunk: Sequence[Path],
                       aggregator: ResultAggregator, total: int, bar: tqdm) -> List[BlurhashResult]:
        """Fan out one chunk and block until every item has finished."""
        futures = {
            executor.submit(self.processor.process, path, aggregator.progress, total): path
            for path in chunk
        }

        chunk_results = []
        for future in as_completed(futures):
            bar.update(1)
            try:
                result = future.result()
            except Exception as e:
                logger.error("Unexpected error processing %s: %s", futures[future], e, exc_info=True)
                continue
            if result is not None:
                chunk_results.append(result)
        return chunk_results
