#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Generate command: enumerate a folder, hash every image, write the JSON document.
"""

import logging
from pathlib import Path
from typing import Optional

from ..aggregator import ResultAggregator
from ..config import DEFAULT_CHUNK_SIZE
from ..models.summary import RunSummary
from ..scanning.discovery import list_directory_entries
from ..scanning.processor import ItemProcessor
from ..scanning.scheduler import ChunkedScheduler
from ..utils.path import display_path
from ..utils.time import utc_now_str

logger = logging.getLogger(__name__)


class GenerateCommand:
    def __init__(self, processor: Optional[ItemProcessor] = None):
        self.processor = processor or ItemProcessor()

    def execute(
        self,
        folder: Path,
        output: Path,
        sample: Optional[int] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        show_progress: bool = False,
        workers: Optional[int] = None,
    ) -> RunSummary:
        """
        Run the whole pipeline.

        Raises:
            NotADirectoryError: folder is missing or not a directory
            OSError: folder unreadable or output not writable
        """
        started_at = utc_now_str()
        renamed_before = self.processor.renamed.value
        logger.info("Processing directory: %s", folder)

        paths = list_directory_entries(Path(folder), sample)
        logger.info("Found %d files to process", len(paths))

        scheduler = ChunkedScheduler(self.processor, chunk_size=chunk_size,
                                     workers=workers, show_progress=show_progress)
        aggregator = scheduler.run(paths, ResultAggregator())
        logger.info("Successfully processed %d images", len(aggregator))

        aggregator.write(Path(output))
        logger.info("Results saved to %s", output)

        return RunSummary(
            folder=display_path(folder),
            output=display_path(output),
            total=len(paths),
            attempted=aggregator.progress.value,
            succeeded=len(aggregator),
            renamed=self.processor.renamed.value - renamed_before,
            chunk_size=chunk_size,
            chunks=scheduler.chunk_count(paths),
            started_at=started_at,
            finished_at=utc_now_str(),
        )
