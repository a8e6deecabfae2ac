"""Blurhash Tool - batch blurhash generation for image folders."""

__version__ = "0.1.0"
__author__ = "Blurhash Tool Team"

# Import key classes for convenient top-level access
from .commands import GenerateCommand
from .aggregator import ResultAggregator
from .scanning import (
    FileClassifier, ImageDecoder, BlurhashEncoder, ItemProcessor, ChunkedScheduler,
    list_directory_entries,
)
from .models import DecodedImage, BlurhashResult, RunSummary
from .utils import AtomicCounter, utc_now_str

__all__ = [
    # Core classes
    'GenerateCommand',
    'ResultAggregator',
    'ChunkedScheduler',
    'ItemProcessor',

    # Adapters
    'FileClassifier',
    'ImageDecoder',
    'BlurhashEncoder',
    'list_directory_entries',

    # Data models
    'DecodedImage',
    'BlurhashResult',
    'RunSummary',

    # Utilities
    'AtomicCounter',
    'utc_now_str',

    # Package metadata
    '__version__',
    '__author__'
]
