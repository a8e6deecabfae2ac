"""Scanning and processing modules for the Blurhash Tool."""

from .classifier import FileClassifier
from .decoder import ImageDecoder, ImageOpenError, ImageDecodeError
from .discovery import list_directory_entries, validate_folder
from .encoder import BlurhashEncoder, BlurhashEncodeError
from .processor import ItemProcessor
from .scheduler import ChunkedScheduler

__all__ = [
    'FileClassifier',
    'ImageDecoder',
    'ImageOpenError',
    'ImageDecodeError',
    'BlurhashEncoder',
    'BlurhashEncodeError',
    'ItemProcessor',
    'ChunkedScheduler',
    'list_directory_entries',
    'validate_folder',
]
