"""Data models for the Blurhash Tool."""

from .image import DecodedImage, BlurhashResult
from .summary import RunSummary

__all__ = ['DecodedImage', 'BlurhashResult', 'RunSummary']
