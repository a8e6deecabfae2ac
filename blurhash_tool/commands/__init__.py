"""Command implementations for the Blurhash Tool."""

from .generate import GenerateCommand

__all__ = ['GenerateCommand']
