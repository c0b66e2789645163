"""Domain entities - objects with identity and lifecycle."""

from .image import Image, ChainResult

__all__ = ['Image', 'ChainResult']
