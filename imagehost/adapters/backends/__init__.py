"""Image backends - implementations of ImageBackend port."""

from .pillow_backend import PillowBackend

__all__ = ['PillowBackend']
