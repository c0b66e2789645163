"""Transformations - named, parameterized units of work on an Image."""

from .base import (
    Transformation,
    TransformationParams,
    backend_errors,
    bind_params,
)
from .border import Border
from .canvas import Canvas
from .compress import Compress
from .convert import Convert
from .crop import Crop
from .desaturate import Desaturate
from .flip import FlipHorizontally, FlipVertically
from .resize import MaxSize, Resize
from .rotate import Rotate

BUILTIN_TRANSFORMATIONS: tuple[type[Transformation], ...] = (
    Border,
    Canvas,
    Compress,
    Convert,
    Crop,
    Desaturate,
    FlipHorizontally,
    FlipVertically,
    MaxSize,
    Resize,
    Rotate,
)


def builtin_table() -> dict[str, type[Transformation]]:
    """Return a new name -> class table of the built-in transformations."""
    return {cls.name: cls for cls in BUILTIN_TRANSFORMATIONS}


__all__ = [
    'Transformation',
    'TransformationParams',
    'backend_errors',
    'bind_params',
    'BUILTIN_TRANSFORMATIONS',
    'builtin_table',
    'Border',
    'Canvas',
    'Compress',
    'Convert',
    'Crop',
    'Desaturate',
    'FlipHorizontally',
    'FlipVertically',
    'MaxSize',
    'Resize',
    'Rotate',
]
