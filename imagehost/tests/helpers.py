"""Shared helpers for building test images and backend stubs."""

from io import BytesIO
from unittest.mock import Mock

import numpy as np
from PIL import Image as PILImage

from ..application.ports.image_backend import ImageBackend
from ..domain.entities.image import Image


def gradient(width: int, height: int) -> np.ndarray:
    """RGBA array whose pixels are all distinct (up to 4096x4096)."""
    y, x = np.mgrid[0:height, 0:width]
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[..., 0] = x % 256
    arr[..., 1] = y % 256
    arr[..., 2] = (x // 256) * 16 + (y // 256)
    arr[..., 3] = 255
    return arr


def encode(arr: np.ndarray, pil_format: str = "PNG") -> bytes:
    buffer = BytesIO()
    PILImage.fromarray(np.ascontiguousarray(arr)).save(buffer, format=pil_format)
    return buffer.getvalue()


def make_image(width: int, height: int) -> tuple[Image, np.ndarray]:
    """PNG Image model plus the pixels it encodes."""
    arr = gradient(width, height)
    return Image(blob=encode(arr), width=width, height=height, extension="png"), arr


def stub_backend() -> Mock:
    """Backend stub that records calls and returns placeholder buffers."""
    backend = Mock(spec=ImageBackend)
    backend.decode.return_value = "decoded"
    backend.create_canvas.return_value = "canvas"
    backend.crop.return_value = "cropped"
    backend.paste.return_value = "pasted"
    backend.parse_color.return_value = (255, 255, 255, 255)
    backend.encode.return_value = b"encoded"
    return backend
