"""Build Image models from raw bytes."""

from __future__ import annotations

import logging

from ...config import DEFAULT_EXTENSION
from ...domain.entities.image import Image
from ...exceptions import ImageBackendError, TransformationError
from ..ports.image_backend import ImageBackend

logger = logging.getLogger(__name__)


def load_image(
    blob: bytes,
    backend: ImageBackend,
    extension: str | None = None
) -> Image:
    """Decode ``blob`` once to learn its size and format.

    Args:
        blob: Encoded image
        backend: Backend used to decode
        extension: Target encoding; detected from the payload when omitted

    Returns:
        A fresh, untransformed Image

    Raises:
        TransformationError: If the payload cannot be decoded
    """
    try:
        decoded = backend.decode(blob)
        width, height = backend.size(decoded)
        detected = backend.format(decoded)
    except ImageBackendError as e:
        raise TransformationError(f"Unable to load image: {e.message}") from e

    extension = (extension or detected or DEFAULT_EXTENSION).lower().lstrip('.')
    logger.debug(f"Loaded {width}x{height} {extension} image ({len(blob)} bytes)")

    return Image(blob=blob, width=width, height=height, extension=extension)
