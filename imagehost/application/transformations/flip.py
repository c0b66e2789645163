"""Flip transformations."""

from __future__ import annotations

from ...domain.entities.image import Image
from .base import Transformation


class FlipHorizontally(Transformation):
    """Mirror the image left-right."""

    name = "flipHorizontally"

    def transform(self, image: Image) -> None:
        flipped = self._backend.flip_horizontal(self._backend.decode(image.blob))
        image.replace(
            self._backend.encode(flipped, image.extension),
            image.width,
            image.height
        )


class FlipVertically(Transformation):
    """Mirror the image top-bottom."""

    name = "flipVertically"

    def transform(self, image: Image) -> None:
        flipped = self._backend.flip_vertical(self._backend.decode(image.blob))
        image.replace(
            self._backend.encode(flipped, image.extension),
            image.width,
            image.height
        )
