"""Desaturate transformation."""

from __future__ import annotations

from ...domain.entities.image import Image
from .base import Transformation


class Desaturate(Transformation):
    """Turn the image grayscale."""

    name = "desaturate"

    def transform(self, image: Image) -> None:
        gray = self._backend.desaturate(self._backend.decode(image.blob))
        image.replace(
            self._backend.encode(gray, image.extension),
            image.width,
            image.height
        )
