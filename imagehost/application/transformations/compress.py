"""Compress transformation."""

from __future__ import annotations

from ...domain.entities.image import Image
from .base import Transformation, TransformationParams


class CompressParams(TransformationParams):
    # 0-100; the backend rejects anything outside that range
    quality: int


class Compress(Transformation):
    """Re-encode the image at a given quality."""

    name = "compress"
    Params = CompressParams
    params: CompressParams

    def transform(self, image: Image) -> None:
        decoded = self._backend.decode(image.blob)
        blob = self._backend.encode(decoded, image.extension, quality=self.params.quality)
        image.replace(blob, image.width, image.height)
