"""Rotate transformation."""

from __future__ import annotations

from pydantic import Field

from ...domain.entities.image import Image
from .base import Transformation, TransformationParams


class RotateParams(TransformationParams):
    angle: float = Field(allow_inf_nan=False)
    bg: str | None = None


class Rotate(Transformation):
    """Rotate clockwise by ``angle`` degrees.

    The image grows to the rotated bounding box; ``bg`` fills the corners
    exposed by angles that are not multiples of 90.
    """

    name = "rotate"
    Params = RotateParams
    params: RotateParams

    def transform(self, image: Image) -> None:
        backend = self._backend
        color = backend.parse_color(self.params.bg) if self.params.bg else None

        rotated = backend.rotate(backend.decode(image.blob), self.params.angle, color)
        width, height = backend.size(rotated)
        blob = backend.encode(rotated, image.extension)

        image.replace(blob, width, height)
