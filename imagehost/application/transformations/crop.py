"""Crop transformation."""

from __future__ import annotations

from pydantic import Field

from ...domain.entities.image import Image
from ...domain.value_objects.geometry import Region, Size
from ...exceptions import TransformationError
from .base import Transformation, TransformationParams


class CropParams(TransformationParams):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)


class Crop(Transformation):
    """Cut out a region of the image."""

    name = "crop"
    Params = CropParams
    params: CropParams

    def transform(self, image: Image) -> None:
        p = self.params
        region = Region(p.x, p.y, p.width, p.height)

        if not region.within(Size(image.width, image.height)):
            raise TransformationError("Crop area is out of bounds", transformation=self.name)

        cropped = self._backend.crop(
            self._backend.decode(image.blob),
            region.x, region.y, region.width, region.height
        )
        image.replace(
            self._backend.encode(cropped, image.extension),
            region.width,
            region.height
        )
