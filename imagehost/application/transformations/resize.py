"""Resize and MaxSize transformations."""

from __future__ import annotations

from pydantic import Field, model_validator

from ...domain.entities.image import Image
from ...domain.value_objects.geometry import Size
from .base import Transformation, TransformationParams


class DimensionParams(TransformationParams):
    """Width and/or height; at least one is required."""
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)

    @model_validator(mode='after')
    def require_dimension(self) -> DimensionParams:
        if self.width is None and self.height is None:
            raise ValueError(
                "Missing both width and height. You need to specify at least one of them"
            )
        return self


def scaled_size(current: Size, width: int | None, height: int | None) -> Size:
    """Fill in whichever of width/height is missing, keeping the aspect ratio."""
    if width is None:
        width = max(1, round(height * current.ratio))
    elif height is None:
        height = max(1, round(width / current.ratio))
    return Size(width, height)


class Resize(Transformation):
    """Scale the image to a width and/or height."""

    name = "resize"
    Params = DimensionParams
    params: DimensionParams

    def transform(self, image: Image) -> None:
        target = scaled_size(Size(image.width, image.height), self.params.width, self.params.height)
        resized = self._backend.resize(
            self._backend.decode(image.blob), target.width, target.height
        )
        image.replace(
            self._backend.encode(resized, image.extension),
            target.width,
            target.height
        )


class MaxSize(Transformation):
    """Shrink the image to fit within a maximum width and/or height.

    Images that already fit are left untouched.
    """

    name = "maxSize"
    Params = DimensionParams
    params: DimensionParams

    def target_size(self, current: Size) -> Size:
        width, height = current.width, current.height
        max_width, max_height = self.params.width, self.params.height

        if max_width is not None and width > max_width:
            width = max_width
            height = max(1, round(max_width / current.ratio))

        if max_height is not None and height > max_height:
            height = max_height
            width = max(1, round(max_height * current.ratio))

        return Size(width, height)

    def transform(self, image: Image) -> None:
        current = Size(image.width, image.height)
        target = self.target_size(current)

        if target == current:
            return

        resized = self._backend.resize(
            self._backend.decode(image.blob), target.width, target.height
        )
        image.replace(
            self._backend.encode(resized, image.extension),
            target.width,
            target.height
        )
