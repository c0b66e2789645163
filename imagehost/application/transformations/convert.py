"""Convert transformation - change the output format."""

from __future__ import annotations

from pydantic import field_validator

from ...config import EXTENSION_FORMATS
from ...domain.entities.image import Image
from .base import Transformation, TransformationParams


class ConvertParams(TransformationParams):
    type: str

    @field_validator('type')
    @classmethod
    def validate_type(cls, v: str) -> str:
        extension = v.lower().lstrip('.')
        if extension not in EXTENSION_FORMATS:
            raise ValueError(f"Unsupported image type: {v}")
        return extension


class Convert(Transformation):
    """Re-encode the image into another format."""

    name = "convert"
    Params = ConvertParams
    params: ConvertParams

    def transform(self, image: Image) -> None:
        target = self.params.type

        if EXTENSION_FORMATS[target] == EXTENSION_FORMATS.get(image.extension.lower()):
            return

        blob = self._backend.encode(self._backend.decode(image.blob), target)
        image.replace(blob, image.width, image.height)
        image.extension = target
