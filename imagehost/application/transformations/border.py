"""Border transformation."""

from __future__ import annotations

from pydantic import Field

from ...config import BorderMode
from ...domain.entities.image import Image
from .base import Transformation, TransformationParams


class BorderParams(TransformationParams):
    color: str = "000000"
    width: int = Field(default=1, ge=0)
    height: int = Field(default=1, ge=0)
    mode: BorderMode = BorderMode.OUTBOUND


class Border(Transformation):
    """Draw a solid border around the image.

    ``outbound`` grows the image by the border on every side, ``inline``
    keeps the size and paints over the outer pixels.
    """

    name = "border"
    Params = BorderParams
    params: BorderParams

    def transform(self, image: Image) -> None:
        p = self.params
        backend = self._backend
        color = backend.parse_color(p.color)
        source = backend.decode(image.blob)

        if p.mode is BorderMode.OUTBOUND:
            width = image.width + 2 * p.width
            height = image.height + 2 * p.height
            canvas = backend.create_canvas(width, height, color)
            result = backend.paste(canvas, source, p.width, p.height)
        else:
            width, height = image.width, image.height
            canvas = backend.create_canvas(width, height, color)
            inner_width = width - 2 * p.width
            inner_height = height - 2 * p.height

            if inner_width > 0 and inner_height > 0:
                inner = backend.crop(source, p.width, p.height, inner_width, inner_height)
                result = backend.paste(canvas, inner, p.width, p.height)
            else:
                # Border covers the whole image
                result = canvas

        image.replace(backend.encode(result, image.extension), width, height)
