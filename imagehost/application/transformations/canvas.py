"""Canvas transformation - place the image on a new, possibly smaller, canvas."""

from __future__ import annotations

import logging

from ...config import PlacementMode
from ...domain.entities.image import Image
from ...domain.services.canvas_layout import plan_canvas
from ...domain.value_objects.geometry import Point, Size
from .base import Transformation, TransformationParams

logger = logging.getLogger(__name__)


class CanvasParams(TransformationParams):
    """Parameters for :class:`Canvas`.

    ``x`` and ``y`` are only used on axes the mode does not center.
    """
    width: int
    height: int
    mode: PlacementMode = PlacementMode.FREE
    x: int = 0
    y: int = 0
    bg: str | None = None


class Canvas(Transformation):
    """Paste the existing image onto a blank canvas.

    When the image is larger than the canvas it is cropped first, from the
    center on centered axes and from the top-left otherwise.
    """

    name = "canvas"
    Params = CanvasParams
    params: CanvasParams

    def transform(self, image: Image) -> None:
        p = self.params
        backend = self._backend

        color = backend.parse_color(p.bg) if p.bg else None
        canvas = backend.create_canvas(p.width, p.height, color)

        # Decoded separately from the canvas
        source = backend.decode(image.blob)

        layout = plan_canvas(
            source=Size(image.width, image.height),
            canvas=Size(p.width, p.height),
            mode=p.mode,
            offset=Point(p.x, p.y)
        )

        if layout.needs_crop:
            crop = layout.crop
            logger.debug(
                f"Cropping {image.width}x{image.height} to "
                f"{crop.width}x{crop.height} at ({crop.x}, {crop.y})"
            )
            source = backend.crop(source, crop.x, crop.y, crop.width, crop.height)

        result = backend.paste(canvas, source, layout.placement.x, layout.placement.y)
        blob = backend.encode(result, image.extension)

        image.replace(blob, p.width, p.height)
