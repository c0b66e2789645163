"""Canvas layout - where the existing image lands on a new canvas."""

from __future__ import annotations

from dataclasses import dataclass

from ...config import PlacementMode
from ..value_objects.geometry import Point, Region, Size, half_offset


@dataclass(frozen=True, slots=True)
class CanvasLayout:
    """Crop to apply to the source (if any) and where to paste it."""
    crop: Region | None
    placement: Point

    @property
    def needs_crop(self) -> bool:
        return self.crop is not None


def plan_canvas(
    source: Size,
    canvas: Size,
    mode: PlacementMode = PlacementMode.FREE,
    offset: Point = Point(0, 0)
) -> CanvasLayout:
    """Compute the crop and placement for pasting ``source`` onto ``canvas``.

    The source is cropped when it overflows the canvas on either axis. A
    centered axis crops from the middle, any other axis keeps its leading
    edge. Axes that fit keep their full source extent. Placement is then
    computed against the cropped size.

    Args:
        source: Size of the existing image
        canvas: Size of the new canvas
        mode: Placement mode
        offset: Placement used on axes that are not centered

    Returns:
        Layout with optional crop region and paste position
    """
    crop: Region | None = None
    placed = source

    if source.width > canvas.width or source.height > canvas.height:
        crop_x = 0
        crop_y = 0
        crop_width = min(canvas.width, source.width)
        crop_height = min(canvas.height, source.height)

        if source.width > canvas.width and mode.centers_x:
            crop_x = half_offset(source.width - canvas.width)

        if source.height > canvas.height and mode.centers_y:
            crop_y = half_offset(source.height - canvas.height)

        crop = Region(crop_x, crop_y, crop_width, crop_height)
        placed = crop.size

    x, y = offset.x, offset.y

    if mode.centers_x:
        x = half_offset(canvas.width - placed.width)

    if mode.centers_y:
        y = half_offset(canvas.height - placed.height)

    return CanvasLayout(crop=crop, placement=Point(x, y))
