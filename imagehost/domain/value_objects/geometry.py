"""Geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass


def half_offset(delta: int) -> int:
    """Halve a pixel difference, truncating toward zero.

    ``half_offset(-5)`` is ``-2``, not ``-3`` as floor division would give.
    """
    return int(delta / 2)


@dataclass(frozen=True, slots=True)
class Point:
    """2D point with integer coordinates."""
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Size:
    """Width and height of an image or region."""
    width: int
    height: int

    @property
    def ratio(self) -> float:
        """Aspect ratio (width / height)."""
        return self.width / self.height


@dataclass(frozen=True, slots=True)
class Region:
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def within(self, bounds: Size) -> bool:
        """Check that the region lies inside an image of the given size."""
        return (
            self.x >= 0 and self.y >= 0 and
            self.right <= bounds.width and
            self.bottom <= bounds.height
        )
