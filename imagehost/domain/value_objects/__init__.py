"""Value objects - immutable data with validation."""

from .geometry import Point, Size, Region, half_offset
from .config import PipelineConfig

__all__ = [
    'Point',
    'Size',
    'Region',
    'half_offset',
    'PipelineConfig',
]
