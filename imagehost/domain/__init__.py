"""Domain layer - pure business logic, no image backend dependencies."""

from .entities.image import Image, ChainResult
from .services.canvas_layout import CanvasLayout, plan_canvas
from .value_objects.config import PipelineConfig
from .value_objects.geometry import Point, Size, Region, half_offset

__all__ = [
    # Entities
    'Image',
    'ChainResult',
    # Services
    'CanvasLayout',
    'plan_canvas',
    # Value Objects
    'PipelineConfig',
    'Point',
    'Size',
    'Region',
    'half_offset',
]
