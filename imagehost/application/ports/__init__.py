"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .image_backend import ImageBackend, DecodedImage, Color
from .event_publisher import EventPublisher, TransformationEvent, SimpleEventPublisher

__all__ = [
    'ImageBackend',
    'DecodedImage',
    'Color',
    'EventPublisher',
    'TransformationEvent',
    'SimpleEventPublisher',
]
