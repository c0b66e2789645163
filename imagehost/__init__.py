"""imagehost - transformation pipeline for an image hosting service."""

__version__ = "1.0.0"

from .adapters.backends import PillowBackend
from .application import (
    TransformationDispatcher,
    TransformationRequest,
    load_image,
    parse_chain,
    parse_transformation,
)
from .domain import ChainResult, Image, PipelineConfig
from .exceptions import (
    ImageHostError,
    ErrorKind,
    ValidationError,
    TransformationError,
    ConfigurationError,
    ImageBackendError,
)
from .infrastructure import PluginRegistry
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'Image',
    'ChainResult',
    'PipelineConfig',
    'PillowBackend',
    'PluginRegistry',
    'TransformationDispatcher',
    'TransformationRequest',
    'load_image',
    'parse_chain',
    'parse_transformation',
    'setup_logging',
    # Exceptions
    'ImageHostError',
    'ErrorKind',
    'ValidationError',
    'TransformationError',
    'ConfigurationError',
    'ImageBackendError',
]
