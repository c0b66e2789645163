"""Application layer - transformations and chain orchestration."""

from .services.dispatcher import TransformationDispatcher, TransformationRequest
from .services.chain_parser import parse_chain, parse_transformation
from .services.loader import load_image

__all__ = [
    'TransformationDispatcher',
    'TransformationRequest',
    'parse_chain',
    'parse_transformation',
    'load_image',
]
