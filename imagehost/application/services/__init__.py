"""Application services - run transformation chains."""

from .dispatcher import InvocationContext, TransformationDispatcher, TransformationRequest
from .chain_parser import parse_chain, parse_transformation
from .loader import load_image

__all__ = [
    'InvocationContext',
    'TransformationDispatcher',
    'TransformationRequest',
    'parse_chain',
    'parse_transformation',
    'load_image',
]
