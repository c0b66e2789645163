"""Adapters - implementations of application ports."""

from .backends import PillowBackend

__all__ = ['PillowBackend']
