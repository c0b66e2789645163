"""Parse transformation specs of the form ``name:key=value,key=value``."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ...exceptions import ValidationError
from .dispatcher import TransformationRequest

_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def parse_transformation(spec: str) -> TransformationRequest:
    """Parse one transformation spec.

    ``flipHorizontally`` has no parameters, ``canvas:width=100,height=50``
    has two. Values are kept as strings; the transformation coerces them.

    Raises:
        ValidationError: If the spec is malformed
    """
    name, _, raw_params = spec.strip().partition(":")
    name = name.strip()

    if not _NAME_PATTERN.match(name):
        raise ValidationError(f"Invalid transformation: {spec!r}", field="t")

    params: dict[str, str] = {}

    if raw_params.strip():
        for pair in raw_params.split(","):
            key, sep, value = pair.partition("=")
            key = key.strip()
            if not sep or not key:
                raise ValidationError(
                    f"Invalid parameter {pair!r} in transformation {name}",
                    field="t"
                )
            params[key] = value.strip()

    return TransformationRequest(name=name, params=params)


def parse_chain(specs: Iterable[str]) -> list[TransformationRequest]:
    """Parse a list of transformation specs, keeping their order."""
    return [parse_transformation(spec) for spec in specs]
