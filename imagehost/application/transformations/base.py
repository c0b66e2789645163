"""Transformation contract - parameter binding and backend error mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, model_validator
from pydantic import ValidationError as PydanticValidationError

from ...domain.entities.image import Image
from ...exceptions import ImageBackendError, TransformationError, ValidationError
from ..ports.image_backend import ImageBackend

logger = logging.getLogger(__name__)

P = TypeVar('P', bound='TransformationParams')
T = TypeVar('T', bound='Transformation')


class TransformationParams(BaseModel):
    """Base for per-transformation parameter models.

    Unknown keys are ignored. Blank values count as absent, so optional
    keys fall back to their defaults and required keys are reported
    missing.
    """

    model_config = {"extra": "ignore", "frozen": True}

    @model_validator(mode='before')
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {
                key: value for key, value in data.items()
                if value is not None and value != ""
            }
        return data


def _describe(error: dict) -> str:
    ctx_error = error.get("ctx", {}).get("error")
    return str(ctx_error) if ctx_error is not None else error["msg"]


def bind_params(model: type[P], raw: Mapping[str, Any] | None) -> P:
    """Validate and coerce a raw parameter mapping.

    Args:
        model: Parameter model of the transformation
        raw: Parameters as supplied by the caller (query string, CLI, ...)

    Returns:
        Bound parameter model

    Raises:
        ValidationError: A required parameter is missing or a value
            cannot be coerced. Missing parameters are reported first.
    """
    try:
        return model.model_validate(dict(raw or {}))
    except PydanticValidationError as e:
        errors = e.errors()
        missing = [err for err in errors if err["type"] == "missing"]

        if missing:
            field = str(missing[0]["loc"][0])
            raise ValidationError(
                f"Missing required parameter: {field}", field=field
            ) from e

        first = errors[0]
        if first["loc"]:
            field = str(first["loc"][0])
            raise ValidationError(
                f"Invalid value for parameter {field}: {_describe(first)}",
                field=field
            ) from e

        raise ValidationError(_describe(first)) from e


@contextmanager
def backend_errors(transformation: str) -> Iterator[None]:
    """Re-raise backend failures as client-facing transformation errors."""
    try:
        yield
    except ImageBackendError as e:
        logger.warning(f"Backend failure in {transformation}: {e.message}")
        raise TransformationError(e.message, transformation=transformation) from e


class Transformation:
    """Base class for transformations.

    Subclasses set ``name`` and ``Params`` and implement ``transform``.
    Parameters are bound at construction, so ``apply`` never starts
    with invalid input.
    """

    name: ClassVar[str] = ""
    Params: ClassVar[type[TransformationParams]] = TransformationParams

    def __init__(self, params: TransformationParams, backend: ImageBackend):
        self.params = params
        self._backend = backend

    @classmethod
    def from_params(
        cls: type[T],
        raw: Mapping[str, Any] | None,
        backend: ImageBackend
    ) -> T:
        """Validate raw parameters and build the transformation."""
        return cls(bind_params(cls.Params, raw), backend)

    def apply(self, image: Image) -> None:
        """Apply to ``image``; backend failures become TransformationError."""
        with backend_errors(self.name):
            self.transform(image)

    def transform(self, image: Image) -> None:
        """Run the algorithm. Must call ``image.replace`` at most once."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params!r})"
