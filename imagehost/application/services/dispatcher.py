"""Transformation dispatcher - runs a chain of named transformations."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from ...domain.entities.image import ChainResult, Image
from ...domain.value_objects.config import PipelineConfig
from ...exceptions import ConfigurationError, ImageHostError, ValidationError
from ..ports.event_publisher import EventPublisher, SimpleEventPublisher, TransformationEvent
from ..ports.image_backend import ImageBackend
from ..transformations.base import Transformation

logger = logging.getLogger(__name__)

EVENT_PREFIX = "image.transformation."


@dataclass(frozen=True, slots=True)
class TransformationRequest:
    """One entry of a requested chain: a name and its raw parameters."""
    name: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class InvocationContext:
    """Binds one image and one parameter mapping to one transformation call."""
    name: str
    image: Image
    params: Mapping[str, Any]

    @property
    def event_name(self) -> str:
        return f"{EVENT_PREFIX}{self.name}"


class TransformationDispatcher:
    """Dispatch transformation chains against an image.

    The name -> transformation table is passed in explicitly, so separate
    dispatchers never share registrations. A dispatcher keeps no
    per-request state and may serve several threads, each with its own
    Image.
    """

    def __init__(
        self,
        transformations: Mapping[str, type[Transformation]],
        backend: ImageBackend,
        config: PipelineConfig | None = None,
        events: EventPublisher | None = None
    ):
        self._transformations = dict(transformations)
        self._backend = backend
        self._config = config or PipelineConfig()
        self._events = events or SimpleEventPublisher()

    @property
    def names(self) -> list[str]:
        """Names of the transformations this dispatcher can run."""
        return sorted(n for n in self._transformations if self._config.is_enabled(n))

    def resolve(self, name: str) -> type[Transformation]:
        """Look up a transformation class by name.

        Raises:
            ConfigurationError: If the name is unknown or disabled
        """
        transformation = self._transformations.get(name)

        if transformation is None or not self._config.is_enabled(name):
            available = ", ".join(self.names)
            raise ConfigurationError(
                f"Unknown transformation: {name}. Available: {available}",
                config_key=name
            )

        return transformation

    def dispatch(self, ctx: InvocationContext) -> None:
        """Validate parameters and apply one transformation to ``ctx.image``."""
        transformation = self.resolve(ctx.name).from_params(ctx.params, self._backend)
        logger.debug(f"Applying {transformation!r}")

        transformation.apply(ctx.image)
        ctx.image.transformed = True

        self._events.publish(TransformationEvent(
            name=ctx.event_name,
            transformation=ctx.name,
            stage="applied",
            width=ctx.image.width,
            height=ctx.image.height
        ))

    def apply_chain(
        self,
        image: Image,
        chain: Sequence[TransformationRequest],
        cancel: threading.Event | None = None,
        applied: list[str] | None = None
    ) -> list[str]:
        """Apply transformations in order, mutating ``image`` in place.

        Every name is resolved before the first transformation runs. The
        chain stops at the first failure and the error propagates
        unchanged. When ``cancel`` is set the chain is abandoned after the
        running transformation completes.

        Args:
            image: Image to transform
            chain: Requested transformations in order
            cancel: Optional cancellation flag
            applied: Optional list to record applied names into; it is
                filled in as the chain runs, so it is also valid after a
                failure

        Returns:
            Names of the transformations that were applied

        Raises:
            ConfigurationError: Unknown transformation name
            ValidationError: Invalid parameters or chain too long
            TransformationError: Backend failure
        """
        if len(chain) > self._config.max_transformations:
            raise ValidationError(
                f"Too many transformations: {len(chain)} "
                f"(maximum is {self._config.max_transformations})",
                field="t"
            )

        for request in chain:
            self.resolve(request.name)

        if applied is None:
            applied = []

        for request in chain:
            if cancel is not None and cancel.is_set():
                logger.info(f"Chain cancelled after {len(applied)} of {len(chain)} transformations")
                self._events.publish(TransformationEvent(
                    name=f"{EVENT_PREFIX}{request.name}",
                    transformation=request.name,
                    stage="cancelled"
                ))
                break

            ctx = InvocationContext(name=request.name, image=image, params=request.params)

            try:
                self.dispatch(ctx)
            except ImageHostError as e:
                logger.warning(f"Transformation {request.name} failed: {e}")
                self._events.publish(TransformationEvent(
                    name=ctx.event_name,
                    transformation=request.name,
                    stage="failed",
                    message=e.message
                ))
                raise

            applied.append(request.name)

        return applied

    def run_chain(
        self,
        image: Image,
        chain: Sequence[TransformationRequest],
        cancel: threading.Event | None = None
    ) -> ChainResult:
        """Like :meth:`apply_chain`, but report errors in the result."""
        start_time = time.time()
        applied: list[str] = []

        try:
            self.apply_chain(image, chain, cancel=cancel, applied=applied)
        except ImageHostError as e:
            elapsed = (time.time() - start_time) * 1000
            return ChainResult.failure(
                e, image=image, applied=applied, processing_time_ms=elapsed
            )

        elapsed = (time.time() - start_time) * 1000
        return ChainResult.success_result(
            image=image,
            applied=applied,
            cancelled=len(applied) < len(chain),
            processing_time_ms=elapsed
        )

    def subscribe_to_events(self, callback: Callable[[TransformationEvent], None]) -> None:
        """Subscribe to transformation events."""
        self._events.subscribe(callback)
