"""Image entity - the in-flight image a transformation chain works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...config import DEFAULT_EXTENSION, MIME_TYPES

if TYPE_CHECKING:
    from ...exceptions import ImageHostError


@dataclass(slots=True)
class Image:
    """Mutable image under processing.

    ``width`` and ``height`` always describe what ``blob`` decodes to.
    Transformations change them only through :meth:`replace`, which swaps
    all three at once.
    """
    blob: bytes
    width: int
    height: int
    extension: str = DEFAULT_EXTENSION
    transformed: bool = False

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def mime_type(self) -> str:
        return MIME_TYPES.get(self.extension.lower(), "application/octet-stream")

    @property
    def filesize(self) -> int:
        return len(self.blob)

    def replace(self, blob: bytes, width: int, height: int) -> None:
        """Swap in a new payload together with its dimensions."""
        self.blob = blob
        self.width = width
        self.height = height
        self.transformed = True

    def to_array(self) -> object:
        """Decode the payload into a numpy array (H x W x bands)."""
        # Lazy import - domain doesn't depend on PIL
        from io import BytesIO

        import numpy as np
        from PIL import Image as PILImage

        with PILImage.open(BytesIO(self.blob)) as pil_image:
            return np.array(pil_image)


@dataclass
class ChainResult:
    """Result of running a transformation chain."""
    success: bool
    image: Image | None = None
    applied: list[str] = field(default_factory=list)
    cancelled: bool = False
    error: ImageHostError | None = None
    processing_time_ms: float = 0.0

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

    @property
    def error_kind(self) -> str | None:
        return self.error.kind.value if self.error is not None else None

    @classmethod
    def failure(
        cls,
        error: ImageHostError,
        image: Image | None = None,
        applied: list[str] | None = None,
        processing_time_ms: float = 0.0
    ) -> ChainResult:
        """Create a failure result."""
        return cls(
            success=False,
            image=image,
            applied=list(applied or []),
            error=error,
            processing_time_ms=processing_time_ms
        )

    @classmethod
    def success_result(
        cls,
        image: Image,
        applied: list[str],
        cancelled: bool = False,
        processing_time_ms: float = 0.0
    ) -> ChainResult:
        """Create a success result."""
        return cls(
            success=True,
            image=image,
            applied=list(applied),
            cancelled=cancelled,
            processing_time_ms=processing_time_ms
        )
