"""Image backend port - interface to the pixel-manipulation engine."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Opaque handle to a decoded image; only the backend that produced it
# knows what it is.
DecodedImage = Any
Color = Any


@runtime_checkable
class ImageBackend(Protocol):
    """Port for native image processing.

    Every method returns a new buffer and leaves its inputs untouched.
    Failures are raised as ``ImageBackendError``.

    Implementations: Pillow.
    """

    @property
    def name(self) -> str:
        """Backend name."""
        ...

    def decode(self, blob: bytes) -> DecodedImage:
        """Decode an encoded payload."""
        ...

    def size(self, image: DecodedImage) -> tuple[int, int]:
        """Return (width, height) of a decoded image."""
        ...

    def format(self, image: DecodedImage) -> str | None:
        """Return the extension the image was decoded from, if known."""
        ...

    def parse_color(self, spec: str) -> Color:
        """Parse a color specifier such as ``fff`` or ``#ff0000``."""
        ...

    def create_canvas(
        self,
        width: int,
        height: int,
        color: Color | None = None
    ) -> DecodedImage:
        """Create a blank canvas, transparent unless a color is given."""
        ...

    def crop(
        self,
        image: DecodedImage,
        x: int,
        y: int,
        width: int,
        height: int
    ) -> DecodedImage:
        """Cut out a region."""
        ...

    def paste(
        self,
        canvas: DecodedImage,
        source: DecodedImage,
        x: int,
        y: int
    ) -> DecodedImage:
        """Return a copy of ``canvas`` with ``source`` placed at (x, y)."""
        ...

    def rotate(
        self,
        image: DecodedImage,
        angle: float,
        color: Color | None = None
    ) -> DecodedImage:
        """Rotate clockwise by ``angle`` degrees, growing to fit."""
        ...

    def flip_horizontal(self, image: DecodedImage) -> DecodedImage:
        """Mirror left-right."""
        ...

    def flip_vertical(self, image: DecodedImage) -> DecodedImage:
        """Mirror top-bottom."""
        ...

    def resize(self, image: DecodedImage, width: int, height: int) -> DecodedImage:
        """Scale to exactly width x height."""
        ...

    def desaturate(self, image: DecodedImage) -> DecodedImage:
        """Convert to grayscale, keeping any alpha channel."""
        ...

    def encode(
        self,
        image: DecodedImage,
        extension: str,
        quality: int | None = None
    ) -> bytes:
        """Encode into the format identified by ``extension``."""
        ...
