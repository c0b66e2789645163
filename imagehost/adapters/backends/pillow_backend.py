"""Pillow backend - implements ImageBackend port."""

from __future__ import annotations

import logging
import re
from io import BytesIO

from PIL import Image, ImageColor, ImageOps

from ...application.ports.image_backend import ImageBackend
from ...config import EXTENSION_FORMATS, FORMAT_EXTENSIONS, OPAQUE_FORMATS
from ...exceptions import ImageBackendError

logger = logging.getLogger(__name__)

# Bare hex colors ("fff", "ff0000", "ff000080") get a leading '#'
_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Pillow errors that mean "this input is bad", as opposed to a bug
_PIL_ERRORS = (
    OSError,
    ValueError,
    OverflowError,
    MemoryError,
    Image.DecompressionBombError,
)

# Pillow stores dimensions in C ints
MAX_DIMENSION = 2**31 - 1

WORKING_MODE = "RGBA"
TRANSPARENT = (0, 0, 0, 0)


def check_size(width: int, height: int, operation: str) -> None:
    """Reject sizes Pillow cannot or should not allocate.

    Raises:
        ImageBackendError: Non-positive size, a side beyond the C int
            range, or more pixels than ``Image.MAX_IMAGE_PIXELS``
    """
    if width <= 0 or height <= 0:
        raise ImageBackendError(
            f"Invalid size: {width}x{height}. Width and height must be positive",
            operation=operation
        )

    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise ImageBackendError(
            f"Invalid size: {width}x{height}. Width and height must not exceed {MAX_DIMENSION}",
            operation=operation
        )

    max_pixels = Image.MAX_IMAGE_PIXELS
    if max_pixels is not None and width * height > max_pixels:
        raise ImageBackendError(
            f"Image too large: {width}x{height} exceeds the limit of {max_pixels} pixels",
            operation=operation
        )


class PillowBackend(ImageBackend):
    """Adapter for the Pillow imaging library.

    Decoded images are normalized to RGBA so canvases, pastes and
    rotations share one mode; opaque formats drop the alpha channel again
    on encode. Stateless, so one instance can serve several threads.
    """

    @property
    def name(self) -> str:
        return "Pillow"

    def decode(self, blob: bytes) -> Image.Image:
        try:
            image = Image.open(BytesIO(blob))
            image.load()
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to decode image: {e}", operation="decode") from e

        source_format = image.format
        if image.mode != WORKING_MODE:
            image = image.convert(WORKING_MODE)
        image.info["source_format"] = source_format
        return image

    def size(self, image: Image.Image) -> tuple[int, int]:
        return image.size

    def format(self, image: Image.Image) -> str | None:
        source_format = image.format or image.info.get("source_format")
        return FORMAT_EXTENSIONS.get(source_format) if source_format else None

    def parse_color(self, spec: str) -> tuple[int, ...]:
        value = spec.strip()
        if _BARE_HEX.match(value):
            value = f"#{value}"

        try:
            return ImageColor.getcolor(value, WORKING_MODE)
        except ValueError as e:
            raise ImageBackendError(
                f"Invalid color: {spec!r} ({e})", operation="parse_color"
            ) from e

    def create_canvas(
        self,
        width: int,
        height: int,
        color: tuple[int, ...] | None = None
    ) -> Image.Image:
        check_size(width, height, "create_canvas")

        try:
            return Image.new(WORKING_MODE, (width, height), color if color is not None else TRANSPARENT)
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to create canvas: {e}", operation="create_canvas") from e

    def crop(
        self,
        image: Image.Image,
        x: int,
        y: int,
        width: int,
        height: int
    ) -> Image.Image:
        check_size(width, height, "crop")

        try:
            return image.crop((x, y, x + width, y + height))
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to crop image: {e}", operation="crop") from e

    def paste(
        self,
        canvas: Image.Image,
        source: Image.Image,
        x: int,
        y: int
    ) -> Image.Image:
        result = canvas.copy()
        try:
            result.paste(source, (x, y))
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to paste image: {e}", operation="paste") from e
        return result

    def rotate(
        self,
        image: Image.Image,
        angle: float,
        color: tuple[int, ...] | None = None
    ) -> Image.Image:
        try:
            # Pillow rotates counter-clockwise
            return image.rotate(
                -angle,
                resample=Image.Resampling.BICUBIC,
                expand=True,
                fillcolor=color
            )
        except _PIL_ERRORS as e:
            raise ImageBackendError(
                f"Unable to rotate image by {angle}: {e}", operation="rotate"
            ) from e

    def flip_horizontal(self, image: Image.Image) -> Image.Image:
        try:
            return ImageOps.mirror(image)
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to flip image: {e}", operation="flip_horizontal") from e

    def flip_vertical(self, image: Image.Image) -> Image.Image:
        try:
            return ImageOps.flip(image)
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to flip image: {e}", operation="flip_vertical") from e

    def resize(self, image: Image.Image, width: int, height: int) -> Image.Image:
        check_size(width, height, "resize")

        try:
            return image.resize((width, height), Image.Resampling.LANCZOS)
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to resize image: {e}", operation="resize") from e

    def desaturate(self, image: Image.Image) -> Image.Image:
        try:
            gray = image.convert("L")
            if "A" in image.getbands():
                return Image.merge("RGBA", (gray, gray, gray, image.getchannel("A")))
            return Image.merge("RGB", (gray, gray, gray))
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to desaturate image: {e}", operation="desaturate") from e

    def encode(
        self,
        image: Image.Image,
        extension: str,
        quality: int | None = None
    ) -> bytes:
        pil_format = EXTENSION_FORMATS.get(extension.lower().lstrip('.'))
        if pil_format is None:
            raise ImageBackendError(f"Unsupported image format: {extension}", operation="encode")

        if quality is not None and not 0 <= quality <= 100:
            raise ImageBackendError(
                f"Invalid quality: {quality}. Quality must be between 0 and 100",
                operation="encode"
            )

        options: dict[str, int] = {}
        if quality is not None:
            if pil_format == "PNG":
                # zlib level, as in ImageMagick's PNG quality tens digit
                options["compress_level"] = min(9, quality // 10)
            elif pil_format in ("JPEG", "WEBP"):
                options["quality"] = quality

        buffer = BytesIO()
        try:
            if pil_format in OPAQUE_FORMATS and image.mode not in ("RGB", "L"):
                image = image.convert("RGB")
            image.save(buffer, format=pil_format, **options)
        except _PIL_ERRORS as e:
            raise ImageBackendError(f"Unable to encode image as {extension}: {e}", operation="encode") from e

        logger.debug(f"Encoded {image.size[0]}x{image.size[1]} {pil_format} ({buffer.tell()} bytes)")
        return buffer.getvalue()
