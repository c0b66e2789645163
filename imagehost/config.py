"""Configuration and constants for the imagehost transformation pipeline."""

from enum import Enum


class PlacementMode(str, Enum):
    """How the canvas transformation positions the existing image."""
    FREE = "free"
    CENTER = "center"
    CENTER_X = "center-x"
    CENTER_Y = "center-y"

    @property
    def centers_x(self) -> bool:
        return self in (PlacementMode.CENTER, PlacementMode.CENTER_X)

    @property
    def centers_y(self) -> bool:
        return self in (PlacementMode.CENTER, PlacementMode.CENTER_Y)


class BorderMode(str, Enum):
    """Border placement: grow the image or paint over its edge."""
    OUTBOUND = "outbound"
    INLINE = "inline"


# Extension -> Pillow format name
EXTENSION_FORMATS: dict[str, str] = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "gif": "GIF",
    "webp": "WEBP",
    "bmp": "BMP",
    "tif": "TIFF",
    "tiff": "TIFF",
}

# Pillow format name -> canonical extension
FORMAT_EXTENSIONS: dict[str, str] = {
    "PNG": "png",
    "JPEG": "jpg",
    "GIF": "gif",
    "WEBP": "webp",
    "BMP": "bmp",
    "TIFF": "tif",
}

MIME_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "tif": "image/tiff",
    "tiff": "image/tiff",
}

# Formats that cannot store an alpha channel
OPAQUE_FORMATS: frozenset[str] = frozenset({"JPEG", "BMP"})

DEFAULT_EXTENSION = "png"

# Chain limits
DEFAULT_MAX_TRANSFORMATIONS = 20

# Environment
ENV_PREFIX = "IMAGEHOST_"

# Entry point group for third-party transformations
TRANSFORMATION_ENTRY_POINT_GROUP = "imagehost.transformations"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
