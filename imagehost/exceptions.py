"""Custom exceptions for the imagehost transformation pipeline."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Discriminator carried by every pipeline error."""
    VALIDATION = "validation"
    TRANSFORMATION = "transformation"
    CONFIGURATION = "configuration"
    BACKEND = "backend"
    INTERNAL = "internal"


class ImageHostError(Exception):
    """Base exception for all pipeline errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
        status_code: HTTP-equivalent status the request layer should answer with
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ValidationError(ImageHostError):
    """A transformation parameter is missing or could not be coerced.

    Attributes:
        field: The parameter that failed validation (if applicable)
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR", status_code=400)
        self.field = field


class TransformationError(ImageHostError):
    """The image backend failed while a transformation was applied.

    Attributes:
        transformation: Name of the transformation that failed (if known)
    """

    kind = ErrorKind.TRANSFORMATION

    def __init__(self, message: str, transformation: Optional[str] = None):
        super().__init__(message, error_code="TRANSFORMATION_ERROR", status_code=400)
        self.transformation = transformation

    @property
    def cause(self) -> Optional[BaseException]:
        """The backend exception this error wraps."""
        return self.__cause__

    def __str__(self) -> str:
        if self.transformation:
            return f"{super().__str__()} (transformation: {self.transformation})"
        return super().__str__()


class ConfigurationError(ImageHostError):
    """A transformation is not registered or the pipeline is misconfigured.

    Attributes:
        config_key: The name or key that caused the error (if applicable)
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR", status_code=500)
        self.config_key = config_key


class ImageBackendError(ImageHostError):
    """Raised by image backends. Transformations never let it escape."""

    kind = ErrorKind.BACKEND

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, error_code="BACKEND_ERROR", status_code=500)
        self.operation = operation
