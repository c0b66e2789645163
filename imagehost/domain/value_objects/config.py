"""Pipeline configuration value object with validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ...config import DEFAULT_MAX_TRANSFORMATIONS, ENV_PREFIX
from ...exceptions import ConfigurationError


class PipelineConfig(BaseModel):
    """Settings shared by every chain a dispatcher runs."""

    model_config = {"frozen": True}

    max_transformations: int = Field(default=DEFAULT_MAX_TRANSFORMATIONS, ge=1, le=100)
    disabled_transformations: frozenset[str] = Field(default_factory=frozenset)
    log_level: str = "INFO"

    @field_validator('disabled_transformations', mode='before')
    @classmethod
    def split_names(cls, v: object) -> object:
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return frozenset(name.strip() for name in v.split(',') if name.strip())
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def is_enabled(self, name: str) -> bool:
        return name not in self.disabled_transformations

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PipelineConfig:
        """Build a config from ``IMAGEHOST_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for field_name in cls.model_fields:
            key = f"{ENV_PREFIX}{field_name.upper()}"
            if key in environ:
                values[field_name] = environ[key]

        try:
            return cls(**values)
        except PydanticValidationError as e:
            first = e.errors()[0]
            config_key = str(first["loc"][0]) if first["loc"] else None
            raise ConfigurationError(
                f"Invalid pipeline configuration: {first['msg']}",
                config_key=config_key
            ) from e
