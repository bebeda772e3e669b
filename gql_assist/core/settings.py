"""Settings for locating the schema and rendering declarations.

Values come from keyword arguments or, through `from_env`, from
`GQL_ASSIST_*` environment variables:

    GQL_ASSIST_SCHEMA_FILE   schema path relative to the workspace root
    GQL_ASSIST_TARGET        target language of the declarations
    GQL_ASSIST_LOG_LEVEL     logging level name used by the CLI
"""

import logging
import os
from collections.abc import Mapping
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, field_validator

from .keywords import TARGETS

ENV_PREFIX = "GQL_ASSIST_"
DEFAULT_SCHEMA_FILE = "schema.graphql"


class AssistSettings(BaseModel):
    """Validated settings."""

    model_config = ConfigDict(frozen=True)

    schema_file: str = DEFAULT_SCHEMA_FILE
    target: str = "java"
    log_level: str = "WARNING"

    @field_validator("schema_file")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        path = PurePath(value)
        if not value or path.is_absolute() or ".." in path.parts:
            raise ValueError("schema_file must be a path inside the workspace root")
        return value

    @field_validator("target")
    @classmethod
    def _known_target(cls, value: str) -> str:
        if value not in TARGETS:
            raise ValueError(f"unknown target {value!r}, expected one of {sorted(TARGETS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _logging_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "AssistSettings":
        """Build settings from the environment; non-None overrides win."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
