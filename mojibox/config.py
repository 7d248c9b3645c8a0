"""
Environment variable settings resolution.
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel: TypeAlias = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_PREFIX = "MOJIBOX_"


class MojiboxSettings(BaseModel):
    """Defaults the CLI picks up from the environment."""

    model_config = ConfigDict(extra="forbid")

    log_level: LogLevel = "WARNING"
    segmenter: str = "regex"
    hex_lowercase: bool = False  # pydantic bool parsing: 1/0, true/false, yes/no, on/off

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> MojiboxSettings:
    """
    Build settings from ``MOJIBOX_*`` environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for field in MojiboxSettings.model_fields:
        raw = env.get(f"{ENV_PREFIX}{field.upper()}")
        if raw:
            values[field] = raw
    return MojiboxSettings.model_validate(values)
