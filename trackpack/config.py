"""
trackpack.config - Run configuration and validation.

There is no config file: values come from the defaults below, overridden
by command-line options.
"""

from __future__ import annotations

import os
import re
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from trackpack.exceptions import ConfigError


def default_ffmpeg_binary() -> str:
    """FFmpeg binary expected next to the working directory."""
    if os.name == "nt":
        return "./ffmpeg.exe"
    return "./ffmpeg"


class TrackpackConfig(BaseModel):
    """Resolved configuration for one extraction run."""

    ffmpeg_binary: str = Field(default_factory=default_ffmpeg_binary)
    media_extension: str = ".mp4"

    audio_format: str = "mp3"
    audio_bitrate: str = "129k"

    default_stream_index: int = Field(default=1, ge=0)
    default_label: str = "bz"
    archive_suffix: str = "_output"

    pause_on_exit: bool = True

    @field_validator("ffmpeg_binary", "default_label")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("media_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("media_extension must start with '.', e.g. '.mp4'")
        return v

    @field_validator("audio_format")
    @classmethod
    def validate_audio_format(cls, v: str) -> str:
        if not re.fullmatch(r"[a-z0-9]+", v):
            raise ValueError("audio_format must be a lowercase container name, e.g. 'mp3'")
        return v

    @field_validator("audio_bitrate")
    @classmethod
    def validate_bitrate(cls, v: str) -> str:
        if not re.fullmatch(r"\d+k", v):
            raise ValueError("audio_bitrate must look like '129k'")
        return v


def build_config(**overrides: Any) -> TrackpackConfig:
    """Build a validated config, ignoring overrides left as None.

    Raises:
        ConfigError: If any value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return TrackpackConfig(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
