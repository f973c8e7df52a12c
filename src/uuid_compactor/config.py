"""
Configuration for uuid-compactor.

Settings are plain validated values passed to ``UuidCompactor``; nothing is
read from files or the environment.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CompactorConfig(BaseModel):
    """Compactor configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_encoding: Literal["base64", "base32"] = Field(
        default="base64",
        description="Encoding used by compact() (base64: 22 chars, base32: 26 chars)",
    )


# Default configuration instance
DEFAULT_CONFIG = CompactorConfig()
