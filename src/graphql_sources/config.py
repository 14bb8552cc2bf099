"""Configuration models for GraphQL Sources."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .collector import normalize_extension


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"


class CollectorConfig(BaseModel):
    """Settings for a collect-and-process run."""

    paths: list[Path] = Field(..., description="Files or directories to scan for GraphQL")
    extensions: Optional[list[str]] = Field(
        None, description="File extensions to filter (e.g., ['.graphql', '.ts'])"
    )
    output_format: OutputFormat = Field(OutputFormat.HUMAN, description="Output format")

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if not value:
            return None
        return [normalize_extension(ext) for ext in value]
