"""
Pydantic models for strongly-typed tool configuration.

Configuration is optional: without a config file every option keeps its
default. A file, when given, is a JSON object with any subset of the fields.
"""

import codecs
import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TabbyConfig(BaseModel):
    """Runtime configuration for reading and listing files."""

    model_config = {"extra": "forbid"}

    encoding: str = Field("utf-8", description="Text encoding used to decode file contents")
    max_file_size: Optional[int] = Field(
        None,
        description="Maximum file size in bytes (None = no limit)",
        gt=0
    )
    sort_all_files: bool = Field(
        False,
        description="Sort file names found by --all (default: directory order)"
    )
    include_hidden: bool = Field(
        True,
        description="Include dot-files found by --all"
    )

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, value):
        """Ensure the encoding names a known codec."""
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}")
        return value

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TabbyConfig":
        """
        Create TabbyConfig from dictionary with validation.

        Raises:
            ValidationError: If configuration is invalid
        """
        return cls.model_validate(config_dict)

    @classmethod
    def from_json_file(cls, config_path) -> "TabbyConfig":
        """
        Load and validate configuration from JSON file.

        Raises:
            ValidationError: If configuration is invalid
            FileNotFoundError: If file doesn't exist
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path, encoding='utf-8') as f:
            config_dict = json.load(f)

        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file must contain a JSON object: {config_path}")

        return cls.from_dict(config_dict)
