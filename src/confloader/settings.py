"""
Loader settings.

Uses Pydantic for validation.
"""
from pydantic import BaseModel, Field, field_validator


class LoaderSettings(BaseModel):
    """Tunable markers used while resolving and loading configuration paths."""
    optional_marker: str = Field(default="?", description="Prefix marking a sequence entry as optional")
    dist_marker: str = Field(default="dist", description="Trailing filename component ignored for format detection")
    directory_pattern: str = Field(default="*.*", description="Glob used to expand a directory")

    @field_validator('optional_marker')
    @classmethod
    def single_character(cls, v: str) -> str:
        """The optional marker is checked against the first character only."""
        if len(v) != 1:
            raise ValueError("optional_marker must be exactly one character")
        return v

    @field_validator('dist_marker')
    @classmethod
    def plain_component(cls, v: str) -> str:
        if not v or "." in v:
            raise ValueError("dist_marker must be a non-empty name without dots")
        return v

    @field_validator('directory_pattern')
    @classmethod
    def has_wildcard(cls, v: str) -> str:
        if "*" not in v and "?" not in v:
            raise ValueError("directory_pattern must contain a wildcard")
        if "/" in v or "\\" in v:
            raise ValueError("directory_pattern must not contain a path separator")
        return v


DEFAULT_SETTINGS = LoaderSettings()
