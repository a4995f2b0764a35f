"""Pydantic schemas for configuration and serialized metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class InputSettings(BaseModel):
    """Where the legacy save file is read from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_folder: str
    input_file: str

    @field_validator("input_folder", "input_file")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("input paths cannot be empty.")
        return value


class OutputSettings(BaseModel):
    """Where and how the converted world is delivered."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_mode: int = Field(default=0, strict=True)
    output_folder: str
    output_file: str
    output_website: str

    @field_validator("output_folder", "output_file", "output_website")
    @classmethod
    def _validate_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name} cannot be empty.")
        return value


class PluginSettings(BaseModel):
    """Optional plugin modules providing loaders/converters/serializers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    plugin_name: str | None = None
    plugin_modules: tuple[str, ...] = ()


class Configuration(BaseModel):
    """Validated, immutable run configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_settings: InputSettings
    output_settings: OutputSettings
    plugin_settings: PluginSettings = PluginSettings()


class WorldMetadata(BaseModel):
    """Companion metadata document emitted next to the world payload."""

    model_config = ConfigDict(extra="forbid")

    format: str
    name: str | None = None
    source_version: int = Field(ge=0)
    target_version: str
    encoding: str = "gzip+base64"
    size_bytes: int = Field(ge=0)
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    depth: int | None = Field(default=None, gt=0)
