"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bytary.formats import Format


class ConversionEdgeConfig(BaseModel):
    """Validated description of one direct conversion edge."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    source: Format
    target: Format
    converter: Callable[..., object]
    cost: int = Field(default=1, gt=0)


class ConversionRequestConfig(BaseModel):
    """Validated parameters of a single conversion request."""

    model_config = ConfigDict(extra="forbid")

    source: str
    target: str
    space_interval: int = Field(default=0, ge=0)
    wrap_interval: int = Field(default=0, ge=0)
    converter_modules: list[str] = Field(default_factory=list)

    @field_validator("converter_modules")
    @classmethod
    def _validate_modules(cls, value: list[str]) -> list[str]:
        if any(not item.strip() for item in value):
            raise ValueError("converter module entries cannot be empty.")
        return value
