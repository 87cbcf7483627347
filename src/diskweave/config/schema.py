"""Pydantic models for sampling configuration."""
from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..geometry import BoundingBox


class RegionConfig(BaseModel):
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    box: tuple[float, float, float, float] | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("width", "height")
    @classmethod
    def _check_finite(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            raise ValueError("region extents must be finite")
        return v

    @model_validator(mode="after")
    def _check_form(self):  # type: ignore[override]
        has_size = self.width is not None or self.height is not None
        if self.box is not None:
            if has_size:
                raise ValueError("give either width/height or box, not both")
            x0, y0, x1, y1 = self.box
            if not all(math.isfinite(v) for v in self.box):
                raise ValueError("box corners must be finite")
            if x0 == x1 or y0 == y1:
                raise ValueError("box must have positive width and height")
        elif self.width is None or self.height is None:
            raise ValueError("region needs both width and height (or a box)")
        return self

    @property
    def is_box(self) -> bool:
        return self.box is not None

    def bounding_box(self) -> BoundingBox:
        if self.box is None:
            return BoundingBox.from_size(self.width, self.height)
        return BoundingBox.from_corners(*self.box)


class SamplingConfig(BaseModel):
    region: RegionConfig
    min_distance: float = Field(gt=0)
    attempts: int = Field(default=20, ge=1)
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("min_distance")
    @classmethod
    def _check_distance(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("min_distance must be finite")
        return v


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class OutputConfig(BaseModel):
    points_path: str = "out/points.json"
    plot_path: str | None = None
    show_disks: bool = False

    model_config = ConfigDict(extra="forbid")


class Profile(BaseModel):
    sampling: SamplingConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "RegionConfig",
    "SamplingConfig",
    "LoggingConfig",
    "OutputConfig",
    "Profile",
]
