"""
Validated configuration for one maze request.

Collects everything a caller (or the command line) decides before
generation: requested size, algorithm, animation delay, seed, and
optional raster output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mazegen.generators import MazeAlgorithm
from mazegen.geometry import normalize_dimension
from mazegen.hooks.visualization import MAX_DELAY_MS


class MazeConfig(BaseModel):
    """
    Maze request configuration.

    Width and height are the requested sizes; the grid clamps them to at
    least 5 and forces them odd. `effective_width` and `effective_height`
    report the resulting size.
    """

    width: int = Field(..., ge=0, description="Requested number of columns")
    height: int = Field(..., ge=0, description="Requested number of rows")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.BACKTRACKER, description="Generation algorithm")
    delay_ms: int = Field(0, ge=0, le=MAX_DELAY_MS, description="Animation delay per step; 0 shows only the result")
    seed: int | None = Field(None, description="Seed for reproducible mazes; None uses OS entropy")
    tga_path: Path | None = Field(None, description="Write a grayscale TGA image here")
    tga_origin: Literal["upper_left", "lower_left"] = Field("upper_left", description="TGA pixel row order")
    show_text: bool = Field(True, description="Print the Unicode diagram of the finished maze")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, v: Any) -> MazeAlgorithm:
        return MazeAlgorithm.parse(v)

    @property
    def effective_width(self) -> int:
        return normalize_dimension(self.width)

    @property
    def effective_height(self) -> int:
        return normalize_dimension(self.height)

    @property
    def animated(self) -> bool:
        return self.delay_ms > 0
