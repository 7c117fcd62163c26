# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Chromaticity result types.

A chromaticity is the luminance-free position of a color on the CIE 1931
diagram:

    x = X / (X + Y + Z)
    y = Y / (X + Y + Z)

Pure black has X + Y + Z = 0, so its chromaticity is undefined. How the
converters answer for black is selected with BlackPolicy.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


# =============================================================================
# Black Input Policy
# =============================================================================


class BlackPolicy(Enum):
    """What the converters return when X + Y + Z = 0."""

    NAN = "nan"  # (nan, nan), plain IEEE 0/0
    RAISE = "raise"  # BlackInputError
    WHITE_POINT = "white_point"  # chromaticity of full-scale white


class BlackInputError(ValueError):
    """Raised for black input under BlackPolicy.RAISE."""


# =============================================================================
# Chromaticity
# =============================================================================


@dataclass(frozen=True, slots=True)
class Chromaticity:
    """
    A point on the CIE 1931 chromaticity diagram.

    Attributes:
        x: Red-ward coordinate, X / (X + Y + Z)
        y: Green-ward coordinate, Y / (X + Y + Z)

    Both coordinates may be NaN together, which is how an undefined (black)
    chromaticity is represented under BlackPolicy.NAN.
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate finite coordinates are on the diagram."""
        if math.isnan(self.x) != math.isnan(self.y):
            raise ValueError(
                f"x and y must both be defined or both be NaN, got ({self.x}, {self.y})"
            )
        if not math.isnan(self.x) and not 0.0 <= self.x <= 1.0:
            raise ValueError(f"x must be 0-1, got {self.x}")
        if not math.isnan(self.y) and not 0.0 <= self.y <= 1.0:
            raise ValueError(f"y must be 0-1, got {self.y}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @property
    def z(self) -> float:
        """Implied third coordinate, 1 - x - y."""
        return 1.0 - self.x - self.y

    @property
    def is_defined(self) -> bool:
        """False for the NaN chromaticity of black input."""
        return not math.isnan(self.x)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self, precision: Optional[int] = None) -> dict:
        """
        Serialize to dictionary.

        NaN coordinates become None so the result stays valid JSON.

        Args:
            precision: Round coordinates to this many decimals (None = full)
        """
        if not self.is_defined:
            return {"x": None, "y": None}
        if precision is None:
            return {"x": self.x, "y": self.y}
        return {"x": round(self.x, precision), "y": round(self.y, precision)}

    def to_json(self, precision: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(precision), separators=(",", ":"))

    @classmethod
    def from_dict(cls, d: dict) -> Chromaticity:
        """Deserialize from dictionary (None coordinates mean undefined)."""
        x = d["x"]
        y = d["y"]
        return cls(
            x=math.nan if x is None else float(x),
            y=math.nan if y is None else float(y),
        )


# Chromaticity of (255, 255, 255) through the RGB -> XYZ matrix used here.
# Not the D65 white point: the matrix rows do not sum to D65.
WHITE_POINT = Chromaticity(x=0.3125000000000004, y=0.3289473684210514)
