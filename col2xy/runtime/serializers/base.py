# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from enum import Enum
from typing import Union

from col2xy.schema import Chromaticity


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


XYLike = Union[Chromaticity, tuple[float, float]]


def as_chromaticity(xy: XYLike) -> Chromaticity:
    """Accept a Chromaticity or a plain (x, y) pair."""
    if isinstance(xy, Chromaticity):
        return xy
    try:
        x, y = xy
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Expected Chromaticity or (x, y) pair, got {xy!r}"
        ) from e
    return Chromaticity(x=float(x), y=float(y))
