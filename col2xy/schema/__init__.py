# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Value types for chromaticity conversion.

All types in this module are immutable (frozen dataclasses).
"""

from col2xy.schema.chromaticity import (
    WHITE_POINT,
    BlackInputError,
    BlackPolicy,
    Chromaticity,
)
from col2xy.schema.color import (
    MAX_BYTE,
    MAX_WIDE,
    NRGBA,
    RGBA,
    RGBA64,
    Color,
)

__all__ = [
    # Results
    "Chromaticity",
    "WHITE_POINT",
    # Black input handling
    "BlackPolicy",
    "BlackInputError",
    # Inputs
    "Color",
    "RGBA64",
    "RGBA",
    "NRGBA",
    "MAX_BYTE",
    "MAX_WIDE",
]
