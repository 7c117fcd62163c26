# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
col2xy -- RGB to CIE 1931 xy chromaticity conversion.

Converts device RGB samples into the (x, y) coordinates smart lights are
commanded with.

Quick start::

    from col2xy import rgb_to_xy, color_to_xy, RGBA64, BlackPolicy

    rgb_to_xy(255, 0, 0)                    # (0.735..., 0.265...)
    color_to_xy(RGBA64(0, 0xffff, 0))       # (0.115..., 0.826...)
    rgb_to_xy(0, 0, 0, black=BlackPolicy.NAN)  # (nan, nan)
"""

from __future__ import annotations

__version__ = "1.0.0"

from col2xy.convert import (
    apply_gamma_correction,
    color_to_xy,
    hex_to_xy,
    normalize_color,
    normalize_rgb,
    normalized_to_xy,
    rgb_to_xy,
)
from col2xy.schema import (
    NRGBA,
    RGBA,
    RGBA64,
    WHITE_POINT,
    BlackInputError,
    BlackPolicy,
    Chromaticity,
    Color,
)

__all__ = [
    # Core API
    "rgb_to_xy",
    "color_to_xy",
    "normalized_to_xy",
    "hex_to_xy",
    # Stages
    "normalize_rgb",
    "normalize_color",
    "apply_gamma_correction",
    # Types (commonly needed)
    "Chromaticity",
    "Color",
    "RGBA64",
    "RGBA",
    "NRGBA",
    "BlackPolicy",
    "BlackInputError",
    "WHITE_POINT",
    # Version
    "__version__",
]
