# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Conversion core for col2xy.

Deterministic RGB -> CIE 1931 xy conversion, as scalar functions and as
NumPy batch functions.
"""

from col2xy.convert.batch import (
    normalized_to_xy_batch,
    rgb_uint8_to_xy,
    rgba16_to_xy,
)
from col2xy.convert.gamma import apply_gamma_correction, srgb_to_linear
from col2xy.convert.normalize import normalize_color, normalize_rgb
from col2xy.convert.pipeline import (
    color_string_to_xy,
    color_to_xy,
    hex_to_xy,
    normalized_to_xy,
    parse_hex,
    rgb_to_xy,
    rgb_to_xyz,
)
from col2xy.convert.xyz import RGB_TO_XYZ, linear_rgb_to_xyz, xyz_to_xy

__all__ = [
    # Stages
    "normalize_rgb",
    "normalize_color",
    "apply_gamma_correction",
    "linear_rgb_to_xyz",
    "xyz_to_xy",
    "RGB_TO_XYZ",
    # Entry points
    "normalized_to_xy",
    "rgb_to_xy",
    "color_to_xy",
    "rgb_to_xyz",
    "hex_to_xy",
    "parse_hex",
    "color_string_to_xy",
    # Batch
    "srgb_to_linear",
    "normalized_to_xy_batch",
    "rgb_uint8_to_xy",
    "rgba16_to_xy",
]
