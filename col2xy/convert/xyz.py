# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Linear RGB -> CIE XYZ -> xy chromaticity.

The RGB -> XYZ matrix is the wide-gamut variant used by Philips Hue style
lighting integrations, not the canonical sRGB/D65 matrix. Existing consumers
depend on the exact coordinates it produces, so the coefficients are fixed
literals.

References:
- https://gist.github.com/popcorn245/30afa0f98eea1c2fd34d
- https://en.wikipedia.org/wiki/CIE_1931_color_space#CIE_RGB_color_space
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from col2xy.schema.chromaticity import WHITE_POINT, BlackInputError, BlackPolicy

logger = logging.getLogger(__name__)


# =============================================================================
# RGB -> XYZ
# =============================================================================

# Rows produce X, Y, Z; columns weight linear R, G, B.
RGB_TO_XYZ = (
    (0.6491852651246980, 0.1034883891428110, 0.1973263457324920),
    (0.2340599935483600, 0.7433166037561910, 0.0226234026954449),
    (0.0, 0.0530940431254422, 1.0369059568745600),
)

_M = np.array(RGB_TO_XYZ, dtype=np.float64)
_M.setflags(write=False)


def linear_rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert linearized RGB channels to XYZ tristimulus values."""
    (xr, xg, xb), (yr, yg, yb), (zr, zg, zb) = RGB_TO_XYZ
    X = r * xr + g * xg + b * xb
    Y = r * yr + g * yg + b * yb
    Z = r * zr + g * zg + b * zb
    return X, Y, Z


def linear_rgb_to_xyz_batch(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to XYZ.

    Products are summed left to right per row, like linear_rgb_to_xyz, rather
    than through a matrix product whose summation order is unspecified.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    rows = [r * m[0] + g * m[1] + b * m[2] for m in _M]
    return np.stack(rows, axis=-1)


# =============================================================================
# XYZ -> xy
# =============================================================================


def xyz_to_xy(
    X: float,
    Y: float,
    Z: float,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """
    Project XYZ onto the chromaticity diagram.

    Args:
        X, Y, Z: Tristimulus values
        black: What to return when X + Y + Z = 0

    Returns:
        (x, y) chromaticity coordinates

    Raises:
        BlackInputError: For black input under BlackPolicy.RAISE
    """
    total = X + Y + Z
    if total == 0.0:
        return _black_xy(black)
    return X / total, Y / total


def xyz_to_xy_batch(
    xyz: NDArray[np.float64],
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> NDArray[np.float64]:
    """
    Vectorized xyz_to_xy.

    Args:
        xyz: Array of shape (..., 3) with XYZ values
        black: What to return for elements where X + Y + Z = 0.
            Under BlackPolicy.RAISE, any black element fails the whole batch.

    Returns:
        Array of shape (..., 2) with (x, y) values
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    X = xyz[..., 0]
    Y = xyz[..., 1]
    total = X + Y + xyz[..., 2]

    is_black = total == 0.0
    n_black = int(np.count_nonzero(is_black))
    if n_black and black == BlackPolicy.RAISE:
        raise BlackInputError(
            f"{n_black} black sample(s) have no chromaticity (X + Y + Z = 0)"
        )

    with np.errstate(invalid="ignore", divide="ignore"):
        xy = np.stack([X / total, Y / total], axis=-1)

    if n_black and black == BlackPolicy.WHITE_POINT:
        logger.debug("Substituting white point for %d black sample(s)", n_black)
        xy[is_black] = WHITE_POINT.to_tuple()
    return xy


def _black_xy(black: BlackPolicy) -> tuple[float, float]:
    if black == BlackPolicy.RAISE:
        raise BlackInputError("Black has no chromaticity (X + Y + Z = 0)")
    if black == BlackPolicy.WHITE_POINT:
        logger.debug("Substituting white point for black input")
        return WHITE_POINT.to_tuple()
    return math.nan, math.nan
