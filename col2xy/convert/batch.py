# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Vectorized RGB -> xy conversion for NumPy arrays.

Same chain and constants as the scalar entry points, applied to arrays of
colors at once (e.g. every pixel of a decoded image, or every stop of a
gradient slider).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from col2xy.convert.gamma import srgb_to_linear
from col2xy.convert.normalize import MAX_BYTE_F, MAX_WIDE_F
from col2xy.convert.xyz import linear_rgb_to_xyz_batch, xyz_to_xy_batch
from col2xy.schema.chromaticity import BlackPolicy


def normalized_to_xy_batch(
    rgb: NDArray[np.float64],
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> NDArray[np.float64]:
    """
    Convert normalized sRGB to CIE 1931 xy.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 1]
        black: What to return for black elements (see BlackPolicy)

    Returns:
        Array of shape (..., 2) with (x, y) values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    _check_channels(rgb, (3,))
    linear = srgb_to_linear(rgb)
    xyz = linear_rgb_to_xyz_batch(linear)
    return xyz_to_xy_batch(xyz, black=black)


def rgb_uint8_to_xy(
    pixels: NDArray[np.uint8],
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0, 255] to CIE 1931 xy.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values

    Returns:
        Array of shape (..., 2) with (x, y) values
    """
    pixels = np.asarray(pixels)
    _check_channels(pixels, (3,))
    return normalized_to_xy_batch(pixels.astype(np.float64) / MAX_BYTE_F, black=black)


def rgba16_to_xy(
    pixels: NDArray[np.uint16],
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> NDArray[np.float64]:
    """
    Convert 16-bit RGB or RGBA pixels [0, 65535] to CIE 1931 xy.

    The alpha column, if present, is ignored.

    Args:
        pixels: Array of shape (..., 3) or (..., 4) with 16-bit values

    Returns:
        Array of shape (..., 2) with (x, y) values
    """
    pixels = np.asarray(pixels)
    _check_channels(pixels, (3, 4))
    rgb = pixels[..., :3].astype(np.float64) / MAX_WIDE_F
    return normalized_to_xy_batch(rgb, black=black)


def _check_channels(arr: np.ndarray, allowed: tuple[int, ...]) -> None:
    if arr.ndim == 0 or arr.shape[-1] not in allowed:
        expected = " or ".join(f"(..., {n})" for n in allowed)
        raise ValueError(f"Expected {expected} array, got shape {arr.shape}")
