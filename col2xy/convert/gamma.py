# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
sRGB inverse companding (gamma correction).

Display-encoded sRGB values are linearized before any matrix math:

- For values <= 0.04045: value / 12.92
- For values >  0.04045: ((value + 0.055) / 1.055) ^ 2.4

The two segments do not meet exactly at the threshold. The jump is far
below one 16-bit code value and comes from the standard's rounded constants.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


GAMMA_THRESHOLD = 0.04045
GAMMA_OFFSET = 0.055
GAMMA_SCALE = 1.055
GAMMA_EXPONENT = 2.4
LINEAR_SLOPE = 12.92


def apply_gamma_correction(c: float) -> float:
    """Linearize one normalized (0-1) sRGB channel value."""
    if c > GAMMA_THRESHOLD:
        return ((c + GAMMA_OFFSET) / GAMMA_SCALE) ** GAMMA_EXPONENT
    return c / LINEAR_SLOPE


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Vectorized apply_gamma_correction over an array of any shape.

    Args:
        srgb: Normalized sRGB values in [0, 1]

    Returns:
        Array of the same shape with linear values
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Clip below the threshold to avoid NaN in the unused power branch
    power_input = np.maximum(srgb, GAMMA_THRESHOLD)
    return np.where(
        srgb > GAMMA_THRESHOLD,
        np.power((power_input + GAMMA_OFFSET) / GAMMA_SCALE, GAMMA_EXPONENT),
        srgb / LINEAR_SLOPE,
    )
