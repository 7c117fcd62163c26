# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Channel normalization to [0, 1].

Byte channels are divided by 255, wide (16-bit) channels by 65535. Values
outside the channel range are not checked; their result is undefined.
"""

from __future__ import annotations

from col2xy.schema.color import MAX_BYTE, MAX_WIDE, Color


MAX_BYTE_F = float(MAX_BYTE)
MAX_WIDE_F = float(MAX_WIDE)


def normalize_rgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Normalize byte channels (0-255) to [0, 1]."""
    return r / MAX_BYTE_F, g / MAX_BYTE_F, b / MAX_BYTE_F


def normalize_color(color: Color) -> tuple[float, float, float]:
    """
    Normalize the R, G, B channels of a 16-bit color to [0, 1].

    Alpha is read and discarded.

    Raises:
        TypeError: If ``color`` has no ``rgba()`` method
    """
    if not isinstance(color, Color):
        raise TypeError(
            f"Expected a color with an rgba() method, got {type(color)}"
        )
    r, g, b, _ = color.rgba()
    return r / MAX_WIDE_F, g / MAX_WIDE_F, b / MAX_WIDE_F
