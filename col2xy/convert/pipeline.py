# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
RGB -> xy conversion entry points.

Conversion chain: channels -> normalized [0, 1] -> linear RGB -> XYZ -> xy

Every function here is pure and safe to call from any thread.
"""

from __future__ import annotations

import re

from col2xy.convert.gamma import apply_gamma_correction
from col2xy.convert.normalize import normalize_color, normalize_rgb
from col2xy.convert.xyz import linear_rgb_to_xyz, xyz_to_xy
from col2xy.schema.chromaticity import BlackPolicy
from col2xy.schema.color import Color


_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def normalized_to_xy(
    r: float,
    g: float,
    b: float,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """
    Convert normalized (0-1) sRGB channels to CIE 1931 xy.

    Args:
        r, g, b: sRGB channels in [0, 1]
        black: What to return for black input (see BlackPolicy)

    Returns:
        (x, y) chromaticity coordinates

    Raises:
        BlackInputError: For black input under BlackPolicy.RAISE
    """
    X, Y, Z = linear_rgb_to_xyz(
        apply_gamma_correction(r),
        apply_gamma_correction(g),
        apply_gamma_correction(b),
    )
    return xyz_to_xy(X, Y, Z, black=black)


def rgb_to_xy(
    r: int,
    g: int,
    b: int,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """
    Convert byte (0-255) sRGB channels to CIE 1931 xy.

    Example:
        >>> rgb_to_xy(255, 0, 0)
        (0.7350000000000004, 0.26499999999999957)
    """
    return normalized_to_xy(*normalize_rgb(r, g, b), black=black)


def color_to_xy(
    color: Color,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """
    Convert a 16-bit color to CIE 1931 xy.

    Only R, G and B are used; alpha never changes the result.

    Example:
        >>> color_to_xy(RGBA64(0x0000, 0xffff, 0x0000))
        (0.11499999999999991, 0.8260000000000001)
    """
    return normalized_to_xy(*normalize_color(color), black=black)


def rgb_to_xyz(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert byte (0-255) sRGB channels to XYZ.

    Y is the relative luminance (0 for black, about 1 for white) and can be
    used alongside xy to derive a brightness.
    """
    nr, ng, nb = normalize_rgb(r, g, b)
    return linear_rgb_to_xyz(
        apply_gamma_correction(nr),
        apply_gamma_correction(ng),
        apply_gamma_correction(nb),
    )


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string into byte channels.

    Accepts "#RRGGBB", "RRGGBB" and the short form "#RGB".

    Raises:
        ValueError: If the string is not a hex color
    """
    m = _HEX_RE.fullmatch(hex_color.strip())
    if not m:
        raise ValueError(f"Not a hex color: {hex_color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_xy(
    hex_color: str,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """Convert a hex color string like "#FF8800" to CIE 1931 xy."""
    return rgb_to_xy(*parse_hex(hex_color), black=black)


def color_string_to_xy(
    color: str,
    *,
    black: BlackPolicy = BlackPolicy.RAISE,
) -> tuple[float, float]:
    """
    Convert any CSS color string to CIE 1931 xy.

    Parsing is done by Pillow, so names ("orange"), functional notation
    ("rgb(255, 136, 0)", "hsl(32, 100%, 50%)") and hex all work.

    Raises:
        ImportError: If Pillow is not installed
        ValueError: If Pillow cannot parse the string
    """
    try:
        from PIL import ImageColor
    except ImportError as e:
        raise ImportError(
            "Pillow is required for color string parsing. "
            "Install with: pip install col2xy[strings]"
        ) from e

    r, g, b = ImageColor.getrgb(color)[:3]
    return rgb_to_xy(r, g, b, black=black)
