# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Light service-data serializer.

Formats a chromaticity as the service data of a Home Assistant
``light.turn_on`` call, which takes color as ``xy_color``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from col2xy.runtime.serializers.base import XYLike, as_chromaticity

logger = logging.getLogger(__name__)

MAX_BRIGHTNESS = 255


def to_service_data(
    xy: XYLike,
    *,
    brightness: Optional[int] = None,
    transition: Optional[float] = None,
    precision: Optional[int] = 4,
) -> dict[str, Any]:
    """Build ``light.turn_on`` service data for a chromaticity.

    Args:
        xy: Chromaticity or (x, y) pair.
        brightness: Optional brightness, 0-255.
        transition: Optional transition time in seconds.
        precision: Decimals kept in ``xy_color`` (None = full precision).
            Hue bridges resolve xy to 4 decimals.

    Returns:
        Dict like ``{"xy_color": [0.735, 0.265], "brightness": 200}``.

    Raises:
        ValueError: If the chromaticity is undefined (black under
            BlackPolicy.NAN) or brightness/transition are out of range.
    """
    color = as_chromaticity(xy)
    if not color.is_defined:
        raise ValueError("Cannot command a light with an undefined chromaticity")

    coords = color.to_dict(precision)
    service_data: dict[str, Any] = {"xy_color": [coords["x"], coords["y"]]}

    if brightness is not None:
        if not 0 <= brightness <= MAX_BRIGHTNESS:
            raise ValueError(
                f"Brightness must be 0-{MAX_BRIGHTNESS}, got {brightness}"
            )
        service_data["brightness"] = brightness

    if transition is not None:
        if transition < 0:
            raise ValueError(f"Transition must be >= 0, got {transition}")
        service_data["transition"] = transition

    logger.debug("Built light service data: %s", service_data)
    return service_data
