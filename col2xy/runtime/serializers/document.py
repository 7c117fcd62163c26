# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""JSON serializer for chromaticity results."""

from __future__ import annotations

import json
from typing import Optional

from col2xy.runtime.serializers.base import SerializerFormat, XYLike, as_chromaticity


def to_json(
    xy: XYLike,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    precision: Optional[int] = None,
) -> str:
    """Serialize a chromaticity as a JSON object.

    Undefined coordinates (black under BlackPolicy.NAN) are written as
    ``null``.

    Example::

        {"x":0.735,"y":0.265}
    """
    data = as_chromaticity(xy).to_dict(precision)

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    else:
        return json.dumps(data, separators=(",", ":"))
