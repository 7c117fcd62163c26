# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Delivery runtime for col2xy.

Turns chromaticity results into the payloads downstream consumers expect:

1. Light service data -- ``xy_color`` payloads for smart-lighting calls
2. JSON -- compact or pretty ``{"x": ..., "y": ...}`` documents
"""

from col2xy.runtime.serializers import (
    SerializerFormat,
    to_json,
    to_service_data,
)

__all__ = [
    "to_service_data",
    "to_json",
    "SerializerFormat",
]
