# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Serializers for chromaticity delivery to consumers.

Serializers format a result; they never change the coordinates beyond the
requested rounding.
"""

from col2xy.runtime.serializers.base import SerializerFormat, as_chromaticity
from col2xy.runtime.serializers.document import to_json
from col2xy.runtime.serializers.service import to_service_data

__all__ = [
    "SerializerFormat",
    "as_chromaticity",
    "to_json",
    "to_service_data",
]
