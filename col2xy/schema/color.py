# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""
Color input types.

The wide-color converters accept anything that satisfies the Color protocol:
an ``rgba()`` method returning four ints on the 16-bit scale, where 0x0000
is 0% and 0xffff is 100% intensity. Whether R, G and B are premultiplied by
alpha is up to the color type; the converters read R, G, B and drop A.

Three concrete types are provided:

- RGBA64: 16 bits per channel, stored as-is
- RGBA:   8 bits per channel, already alpha-premultiplied
- NRGBA:  8 bits per channel, not premultiplied
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


MAX_BYTE = 0xFF
MAX_WIDE = 0xFFFF


@runtime_checkable
class Color(Protocol):
    """Anything exposing 16-bit RGBA channels."""

    def rgba(self) -> tuple[int, int, int, int]:
        ...


def _check_channels(values: dict[str, int], maximum: int) -> None:
    for name, value in values.items():
        if not 0 <= value <= maximum:
            raise ValueError(f"Channel {name} must be 0-{maximum}, got {value}")


@dataclass(frozen=True, slots=True)
class RGBA64:
    """A color with 16 bits per channel."""
    r: int
    g: int
    b: int
    a: int = MAX_WIDE

    def __post_init__(self) -> None:
        _check_channels({"r": self.r, "g": self.g, "b": self.b, "a": self.a}, MAX_WIDE)

    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True, slots=True)
class RGBA:
    """
    An alpha-premultiplied color with 8 bits per channel.

    ``rgba()`` widens each channel by byte replication, so 0xff maps to
    0xffff and 0x80 maps to 0x8080.
    """
    r: int
    g: int
    b: int
    a: int = MAX_BYTE

    def __post_init__(self) -> None:
        _check_channels({"r": self.r, "g": self.g, "b": self.b, "a": self.a}, MAX_BYTE)
        if max(self.r, self.g, self.b) > self.a:
            raise ValueError(
                f"Premultiplied channels cannot exceed alpha {self.a}, "
                f"got ({self.r}, {self.g}, {self.b})"
            )

    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r * 0x101, self.g * 0x101, self.b * 0x101, self.a * 0x101)


@dataclass(frozen=True, slots=True)
class NRGBA:
    """
    A non-premultiplied color with 8 bits per channel.

    ``rgba()`` widens and premultiplies: each color channel becomes
    ``c * 0x101 * a // 0xff``.
    """
    r: int
    g: int
    b: int
    a: int = MAX_BYTE

    def __post_init__(self) -> None:
        _check_channels({"r": self.r, "g": self.g, "b": self.b, "a": self.a}, MAX_BYTE)

    def rgba(self) -> tuple[int, int, int, int]:
        def widen(c: int) -> int:
            return c * 0x101 * self.a // MAX_BYTE

        return (widen(self.r), widen(self.g), widen(self.b), self.a * 0x101)
