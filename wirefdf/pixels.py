"""Pixel-level helpers: colour packing, grayscale conversion and hashing."""

from __future__ import annotations

import struct
from typing import Union

BPP = 4

_MASK64 = (1 << 64) - 1
_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


_RED_WEIGHT = _f32(0.299)
_GREEN_WEIGHT = _f32(0.587)
_BLUE_WEIGHT = _f32(0.114)


def _check_color(color: int) -> None:
    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError(f"colour must fit in 32 bits, got {color:#x}")


def fnv_hash(data: Union[bytes, bytearray, str]) -> int:
    """Return the 64-bit FNV-1a hash of ``data``.

    Bytes of 128 and above are folded in as signed characters.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    value = _FNV_OFFSET
    for byte in raw:
        folded = byte if byte < 0x80 else (_MASK64 & ~0xFF) | byte
        value = ((value ^ folded) * _FNV_PRIME) & _MASK64
    return value


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grayscale, keeping its alpha channel."""
    _check_color(color)
    r = int(_f32(_RED_WEIGHT * ((color >> 24) & 0xFF)))
    g = int(_f32(_GREEN_WEIGHT * ((color >> 16) & 0xFF)))
    b = int(_f32(_BLUE_WEIGHT * ((color >> 8) & 0xFF)))
    y = (r + g + b) & 0xFF
    return (y << 24) | (y << 16) | (y << 8) | (color & 0xFF)


def draw_pixel(buffer: bytearray, offset: int, color: int) -> None:
    """Store ``color`` as R, G, B, A bytes at ``offset`` in ``buffer``."""
    _check_color(color)
    if offset < 0 or offset + BPP > len(buffer):
        raise IndexError(f"pixel at offset {offset} lies outside the buffer")
    buffer[offset:offset + BPP] = color.to_bytes(BPP, "big")