"""Reading of the XPM42 text image format."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Dict, List, TextIO, Union

from wirefdf.cstr import isalnum
from wirefdf.errors import MlxErrno, MlxError
from wirefdf.images import INT16_MAX, Texture
from wirefdf.pixels import BPP, draw_pixel, fnv_hash, rgba_to_mono

_MAGIC = "!XPM42\n"
_HEADER_LIMIT = 63
_MAX_CPP = 10
_TABLE_SIZE = 65535

_INT_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_CHANNEL_RE = re.compile(r"\s*([+-]?)([0-9a-fA-F]*)")


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid() -> MlxError:
    return MlxError(MlxErrno.INVXPM)


def _c_int(sign: str, body: str) -> int:
    if body[:2].lower() == "0x":
        value = int(body[2:], 16)
    elif len(body) > 1 and body[0] == "0":
        value = int(body, 8)
    else:
        value = int(body)
    return -value if sign == "-" else value


def _scan_header(line: str) -> tuple:
    pos = 0
    values: List[int] = []
    for _ in range(4):
        match = _INT_RE.match(line, pos)
        if not match:
            raise _invalid()
        values.append(_c_int(*match.groups()))
        pos = match.end()
    rest = line[pos:].lstrip()
    mode = rest[0] if rest else ""
    return (*values, mode)


def _hex_channel(text: str) -> int:
    match = _CHANNEL_RE.match(text)
    sign, digits = match.groups()
    value = int(digits, 16) if digits else 0
    return (-value if sign == "-" else value) & 0xFF


def _key_bytes(key: str) -> bytes:
    try:
        return key.encode("latin-1")
    except UnicodeEncodeError:
        return key.encode("utf-8")


def _slot(key: str) -> int:
    return fnv_hash(_key_bytes(key)) % _TABLE_SIZE


def _read_entry(line: str, cpp: int, mode: str, table: Dict[int, int]) -> None:
    if line.rfind(" ") != cpp:
        raise _invalid()
    if len(line) < cpp + 3 or line[cpp + 1] != "#" or not isalnum(line[cpp + 2]):
        raise _invalid()
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), (0, 2, 4, 6)):
        color |= _hex_channel(line[start + offset:start + offset + 2]) << shift
    table[_slot(line[:cpp])] = rgba_to_mono(color) if mode == "m" else color


def parse_xpm42(stream: TextIO) -> Xpm:
    """Decode an XPM42 image from a text stream.

    Raises MlxError with code INVXPM when the data is malformed.
    """
    if stream.readline(_HEADER_LIMIT) != _MAGIC:
        raise _invalid()
    header = stream.readline(_HEADER_LIMIT)
    if not header:
        raise _invalid()
    width, height, color_count, cpp, mode = _scan_header(header)
    if not (0 <= width <= INT16_MAX and 0 <= height <= INT16_MAX):
        raise _invalid()
    if mode not in ("c", "m") or not 0 < cpp <= _MAX_CPP:
        raise _invalid()

    table: Dict[int, int] = {}
    for _ in range(color_count):
        line = stream.readline()
        if not line:
            raise _invalid()
        _read_entry(line, cpp, mode, table)

    texture = Texture(width, height, bytearray(width * height * BPP))
    for y in range(height):
        line = stream.readline()
        if not line:
            raise _invalid()
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            draw_pixel(texture.pixels, (y * width + x) * BPP, table.get(_slot(key), 0))
    return Xpm(texture, color_count, cpp, mode)


def load_xpm42(path: Union[str, os.PathLike]) -> Xpm:
    """Load an XPM42 image from a file whose name contains ``.xpm42``."""
    if ".xpm42" not in os.fspath(path):
        raise MlxError(MlxErrno.INVEXT)
    try:
        handle = open(path, "r", encoding="latin-1", newline="")
    except OSError as exc:
        raise MlxError(MlxErrno.INVFILE) from exc
    with handle:
        return parse_xpm42(handle)