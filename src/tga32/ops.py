from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .core import effective_size


BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class EditOptions:
    flip_h: bool = False
    flip_v: bool = False


def _rows(data: bytes, width: int, height: int) -> List[bytes]:
    if len(data) != effective_size(width, height):
        raise ValueError(
            f"pixel buffer is {len(data)} bytes, expected {effective_size(width, height)}"
        )
    stride = width * BYTES_PER_PIXEL
    return [data[y * stride : (y + 1) * stride] for y in range(height)]


def op_flip_h(data: bytes, width: int, height: int) -> bytes:
    out = bytearray()
    for row in _rows(data, width, height):
        for x in range(width - 1, -1, -1):
            out += row[x * BYTES_PER_PIXEL : (x + 1) * BYTES_PER_PIXEL]
    return bytes(out)


def op_flip_v(data: bytes, width: int, height: int) -> bytes:
    return b"".join(reversed(_rows(data, width, height)))


def apply_edits(data: bytes, width: int, height: int, opts: EditOptions) -> bytes:
    """
    Order: flip_h -> flip_v.
    Pixels are whole 4-byte groups; channel order is left untouched.
    """
    out = bytes(data)
    if opts.flip_h:
        out = op_flip_h(out, width, height)
    if opts.flip_v:
        out = op_flip_v(out, width, height)
    return out
