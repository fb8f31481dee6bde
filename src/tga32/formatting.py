from __future__ import annotations

import struct
from typing import Dict, Iterable, List

from .descriptor import unpack_descriptor
from .records import FOOTER_SIZE, HEADER_SIZE, SIGNATURE


def format_hex_rows(
    data: Iterable[int],
    items_per_line: int = 16,
) -> str:
    """
    Deterministic hex formatting: uppercase 00..FF, items_per_line per line,
    each line prefixed with its offset.
    """
    items: List[str] = [f"{b:02X}" for b in data]
    lines = []
    for i in range(0, len(items), items_per_line):
        lines.append(f"{i:08X}  " + " ".join(items[i : i + items_per_line]))
    return "\n".join(lines)


def describe_header(head: bytes) -> Dict[str, object]:
    """
    Decode the 18 header bytes into display fields.
    """
    if len(head) < HEADER_SIZE:
        raise ValueError(f"header needs {HEADER_SIZE} bytes, got {len(head)}")
    (
        id_length,
        color_map_type,
        image_type,
        cmap_first,
        cmap_count,
        cmap_depth,
        x_origin,
        y_origin,
        width,
        height,
        pixel_depth,
        descriptor,
    ) = struct.unpack_from("<BBBHHBHHHHBB", head, 0)
    alpha, horizontal, vertical = unpack_descriptor(descriptor)
    return {
        "id_length": id_length,
        "color_map_type": color_map_type,
        "image_type": image_type,
        "color_map": (cmap_first, cmap_count, cmap_depth),
        "origin": (x_origin, y_origin),
        "width": width,
        "height": height,
        "pixel_depth": pixel_depth,
        "descriptor": descriptor,
        "alpha_depth": alpha,
        "horizontal": horizontal.name,
        "vertical": vertical.name,
    }


def has_signature(data: bytes) -> bool:
    if len(data) < FOOTER_SIZE:
        return False
    return data[-18:] == SIGNATURE + b".\x00"
