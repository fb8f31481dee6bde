from __future__ import annotations

from dataclasses import dataclass

from .tags import BitDepth, HorizontalOrdering, VerticalOrdering


ALPHA_DEPTH_BITMASK = 0b00001111
HORIZONTAL_ORDERING_BITMASK = 0b00010000
VERTICAL_ORDERING_BITMASK = 0b00100000


@dataclass(frozen=True, order=True)
class ImageDescriptor:
    value: int = 0


def pack_descriptor(
    alpha_depth: BitDepth | None = None,
    horizontal: HorizontalOrdering | None = None,
    vertical: VerticalOrdering | None = None,
) -> ImageDescriptor:
    """
    Pack the image-descriptor flag byte:
    - bits 0..3: alpha channel bit depth
    - bit 4: set for right-to-left pixel order
    - bit 5: set for top-to-bottom row order
    - bits 6..7: zero

    Omitted arguments take their tag defaults (note that BitDepth defaults
    to 32). The alpha depth is not range checked: a depth >= 16 spills into
    the ordering bits.
    """
    if alpha_depth is None:
        alpha_depth = BitDepth.default()
    if horizontal is None:
        horizontal = HorizontalOrdering.default()
    if vertical is None:
        vertical = VerticalOrdering.default()

    value = alpha_depth.value
    if horizontal == HorizontalOrdering.RIGHT_TO_LEFT:
        value |= HORIZONTAL_ORDERING_BITMASK
    if vertical == VerticalOrdering.TOP_TO_BOTTOM:
        value |= VERTICAL_ORDERING_BITMASK
    return ImageDescriptor(value & 0xFF)


def unpack_descriptor(
    descriptor: ImageDescriptor | int,
) -> tuple[int, HorizontalOrdering, VerticalOrdering]:
    value = descriptor.value if isinstance(descriptor, ImageDescriptor) else int(descriptor)
    horizontal = (
        HorizontalOrdering.RIGHT_TO_LEFT
        if value & HORIZONTAL_ORDERING_BITMASK
        else HorizontalOrdering.LEFT_TO_RIGHT
    )
    vertical = (
        VerticalOrdering.TOP_TO_BOTTOM
        if value & VERTICAL_ORDERING_BITMASK
        else VerticalOrdering.BOTTOM_TO_TOP
    )
    return value & ALPHA_DEPTH_BITMASK, horizontal, vertical
