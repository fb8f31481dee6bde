from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True, order=True)
class BitDepth:
    """Bits per pixel (or per alpha channel). Any byte is representable."""

    value: int

    B8: ClassVar[BitDepth]
    B32: ClassVar[BitDepth]

    @classmethod
    def default(cls) -> BitDepth:
        return cls.B32


@dataclass(frozen=True, order=True)
class ColorMapType:
    value: int

    ABSENT: ClassVar[ColorMapType]

    @classmethod
    def default(cls) -> ColorMapType:
        return cls.ABSENT


@dataclass(frozen=True, order=True)
class ImageType:
    value: int

    TRUE_COLOR: ClassVar[ImageType]

    @classmethod
    def default(cls) -> ImageType:
        return cls.TRUE_COLOR


BitDepth.B8 = BitDepth(8)
BitDepth.B32 = BitDepth(32)
ColorMapType.ABSENT = ColorMapType(0)
ImageType.TRUE_COLOR = ImageType(2)


class HorizontalOrdering(Enum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1

    @classmethod
    def default(cls) -> HorizontalOrdering:
        return cls.LEFT_TO_RIGHT


class VerticalOrdering(Enum):
    # TGA's own default; the encoder writes top-to-bottom.
    BOTTOM_TO_TOP = 0
    TOP_TO_BOTTOM = 1

    @classmethod
    def default(cls) -> VerticalOrdering:
        return cls.BOTTOM_TO_TOP
