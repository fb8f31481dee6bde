from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .descriptor import pack_descriptor
from .records import FOOTER_SIZE, HEADER_SIZE, Footer, Header, ImageSpecification, write_all
from .tags import BitDepth, HorizontalOrdering, VerticalOrdering


class Tga32Error(Exception):
    """User-facing one-line errors."""


def effective_size(width: int, height: int) -> int:
    """Bytes of pixel data for a 32-bit image of the given dimensions."""
    return width * height * (BitDepth.B32.value // 8)


def file_size(width: int, height: int) -> int:
    return HEADER_SIZE + effective_size(width, height) + FOOTER_SIZE


@dataclass(frozen=True)
class Image:
    """
    An uncompressed 32-bit true-color TGA image.

    `data` holds BGRA8 pixels, row-major, top row first. Its length is
    expected to equal effective_size(width, height) but this is not checked;
    a mismatched buffer is written as-is.
    """

    width: int
    height: int
    data: bytes

    @staticmethod
    def effective_size(width: int, height: int) -> int:
        return effective_size(width, height)

    @property
    def is_consistent(self) -> bool:
        return len(self.data) == effective_size(self.width, self.height)

    def header(self) -> Header:
        descriptor = pack_descriptor(
            alpha_depth=BitDepth.B8,
            horizontal=HorizontalOrdering.LEFT_TO_RIGHT,
            vertical=VerticalOrdering.TOP_TO_BOTTOM,
        )
        return Header(
            image_specification=ImageSpecification(
                width=self.width,
                height=self.height,
                pixel_depth=BitDepth.B32,
                descriptor=descriptor,
            )
        )

    def write_to(self, stream: BinaryIO) -> None:
        """
        Write header, pixel data and footer to `stream`.

        Exceptions raised by the stream propagate from the first failing
        write; bytes already written are left in place.
        """
        self.header().write_to(stream)
        write_all(stream, self.data)
        Footer().write_to(stream)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write_to(buf)
        return buf.getvalue()

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            self.write_to(f)
