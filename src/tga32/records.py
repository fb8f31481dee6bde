from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from .descriptor import ImageDescriptor
from .tags import BitDepth, ColorMapType, ImageType


SIGNATURE = b"TRUEVISION-XFILE"
SIGNATURE_SIZE = 16
HEADER_SIZE = 18
FOOTER_SIZE = 26


def write_all(stream: BinaryIO, data: bytes) -> None:
    """
    Write every byte of `data`, looping over short writes from raw
    (unbuffered) streams. A write that accepts nothing raises OSError.
    """
    view = memoryview(data)
    while view:
        n = stream.write(view)
        if n is None:
            # sinks whose write() returns None take the whole buffer
            return
        if n == 0:
            raise OSError("failed to write whole buffer")
        view = view[n:]


def _u8(stream: BinaryIO, value: int) -> None:
    write_all(stream, struct.pack("<B", value))


def _u16(stream: BinaryIO, value: int) -> None:
    write_all(stream, struct.pack("<H", value))


def _u32(stream: BinaryIO, value: int) -> None:
    write_all(stream, struct.pack("<I", value))


@dataclass(frozen=True)
class ColorMapSpecification:
    first_entry_index: int = 0
    entry_count: int = 0
    color_depth: BitDepth = BitDepth(0)

    def write_to(self, stream: BinaryIO) -> None:
        _u16(stream, self.first_entry_index)
        _u16(stream, self.entry_count)
        _u8(stream, self.color_depth.value)


@dataclass(frozen=True)
class ImageSpecification:
    x_origin: int = 0
    y_origin: int = 0
    width: int = 0
    height: int = 0
    pixel_depth: BitDepth = field(default_factory=BitDepth.default)
    descriptor: ImageDescriptor = ImageDescriptor()

    def write_to(self, stream: BinaryIO) -> None:
        _u16(stream, self.x_origin)
        _u16(stream, self.y_origin)
        _u16(stream, self.width)
        _u16(stream, self.height)
        _u8(stream, self.pixel_depth.value)
        _u8(stream, self.descriptor.value)


@dataclass(frozen=True)
class Header:
    """The 18-byte file header. No image ID field follows it."""

    id_length: int = 0
    color_map_type: ColorMapType = field(default_factory=ColorMapType.default)
    image_type: ImageType = field(default_factory=ImageType.default)
    color_map_specification: ColorMapSpecification = ColorMapSpecification()
    image_specification: ImageSpecification = ImageSpecification()

    def write_to(self, stream: BinaryIO) -> None:
        _u8(stream, self.id_length)
        _u8(stream, self.color_map_type.value)
        _u8(stream, self.image_type.value)
        self.color_map_specification.write_to(stream)
        self.image_specification.write_to(stream)


@dataclass(frozen=True)
class Footer:
    """
    TGA 2.0 trailer: extension and developer area offsets (0 = absent),
    then the signature, '.' and NUL.
    """

    extension_offset: int = 0
    developer_offset: int = 0
    signature: bytes = SIGNATURE
    dot: bytes = b"."
    nul: bytes = b"\x00"

    def write_to(self, stream: BinaryIO) -> None:
        _u32(stream, self.extension_offset)
        _u32(stream, self.developer_offset)
        write_all(stream, self.signature)
        write_all(stream, self.dot)
        write_all(stream, self.nul)
