import io
import unittest
from tga32.descriptor import ImageDescriptor
from tga32.records import (
    FOOTER_SIZE,
    HEADER_SIZE,
    SIGNATURE,
    ColorMapSpecification,
    Footer,
    Header,
    ImageSpecification,
)
from tga32.tags import BitDepth, ColorMapType, ImageType


def _dump(record) -> bytes:
    buf = io.BytesIO()
    record.write_to(buf)
    return buf.getvalue()


class TestRecords(unittest.TestCase):
    def test_color_map_specification(self):
        self.assertEqual(_dump(ColorMapSpecification()), bytes(5))
        spec = ColorMapSpecification(first_entry_index=0x0102, entry_count=3, color_depth=BitDepth(24))
        self.assertEqual(_dump(spec), bytes([0x02, 0x01, 0x03, 0x00, 24]))

    def test_image_specification_little_endian(self):
        spec = ImageSpecification(
            x_origin=1,
            y_origin=0x0203,
            width=0x1234,
            height=0xFFFF,
            pixel_depth=BitDepth.B32,
            descriptor=ImageDescriptor(40),
        )
        self.assertEqual(
            _dump(spec),
            bytes([1, 0, 0x03, 0x02, 0x34, 0x12, 0xFF, 0xFF, 32, 40]),
        )

    def test_default_header(self):
        h = Header()
        self.assertEqual(h.color_map_type, ColorMapType.ABSENT)
        self.assertEqual(h.image_type, ImageType.TRUE_COLOR)
        data = _dump(h)
        self.assertEqual(len(data), HEADER_SIZE)
        self.assertEqual(data[:3], bytes([0, 0, 2]))
        self.assertEqual(data[16], 32)

    def test_footer(self):
        data = _dump(Footer())
        self.assertEqual(len(data), FOOTER_SIZE)
        self.assertEqual(data[:8], bytes(8))
        self.assertEqual(data[8:24], SIGNATURE)
        self.assertEqual(data[24:], b".\x00")

    def test_footer_offsets(self):
        data = _dump(Footer(extension_offset=0x01020304, developer_offset=5))
        self.assertEqual(data[:8], bytes([4, 3, 2, 1, 5, 0, 0, 0]))
