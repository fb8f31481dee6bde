import tempfile
import unittest
from pathlib import Path

from PIL import Image as PILImage

from tga32.convert import (
    _sort_key,
    bgra_from_pil,
    convert_file,
    convert_folder,
    image_from_pil,
)
from tga32.core import Tga32Error
from tga32.ops import EditOptions


def _red_over_green() -> PILImage.Image:
    img = PILImage.new("RGBA", (1, 2))
    img.putpixel((0, 0), (255, 0, 0, 128))
    img.putpixel((0, 1), (0, 255, 0, 255))
    return img


class TestPillowAdapter(unittest.TestCase):
    def test_bgra_order_top_row_first(self):
        data = bgra_from_pil(_red_over_green())
        self.assertEqual(data, bytes([0, 0, 255, 128, 0, 255, 0, 255]))

    def test_rgb_gets_opaque_alpha(self):
        img = PILImage.new("RGB", (1, 1), (1, 2, 3))
        self.assertEqual(bgra_from_pil(img), bytes([3, 2, 1, 255]))

    def test_image_from_pil(self):
        img = image_from_pil(_red_over_green(), EditOptions(flip_v=True))
        self.assertEqual((img.width, img.height), (1, 2))
        self.assertTrue(img.is_consistent)
        self.assertEqual(img.data[:4], bytes([0, 255, 0, 255]))


class TestConvertFiles(unittest.TestCase):
    def test_convert_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "px.png"
            _red_over_green().save(src)
            res = convert_file(src)
            self.assertEqual(res.output_path, Path(tmp) / "px.tga")
            data = res.output_path.read_bytes()
            self.assertEqual(res.size, 18 + 8 + 26)
            self.assertEqual(len(data), res.size)
            self.assertEqual(data[18:26], bytes([0, 0, 255, 128, 0, 255, 0, 255]))

    def test_pillow_reads_output_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "px.png"
            _red_over_green().save(src)
            res = convert_file(src)
            with PILImage.open(res.output_path) as back:
                back = back.convert("RGBA")
                self.assertEqual(back.size, (1, 2))
                self.assertEqual(back.getpixel((0, 0)), (255, 0, 0, 128))
                self.assertEqual(back.getpixel((0, 1)), (0, 255, 0, 255))

    def test_missing_file(self):
        with self.assertRaises(Tga32Error):
            convert_file(Path("does/not/exist.png"))

    def test_not_an_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "bad.png"
            src.write_bytes(b"not a png")
            with self.assertRaises(Tga32Error):
                convert_file(src)

    def test_convert_folder(self):
        with tempfile.TemporaryDirectory() as tmp:
            d = Path(tmp)
            for name in ("img10.png", "img2.png", "notes.txt"):
                if name.endswith(".png"):
                    _red_over_green().save(d / name)
                else:
                    (d / name).write_text("x")
            out = d / "out"
            results = convert_folder(d, out_dir=out, sort_kind="natural")
            self.assertEqual([r.source_path.name for r in results], ["img2.png", "img10.png"])
            self.assertTrue((out / "img2.tga").exists())

    def test_folder_stem_collision(self):
        with tempfile.TemporaryDirectory() as tmp:
            d = Path(tmp)
            PILImage.new("RGBA", (1, 1)).save(d / "a.png")
            PILImage.new("RGB", (2, 2)).save(d / "a.bmp")
            with self.assertRaises(Tga32Error) as cm:
                convert_folder(d)
            self.assertIn("a.bmp", str(cm.exception))
            self.assertIn("a.png", str(cm.exception))
            self.assertEqual(list(d.glob("*.tga")), [])

    def test_folder_skips_save_only_formats(self):
        with tempfile.TemporaryDirectory() as tmp:
            d = Path(tmp)
            _red_over_green().save(d / "a.png")
            (d / "notes.pdf").write_bytes(b"%PDF-1.4 not an image")
            results = convert_folder(d)
            self.assertEqual([r.source_path.name for r in results], ["a.png"])
            self.assertFalse((d / "notes.tga").exists())

    def test_empty_folder(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(Tga32Error):
                convert_folder(Path(tmp))


class TestSort(unittest.TestCase):
    def test_case_insensitive_stable(self):
        a = Path("Foo.png")
        b = Path("foo.png")
        c = Path("bar.png")
        arr = sorted([a, b, c], key=lambda p: _sort_key(p, "alpha"))
        self.assertEqual([p.name for p in arr], ["bar.png", "Foo.png", "foo.png"])

    def test_natural(self):
        paths = [Path("f10.png"), Path("f2.png"), Path("f1.png")]
        arr = sorted(paths, key=lambda p: _sort_key(p, "natural"))
        self.assertEqual([p.name for p in arr], ["f1.png", "f2.png", "f10.png"])
