from __future__ import annotations

import argparse
import sys
import unittest
from pathlib import Path
from typing import List

from . import __version__
from .convert import convert_file, convert_folder
from .core import Tga32Error
from .formatting import describe_header, format_hex_rows, has_signature
from .ops import EditOptions
from .records import FOOTER_SIZE, HEADER_SIZE


def _edit_options_from_args(ns: argparse.Namespace) -> EditOptions:
    return EditOptions(flip_h=ns.flip_h, flip_v=ns.flip_v)


def _add_common_edit_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--flip-h", action="store_true", help="horizontal flip")
    p.add_argument("--flip-v", action="store_true", help="vertical flip")


def _add_common_io_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--out-dir", type=Path, help="output directory (defaults next to input)")
    p.add_argument("--verbose", action="store_true", help="verbose logging")


def _find_tests_dir() -> Path | None:
    # source checkout first, then the working directory
    for candidate in (Path(__file__).resolve().parents[2] / "tests", Path.cwd() / "tests"):
        if candidate.is_dir():
            return candidate
    return None


def run_selftest(tests_dir: Path | None = None) -> int:
    tests_dir = tests_dir or _find_tests_dir()
    if tests_dir is None or not tests_dir.is_dir():
        raise Tga32Error("Test suite not found; run --selftest from a source checkout")
    suite = unittest.TestLoader().discover(start_dir=str(tests_dir), top_level_dir=str(tests_dir))
    res = unittest.TextTestRunner(verbosity=2).run(suite)
    if res.testsRun == 0:
        raise Tga32Error(f"No tests found in {tests_dir}")
    return 0 if res.wasSuccessful() else 1


def print_info(path: Path) -> None:
    if not path.exists():
        raise Tga32Error(f"File not found: {path}")
    data = path.read_bytes()
    if len(data) < HEADER_SIZE + FOOTER_SIZE or not has_signature(data):
        raise Tga32Error(f"Not a TGA 2.0 file: {path.name}")

    fields = describe_header(data[:HEADER_SIZE])
    for key, value in fields.items():
        print(f"{key:15} {value}")
    print(f"{'pixel_bytes':15} {len(data) - HEADER_SIZE - FOOTER_SIZE}")
    print("header:")
    print(format_hex_rows(data[:HEADER_SIZE]))
    print("footer:")
    print(format_hex_rows(data[-FOOTER_SIZE:]))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tga32",
        description="Encode images as uncompressed 32-bit true-color TGA files.",
    )
    ap.add_argument("--selftest", action="store_true", help="run the internal test suite and exit")
    ap.add_argument("--version", action="version", version=f"tga32 {__version__}")

    sub = ap.add_subparsers(dest="cmd", required=False)

    # convert
    p_conv = sub.add_parser("convert", help="convert a single image to .tga")
    p_conv.add_argument("input", type=Path, metavar="input")
    p_conv.add_argument("-o", "--output", type=Path, help="output file (default: <stem>.tga)")
    _add_common_io_flags(p_conv)
    _add_common_edit_flags(p_conv)

    # folder
    p_fold = sub.add_parser("folder", help="convert every image in a folder to .tga")
    p_fold.add_argument("dir", type=Path, metavar="dir")
    p_fold.add_argument(
        "--sort",
        choices=["alpha", "natural"],
        default="alpha",
        help="processing order: 'alpha' (case-insensitive) or 'natural' (numeric-aware)",
    )
    _add_common_io_flags(p_fold)
    _add_common_edit_flags(p_fold)

    # info
    p_info = sub.add_parser("info", help="print the header and footer of a .tga")
    p_info.add_argument("input", type=Path, metavar="input.tga")

    return ap


def main(argv: List[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = build_parser()
    ns = ap.parse_args(argv)

    try:
        if ns.selftest and ns.cmd is None:
            sys.exit(run_selftest())

        if ns.cmd == "convert":
            convert_file(
                input_path=ns.input,
                out_path=ns.output,
                out_dir=ns.out_dir,
                edits=_edit_options_from_args(ns),
                verbose=ns.verbose,
            )
            return

        if ns.cmd == "folder":
            convert_folder(
                input_dir=ns.dir,
                out_dir=ns.out_dir,
                edits=_edit_options_from_args(ns),
                verbose=ns.verbose,
                sort_kind=ns.sort,
            )
            return

        if ns.cmd == "info":
            print_info(ns.input)
            return
    except Tga32Error as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    ap.print_help()
    sys.exit(1)
