from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .core import Image, Tga32Error
from .ops import EditOptions, apply_edits


MAX_DIMENSION = 0xFFFF


@dataclass(frozen=True)
class ConvertResult:
    source_path: Path
    output_path: Path
    width: int
    height: int
    size: int


def bgra_from_pil(img: PILImage.Image) -> bytes:
    """
    Row-major, top row first, 4 bytes per pixel in B, G, R, A order.
    """
    return img.convert("RGBA").tobytes("raw", "BGRA")


def image_from_pil(img: PILImage.Image, edits: EditOptions | None = None) -> Image:
    w, h = img.size
    if w > MAX_DIMENSION or h > MAX_DIMENSION:
        raise Tga32Error(f"Image too large for TGA ({w}x{h}); max is {MAX_DIMENSION}")
    data = bgra_from_pil(img)
    if edits is not None:
        data = apply_edits(data, w, h, edits)
    return Image(width=w, height=h, data=data)


def load_image(path: Path) -> PILImage.Image:
    if not path.exists():
        raise Tga32Error(f"File not found: {path}")
    try:
        with PILImage.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise Tga32Error(f"Cannot read image: {path.name}") from exc


def convert_file(
    input_path: Path,
    out_path: Path | None = None,
    out_dir: Path | None = None,
    edits: EditOptions | None = None,
    verbose: bool = False,
) -> ConvertResult:
    img = image_from_pil(load_image(input_path), edits)

    if out_path is None:
        out_path = (out_dir or input_path.parent) / f"{input_path.stem}.tga"
    if not img.is_consistent and verbose:
        print(f"Warning: {input_path.name}: pixel buffer does not match {img.width}x{img.height}")
    img.save(out_path)
    size = out_path.stat().st_size
    if verbose:
        print(f"Wrote {out_path} ({size} bytes)")

    return ConvertResult(
        source_path=input_path,
        output_path=out_path,
        width=img.width,
        height=img.height,
        size=size,
    )


def _sort_key(p: Path, sort_kind: str) -> tuple:
    """
    'alpha': case-insensitive, ties broken by the exact stem.
    'natural': digit runs compare as numbers ("f2" before "f10").
    """
    stem = p.stem
    if sort_kind != "natural":
        return (stem.casefold(), stem)
    tokens = tuple(
        (1, int(tok)) if tok.isdigit() else (0, tok.casefold())
        for tok in re.findall(r"\d+|\D+", stem)
    )
    return (tokens, stem)


def _input_extensions() -> set[str]:
    """Extensions of formats Pillow can open; save-only formats are skipped."""
    PILImage.init()
    exts = {
        ext.lower()
        for ext, fmt in PILImage.registered_extensions().items()
        if fmt in PILImage.OPEN
    }
    exts.discard(".tga")
    return exts


def _check_collisions(paths: List[Path], out_dir: Path) -> None:
    seen: dict[Path, Path] = {}
    for p in paths:
        target = out_dir / f"{p.stem}.tga"
        other = seen.get(target)
        if other is not None:
            raise Tga32Error(f"{other.name} and {p.name} would both be written to {target.name}")
        seen[target] = p


def convert_folder(
    input_dir: Path,
    out_dir: Path | None = None,
    edits: EditOptions | None = None,
    verbose: bool = False,
    sort_kind: str = "alpha",
) -> List[ConvertResult]:
    if not input_dir.exists() or not input_dir.is_dir():
        raise Tga32Error(f"Not a folder: {input_dir}")

    exts = _input_extensions()
    paths = sorted(
        [p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() in exts],
        key=lambda p: _sort_key(p, sort_kind),
    )
    if not paths:
        raise Tga32Error("No image files found")

    out_dir_final = out_dir or input_dir
    # nothing is written if two inputs share a stem
    _check_collisions(paths, out_dir_final)

    results: List[ConvertResult] = []
    for p in paths:
        results.append(
            convert_file(p, out_dir=out_dir_final, edits=edits, verbose=verbose)
        )
    return results
