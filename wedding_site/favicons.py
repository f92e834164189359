#!/usr/bin/env python3
"""Generate the site's favicons from favicon/wedding_bell.svg.

Run from the site root (or set SITE_ROOT) whenever the source icon
changes:

    wedding-favicons
    wedding-favicons --source art/bell.svg --out-dir favicon

Writes wedding_bell_{N}x{N}.png, apple_touch_icon_{N}x{N}.png and a
multi-resolution wedding_bell_favicon.ico next to the source.
"""

import argparse
import io
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from PIL import Image, ImageOps

from .core.config import FAVICON_ICO, FAVICON_SOURCE

PNG_SIZES = (16, 32, 48, 64, 128, 180, 192, 256, 512)
APPLE_TOUCH_SIZES = (76, 120, 152, 180)
ICO_SIZES = (16, 32, 48, 64)

# Rasterize once, large enough for the biggest output
RENDER_SIZE = 1024

log = logging.getLogger("wedding_site.favicons")


def load_source(svg_path: Path) -> Image.Image:
    """Rasterize the SVG to an RGBA image with CairoSVG."""
    import cairosvg

    png = cairosvg.svg2png(url=str(svg_path), output_width=RENDER_SIZE)
    return Image.open(io.BytesIO(png)).convert("RGBA")


def render_icon(source: Image.Image, size: int) -> Image.Image:
    """Fit `source` inside a transparent size×size square."""
    return ImageOps.pad(
        source.convert("RGBA"),
        (size, size),
        method=Image.Resampling.LANCZOS,
        color=(0, 0, 0, 0),
    )


def build_pngs(source: Image.Image, out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    outputs = []
    for prefix, sizes in (("wedding_bell", PNG_SIZES), ("apple_touch_icon", APPLE_TOUCH_SIZES)):
        for s in sizes:
            out = out_dir / f"{prefix}_{s}x{s}.png"
            render_icon(source, s).save(out, "PNG", optimize=True, compress_level=9)
            outputs.append(out)
    return outputs


def build_ico(source: Image.Image, out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ico_path = out_dir / FAVICON_ICO
    largest = max(ICO_SIZES)
    render_icon(source, largest).save(ico_path, format="ICO", sizes=[(s, s) for s in ICO_SIZES])
    return ico_path


def generate_favicons(
    svg_path: Path,
    out_dir: Path,
    loader: Optional[Callable[[Path], Image.Image]] = None,
) -> List[Path]:
    """
    Build every PNG size plus the ICO bundle.

    Args:
        svg_path: source icon
        out_dir: directory for the generated files
        loader: turns the source into an image, `load_source` by default

    Raises:
        FileNotFoundError: the source SVG does not exist
    """
    if not svg_path.is_file():
        raise FileNotFoundError(f"Source SVG not found: {svg_path}")
    source = (loader or load_source)(svg_path)
    return build_pngs(source, out_dir) + [build_ico(source, out_dir)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    root = Path(os.environ.get("SITE_ROOT") or Path.cwd())
    parser = argparse.ArgumentParser(description="Generate favicons from the wedding bell SVG")
    parser.add_argument("--source", type=Path, default=root / "favicon" / FAVICON_SOURCE,
                        help="Source SVG image")
    parser.add_argument("--out-dir", type=Path, default=root / "favicon",
                        help="Directory for the generated icons")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        outputs = generate_favicons(args.source, args.out_dir)
    except Exception:
        log.exception("Favicon generation failed")
        return 1

    log.info("Generated favicons: %s", ", ".join(p.name for p in outputs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
