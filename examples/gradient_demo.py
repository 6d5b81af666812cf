# examples/gradient_demo.py
# Demo: build an RGB gradient as nested lists and save it with micropng.save_png
# Exists to produce a sample artifact from a plain Python image without NumPy or Pillow.
# RELEVANT FILES:python/micropng/encoder.py,tests/test_gradient_demo.py

#!/usr/bin/env python3
import argparse
import logging
from pathlib import Path


def make_gradient(width: int = 800, height: int = 600):
    """Rows of RGB pixels: red ramps every 200 columns, green steps per band, blue ramps down."""
    image = []
    for y in range(height):
        scanline = []
        for x in range(width):
            scanline.append([50 + (x % 200), 50 + ((x // 200) * 40), 50 + (y % 200)])
        image.append(scanline)
    return image


def main(argv=None):
    parser = argparse.ArgumentParser(description="Save an RGB gradient as a minimal PNG")
    parser.add_argument("--out", default="reports/gradient.png")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--level", type=int, default=-1, help="zlib compression level (-1 = default)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    import micropng

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    image = make_gradient(args.width, args.height)
    path = micropng.save_png(out, image, {"compression_level": args.level})
    print(f"Saved {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
