#!/usr/bin/env python3
# Render keymaze grids (TSV file or levels.json pack) to PNGs using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from keymaze.levels import LevelFormatError, load_pack, validate_grid
from keymaze.tiles import CellTag

COLORS = {
    CellTag.FLOOR: (232, 232, 232, 255),
    CellTag.WALL:  (120,  75,  35, 255),
    CellTag.START: (120, 180, 255, 255),
    CellTag.GOAL:  (255, 200, 120, 255),
    CellTag.KEY:   (220, 180,  20, 255),
}

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            try:
                rows.append([int(x) for x in line.split("\t")])
            except ValueError:
                raise SystemExit(f"{path}: non-numeric cell in row {len(rows) + 1}")
    try:
        return validate_grid(rows, where=path)
    except LevelFormatError as e:
        raise SystemExit(str(e))

def render_grid(grid, out_png, tile_size=16, margin=0):
    rows, cols = len(grid), len(grid[0])
    w, h = cols * tile_size + 2*margin, rows * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    inset = max(1, tile_size // 6)
    for r in range(rows):
        for c in range(cols):
            tag = CellTag(grid[r][c])
            x0 = margin + c * tile_size
            y0 = margin + r * tile_size
            box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
            if tag == CellTag.WALL:
                draw.rectangle(box, fill=COLORS[tag])
                continue
            draw.rectangle(box, fill=COLORS[CellTag.FLOOR])
            if tag != CellTag.FLOOR:
                # markers drawn inset so the floor still shows around them
                draw.rectangle((box[0] + inset, box[1] + inset, box[2] - inset, box[3] - inset), fill=COLORS[tag])
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("src", type=str, help="a .tsv grid or a levels.json pack")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    if args.src.endswith(".json"):
        try:
            grids = load_pack(args.src)
        except LevelFormatError as e:
            raise SystemExit(str(e))
    else:
        grids = [read_tsv(args.src)]
    for i, g in enumerate(grids, 1):
        render_grid(g, os.path.join(args.outdir, f"{i:02d}.png"), tile_size=args.tile)
    print(f"Wrote {len(grids)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
