#!/usr/bin/env python3
import argparse, csv, json, logging, random
from keymaze.config import DEFAULTS
from keymaze.levels import LevelFormatError, ensure_min_levels, load_pack, save_pack
from keymaze.mapgen.generator import generate_grid
from keymaze.mapgen.reach import is_solvable, shortest_path_length
from keymaze.grid import find_first
from keymaze.rng import PMRandom, seed_for_level
from keymaze.tiles import GOAL, KEY, START

def make_rng(seed):
    return PMRandom(seed) if seed is not None else random.Random()

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    mat = generate_grid(args.rows, args.cols, args.density, args.attempts, rng=make_rng(args.seed))
    if args.out.endswith('.json'):
        with open(args.out, 'w', encoding='utf-8') as f:
            json.dump(mat, f)
    else:
        write_tsv(mat, args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_pack(args):
    grids = []
    for i in range(args.count):
        rng = PMRandom(seed_for_level(args.seed, i)) if args.seed is not None else random.Random()
        grids.append(generate_grid(args.rows, args.cols, args.density, args.attempts, rng=rng))
    save_pack(args.out, grids)
    print(f"Wrote {len(grids)} levels to {args.out}")

def describe(grid):
    start, key, goal = find_first(grid, START), find_first(grid, KEY), find_first(grid, GOAL)
    if not is_solvable(grid):
        return "UNSOLVABLE"
    steps = shortest_path_length(grid, start, key) + shortest_path_length(grid, key, goal)
    return f"ok start={start} key={key} goal={goal} steps={steps}"

def cmd_check(args):
    try:
        grids = load_pack(args.pack)
    except LevelFormatError as e:
        raise SystemExit(f"{args.pack}: {e}")
    if args.pad:
        ensure_min_levels(grids, DEFAULTS, rng=make_rng(args.seed))
    bad = 0
    for i, g in enumerate(grids, 1):
        line = describe(g)
        bad += line == "UNSOLVABLE"
        print(f"level {i:02d} {len(g)}x{len(g[0])}: {line}")
    return 1 if bad else 0

def main():
    p = argparse.ArgumentParser(description="keymaze level tool")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    def gen_opts(sp):
        sp.add_argument('--rows', type=int, default=DEFAULTS.rows)
        sp.add_argument('--cols', type=int, default=DEFAULTS.cols)
        sp.add_argument('--density', type=float, default=DEFAULTS.wall_density)
        sp.add_argument('--attempts', type=int, default=DEFAULTS.max_attempts)
        sp.add_argument('--seed', type=int, default=None)

    p1 = sub.add_parser('emit')
    gen_opts(p1)
    p1.add_argument('--out', type=str, required=True, help=".tsv or .json")
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('pack')
    gen_opts(p2)
    p2.add_argument('--count', type=int, default=DEFAULTS.min_levels)
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_pack)
    p3 = sub.add_parser('check')
    p3.add_argument('pack', type=str)
    p3.add_argument('--pad', action='store_true', help="append generated levels up to the minimum")
    p3.add_argument('--seed', type=int, default=None)
    p3.set_defaults(func=cmd_check)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[kmtool] %(levelname)s %(name)s: %(message)s")
    return args.func(args) or 0

if __name__ == '__main__':
    raise SystemExit(main())
