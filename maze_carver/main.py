import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.errors import InvalidDimensions

DEFAULT_ROWS = 17
DEFAULT_COLS = 25
DEFAULT_BENCH_SIZES = ["17x25", "51x51", "101x101", "201x201"]

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def parse_size(text: str):
    """'ROWSxCOLS' -> (rows, cols)"""
    try:
        rows, cols = text.lower().split("x")
        return int(rows), int(cols)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROWSxCOLS, got '{text}'")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: random perfect maze generator with ASCII output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and print a maze")
    gen_parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid rows (odd, >= 5)")
    gen_parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid columns (odd, >= 5)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--ascii", action="store_true", help="Draw walls with '#' instead of a filled square")
    gen_parser.add_argument("--stats", action="store_true", help="Log structural statistics after generation")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation over several sizes")
    bench_parser.add_argument("--sizes", type=parse_size, nargs="+", default=[parse_size(s) for s in DEFAULT_BENCH_SIZES],
                              help="Sizes as ROWSxCOLS")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(args, parser, logger, out):
    from maze_carver.core.grid import Grid
    from maze_carver.algo.carver import MazeCarver
    from maze_carver.viz.text_renderer import TextRenderer

    try:
        grid = Grid(args.rows, args.cols)
    except InvalidDimensions as e:
        parser.error(str(e))

    logger.info(f"Generating {args.rows}x{args.cols} maze (seed={args.seed})...")
    carver = MazeCarver(grid, seed=args.seed)
    carver.run_all()
    logger.info(f"Entrance {carver.entrance}, exit {carver.exit}")

    if args.stats:
        from maze_carver.core.analysis import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    glyph = TextRenderer.GLYPH_WALL_ASCII if args.ascii else TextRenderer.GLYPH_WALL
    out.write("\nMaximize window for proper scaling\n\n")
    TextRenderer(grid, wall_glyph=glyph).show(out)

def run_benchmark(args, parser, logger, out):
    from maze_carver.core.grid import Grid
    from maze_carver.algo.carver import MazeCarver

    logger.info(f"Running generation benchmark over {len(args.sizes)} sizes...")

    out.write(f"\n{'SIZE':<12} | {'TIME (s)':<10} | {'CARVES':<10} | {'BACKTRACKS':<10}\n")
    out.write("-" * 52 + "\n")

    for rows, cols in args.sizes:
        try:
            grid = Grid(rows, cols)
        except InvalidDimensions as e:
            logger.warning(f"Skipping {rows}x{cols}: {e.reason}")
            continue

        carver = MazeCarver(grid, seed=args.seed)
        t_start = time.time()
        carver.run_all()
        duration = time.time() - t_start

        size = f"{rows}x{cols}"
        out.write(f"{size:<12} | {duration:<10.4f} | {carver.carve_count:<10} | {carver.backtrack_count:<10}\n")

def main(argv=None, out=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help(out)
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        run_generate(args, parser, logger, out)
    elif args.command == "benchmark":
        run_benchmark(args, parser, logger, out)

if __name__ == "__main__":
    main()
