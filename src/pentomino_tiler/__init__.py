# TODO: waiting on <https://github.com/CPMpy/cpmpy/issues/709>
import warnings
warnings.filterwarnings("ignore", category=UserWarning, message=".*pkg_resources.*")

import argparse  # noqa: E402
import logging  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from pentomino_tiler.render import render_board, render_piece  # noqa: E402
from pentomino_tiler.solver import Solution, solve  # noqa: E402
from pentomino_tiler.utils.polyominos import PIECES, select  # noqa: E402

def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pentomino-tiler",
        description="Tile a rectangle with the twelve pentominos, each used exactly once.",
    )
    parser.add_argument("-p", "--pieces", action="store_true",
                        help="List and print all individual pieces, including symmetry.")
    parser.add_argument("-s", "--solve", action="store_true",
                        help="Solve the board and print all solutions.")
    parser.add_argument("-c", "--count", action="store_true",
                        help="Solve the board and count (but do not print) the solutions.")
    parser.add_argument("--width", type=int, default=10, help="Board width (default: 10).")
    parser.add_argument("--height", type=int, default=6, help="Board height (default: 6).")
    parser.add_argument("--use", default="".join(piece.name for piece in PIECES), metavar="NAMES",
                        help="The pieces to tile with, by letter (default: all twelve).")
    parser.add_argument("--limit", type=int, default=None,
                        help="Stop after this many solutions.")
    parser.add_argument("--first-only", action="store_true",
                        help="Stop a branch at the first placement that completes the board.")
    parser.add_argument("--cp", action="store_true",
                        help="Count with the constraint model instead of backtracking.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress.")
    return parser

def main(argv: list[str] | None = None) -> None:
    parser = _parser()
    args = parser.parse_args(argv)

    if not (args.pieces or args.solve or args.count):
        parser.print_help()
        return

    if args.width <= 0 or args.height <= 0:
        parser.error(f"board dimensions must be positive, got {args.width}x{args.height}")
    if args.limit is not None and args.limit <= 0:
        parser.error(f"--limit must be positive, got {args.limit}")
    if args.cp and (args.solve or args.first_only):
        parser.error("--cp only counts solutions; it cannot be combined with --solve or --first-only")
    try:
        catalog = select(args.use.upper())
    except (KeyError, ValueError) as e:
        parser.error(e.args[0])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    console = Console(highlight=False)

    if args.pieces:
        for piece in catalog:
            console.print(render_piece(piece))

    if not (args.solve or args.count):
        return

    if args.cp:
        from pentomino_tiler.utils.exact_cover import count_tilings
        count = count_tilings(args.width, args.height, catalog, limit=args.limit)
    else:
        def emit(solution: Solution) -> None:
            console.print(render_board(solution.width, solution.height, solution.placements))

        count = solve(
            args.width,
            args.height,
            catalog,
            emit,
            render=args.solve,
            exhaustive=not args.first_only,
            limit=args.limit,
        )

    console.print(f"Solutions: {count}")


if __name__ == "__main__":
    main()
