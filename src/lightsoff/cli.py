from __future__ import annotations

import argparse
import sys
import time

from .bitmatrix import BitMatrix, MalformedInputError
from .board import apply_solution, create_field
from .config import load_config
from .progress import ProgressBar
from .solver import LightsOffSolver
from .viz import save_solution_image

DESCRIPTION = """\
The program solves the puzzle Lights Off: turn off every tile of the board,
where each press toggles the pressed tile and its non-diagonal neighbours.

Without a size the field is read from standard input, one row per line,
ending with a blank line or end of input:
010
111
010
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lightsoff",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "-r", "--rows", type=int, default=0,
        help="number of rows in a field of ones",
    )
    ap.add_argument(
        "-c", "--cols", type=int, default=0,
        help="number of columns in a field of ones",
    )
    ap.add_argument(
        "-p", "--picture", action="store_true",
        help='save the solution as an image "lightsoff_<rows>x<cols>.png"',
    )
    ap.add_argument(
        "-a", "--apply", action="store_true",
        help="apply the input as a solution to a field of ones",
    )
    ap.add_argument(
        "-i", "--info", action="store_true",
        help="print field size, number of solutions, weight and time",
    )
    ap.add_argument("--config", default=None, help="YAML config file")
    return ap


def read_field(args) -> BitMatrix:
    n_rows, n_cols = args.rows, args.cols
    # square field if only one size is given
    if n_rows == 0 and n_cols > 0:
        n_rows = n_cols
    if n_cols == 0 and n_rows > 0:
        n_cols = n_rows

    if n_rows > 0 and n_cols > 0:
        return create_field(n_rows, n_cols)
    return BitMatrix.read(sys.stdin)


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    try:
        field = read_field(args)
    except MalformedInputError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        ap.print_usage(sys.stderr)
        return 1
    n_rows, n_cols = field.shape

    if not args.apply:
        show_progress = args.info or cfg["progress"]
        solver = LightsOffSolver(field)
        start_time = time.perf_counter()
        picture = solver.solve(progress=ProgressBar() if show_progress else None)
        time_ms = (time.perf_counter() - start_time) * 1000

        if picture is not None:
            picture.print()
        else:
            print("0\n")

        if args.info:
            print(f"Size      : {n_rows} x {n_cols}")
            print(f"Solutions : {solver.n_solutions}")
            print(f"Weight    : {solver.min_weight}")
            print(f"Time      : {time_ms:.1f} ms")
    else:
        picture = field
        result = create_field(n_rows, n_cols)
        apply_solution(result, picture)
        result.print()

    if args.picture:
        if picture is None:
            print("[ERROR] No solution to save", file=sys.stderr)
            return 0
        image_cfg = cfg["image"]
        filename = image_cfg["filename"].format(rows=n_rows, cols=n_cols)
        try:
            save_solution_image(
                picture,
                filename,
                on_color=image_cfg["on_color"],
                off_color=image_cfg["off_color"],
            )
        except (OSError, ValueError) as exc:
            print(f"Unable to save file: {exc}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
