# solve_cli.py
"""Command-line solver: read a puzzle, solve it, print the grid (or a JSON report)."""

# - Reads 9 lines of 9 tokens from --input (or stdin)
# - Solves with the depth-first frontier search
# - Prints the solved grid, optionally preceded by the solve time
#
# Usage:
#   python -m apps.cli.solve_cli --input puzzle.txt
#   python -m apps.cli.solve_cli --config configs/default.yaml --json < puzzle.txt
#
# Exit codes: 0 solved, 1 no solution, 2 malformed input or config.

from __future__ import annotations

import argparse
import json
import sys

from solver.config import load_config
from solver.grid_io import GridFormatError, format_grid, read_grid
from solver.logs import log
from solver.sudoku_tools import solve_tool


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle.")
    ap.add_argument("--input", type=str, default=None, help="puzzle file (default: stdin)")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--lenient", action="store_true",
                    help="accept short input; stop at the first blank line")
    ap.add_argument("--placeholder", type=str, default=None, help="glyph for unfilled cells in output")
    ap.add_argument("--json", action="store_true", help="print a JSON report instead of grids")
    ap.add_argument("--no-input", action="store_true", help="don't echo the parsed puzzle")
    ap.add_argument("--no-timing", action="store_true", help="don't print the solve time")
    ap.add_argument("--no-verify", action="store_true", help="skip checking givens and solution")
    ap.add_argument("--quiet", action="store_true", help="no log lines on stderr")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(
            args.config,
            strict=False if args.lenient else None,
            placeholder=args.placeholder,
            output="json" if args.json else None,
            show_input=False if args.no_input else None,
            show_timing=False if args.no_timing else None,
            verify=False if args.no_verify else None,
            quiet=True if args.quiet else None,
        )
    except (OSError, ValueError) as e:
        print(f"config error: {e}", file=sys.stderr)
        raise SystemExit(2)

    src = args.input or "<stdin>"
    log(f"reading puzzle from {src}", quiet=cfg.quiet)
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as f:
                grid = read_grid(f, strict=cfg.strict)
        else:
            grid = read_grid(sys.stdin, strict=cfg.strict)
    except GridFormatError as e:
        log(f"malformed puzzle in {src}: {e}", quiet=cfg.quiet)
        raise SystemExit(2)
    except OSError as e:
        log(f"cannot read {src}: {e}", quiet=cfg.quiet)
        raise SystemExit(2)

    log(f"parsed {grid.filled_count()} givens; solving", quiet=cfg.quiet)
    report = solve_tool(grid, verify=cfg.verify, placeholder=cfg.placeholder)
    if report["solved"]:
        log(f"solved: iterations={report['iterations']:,}, max_frontier={report['max_frontier']:,}, "
            f"elapsed={report['elapsed_s']:.3f}s", quiet=cfg.quiet)
    else:
        log(f"no solution ({report['error']}) after {report['iterations']:,} iterations; grid at failure:\n"
            f"{report['grid']}", quiet=cfg.quiet)

    if cfg.output == "json":
        payload = {"input": format_grid(grid, cfg.placeholder), **report}
        print(json.dumps(payload, indent=2))
    else:
        if cfg.show_input:
            print("Read values:")
            print(format_grid(grid, cfg.placeholder), end="")
        if report["solved"]:
            if cfg.show_timing:
                print(f"Solved in {report['elapsed_s']:.3f}s")
            print("Solved values:")
            print(report["grid"], end="")

    if not report["solved"]:
        raise SystemExit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
