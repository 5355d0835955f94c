"""Application-layer CLI adapter."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..config import build_deck_from_args
from ..deck import DeckError, SolveState, run_deck, run_payload
from ..logging_config import setup_logging
from ..selfcheck import run_selfcheck

EXTRA_FORMATS = ("npy", "csv", "png", "vtk")


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser."""
    parser = argparse.ArgumentParser(
        prog="heatplate", description="Steady-state heated plate solver (Jacobi relaxation)"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Solve the plate and write the text solution")
    solve_p.add_argument("epsilon", nargs="?", default=None, help="Error tolerance")
    solve_p.add_argument("output", nargs="?", default=None, help="Output file for the solution")
    solve_p.add_argument("--rows", type=int, default=1000, help="Grid rows M (default: 1000)")
    solve_p.add_argument("--cols", type=int, default=1000, help="Grid columns N (default: 1000)")
    solve_p.add_argument("--north", type=float, default=0.0, help="North edge temperature")
    solve_p.add_argument("--south", type=float, default=100.0, help="South edge temperature")
    solve_p.add_argument("--east", type=float, default=100.0, help="East edge temperature")
    solve_p.add_argument("--west", type=float, default=100.0, help="West edge temperature")
    solve_p.add_argument(
        "--max-sweeps",
        type=int,
        default=None,
        help="Fail instead of sweeping past this count (default: unbounded)",
    )
    solve_p.add_argument("--dtype", choices=("float64", "float32"), default="float64")
    solve_p.add_argument("--history", action="store_true", help="Record diff of every sweep")
    solve_p.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=EXTRA_FORMATS,
        default=None,
        help="Additional output format next to the text file (repeatable)",
    )
    solve_p.add_argument("--metrics", action="store_true", help="Write metrics.json/metrics.csv")

    run_p = sub.add_parser("run", help="Run a YAML plate deck")
    run_p.add_argument("deck", type=str, help="Path to deck YAML")
    run_p.add_argument(
        "--out",
        type=str,
        default=None,
        help="Override export output directory",
    )

    selfcheck_p = sub.add_parser(
        "selfcheck", help="Run dependency and smoke self-check"
    )
    selfcheck_p.add_argument(
        "--no-smoke",
        action="store_true",
        help="Run import checks only (skip smoke solve).",
    )

    return parser


def _print_progress(iteration: int, diff: float) -> None:
    print(f"  {iteration:8d}  {diff:g}")


def _prompt(message: str) -> str:
    print("")
    print(message)
    return input().strip()


def _run_solve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    print("")
    print("HEATED_PLATE")
    print("  A program to solve for the steady state temperature distribution")
    print("  over a rectangular plate.")
    print("")
    print(f"  Spatial grid of {args.rows} by {args.cols} points.")

    raw_epsilon = args.epsilon
    if raw_epsilon is None:
        raw_epsilon = _prompt("  Enter EPSILON, the error tolerance:")
    try:
        epsilon = float(raw_epsilon)
    except ValueError:
        parser.exit(2, f"Error: could not read EPSILON from {raw_epsilon!r}.\n")

    print("")
    print(f"  The iteration will be repeated until the change is <= {epsilon:g}")

    output = args.output
    if output is None:
        output = _prompt("  Enter OUTPUT_FILENAME, the name of the output file:")
    if not output:
        parser.exit(2, "Error: could not read OUTPUT_FILENAME.\n")
    output_path = Path(output).resolve()

    print("")
    print(f'  The steady state solution will be written to "{output}".')
    print("")
    print(" Iteration  Change")
    print("")

    deck = build_deck_from_args(
        epsilon=epsilon,
        rows=args.rows,
        cols=args.cols,
        north=args.north,
        south=args.south,
        east=args.east,
        west=args.west,
        max_sweeps=args.max_sweeps,
        dtype=args.dtype,
        record_history=args.history,
        outdir=str(output_path.parent),
        basename=output_path.stem or "plate",
        text_path=str(output_path),
        formats=["txt", *(args.formats or [])],
        metrics=args.metrics,
    )
    try:
        state = run_payload(deck, progress=_print_progress)
    except DeckError as exc:
        parser.exit(2, f"Error: {exc}\n")

    _print_summary(state, output)
    return 0


def _print_summary(state: SolveState, output: str) -> None:
    print("")
    print(f"  {state.report.iterations:8d}  {state.report.final_diff:g}")
    print("")
    print("  Error tolerance achieved.")
    print(f"  CPU time = {state.cpu_time_s:g}")
    print("")
    print(f'  Solution written to the output file "{output}".')
    extra = [p for p in state.exports if p.suffix != ".txt"]
    for path in extra:
        print(f"  Also wrote: {path}")
    print("")
    print("HEATED_PLATE:")
    print("  Normal end of execution.")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
    except ValueError as exc:
        parser.exit(2, f"Error: {exc}\n")

    if args.command == "solve":
        return _run_solve(parser, args)

    if args.command == "run":
        try:
            state = run_deck(args.deck, out_override=args.out)
        except DeckError as exc:
            parser.exit(2, f"Error: {exc}\n")

        print(f"Done. Grid={state.grid.shape}, {state.report.to_text()}")
        if state.exports:
            outdirs = sorted({str(Path(p).parent) for p in state.exports})
            for outdir in outdirs:
                print(f"Output: {outdir}")
        return 0

    if args.command == "selfcheck":
        report = run_selfcheck(smoke=not bool(args.no_smoke))
        print(report.to_text())
        return 0 if report.ok else 1

    parser.exit(2, "Unknown command\n")
    return 2
