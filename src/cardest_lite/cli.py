"""cardest-lite CLI entry point.

Usage: uv run cardest-lite [command]
"""
import argparse
import logging
import sys

_POLICIES = {
    "unconditional": "UNCONDITIONAL",
    "admitted-only": "ADMITTED_ONLY",
}


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "simulate",
        help="Replay a synthetic workload and report estimation error.",
    )
    p.add_argument(
        "--rows", type=int, default=10_000,
        help="Rows to insert (default: 10000)",
    )
    p.add_argument(
        "--values", type=int, default=200,
        help="Distinct values per column (default: 200)",
    )
    p.add_argument(
        "--delete-fraction", type=float, default=0.2,
        help="Fraction of inserted rows deleted again (default: 0.2)",
    )
    p.add_argument(
        "--queries", type=int, default=100,
        help="Equality queries to run (default: 100)",
    )
    p.add_argument(
        "--sampling-rate", type=float, default=0.1,
        help="Admission probability per inserted row (default: 0.1)",
    )
    p.add_argument(
        "--depth", type=int, default=5,
        help="Hash rows per sketch (default: 5)",
    )
    p.add_argument(
        "--delete-policy", choices=sorted(_POLICIES), default="unconditional",
        help="How deletes interact with sampling (default: unconditional)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )
    p.add_argument(
        "--compare", action="store_true",
        help="Run both delete policies and print a comparison.",
    )


def _run_simulate(args: argparse.Namespace) -> None:
    from cardest_lite.analytics.config import DeletePolicy
    from cardest_lite.profiling.harness import run_workload
    from cardest_lite.profiling.report import format_comparison, format_report

    common = dict(
        num_rows=args.rows,
        num_values=args.values,
        delete_fraction=args.delete_fraction,
        num_queries=args.queries,
        sampling_rate=args.sampling_rate,
        depth=args.depth,
        seed=args.seed,
    )

    if args.compare:
        before = run_workload(**common, delete_policy=DeletePolicy.UNCONDITIONAL)
        after = run_workload(**common, delete_policy=DeletePolicy.ADMITTED_ONLY)
        print(format_report(before, label="Unconditional deletes"))
        print()
        print(format_report(after, label="Admitted-only deletes"))
        print()
        print(format_comparison(before, after))
    else:
        policy = DeletePolicy[_POLICIES[args.delete_policy]]
        result = run_workload(**common, delete_policy=policy, profile=args.cprofile)
        print(format_report(result))
        if result.cprofile_stats:
            print()
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cardest-lite",
        description="Sketch-based cardinality estimation for equality predicates.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_simulate_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "simulate":
        try:
            _run_simulate(args)
        except ValueError as exc:
            parser.error(str(exc))
