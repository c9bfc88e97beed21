"""Command-line entry point for streak-sampler.

Usage:
    # Diagnostic report with the configured defaults:
    streak-sampler report

    # 100,000 rolls at 30% with the smooth curve:
    streak-sampler report --chance 0.3 --runs 100000 --adjuster parabola

    # List registered adjusters and random sources:
    streak-sampler adjusters
    streak-sampler sources

Defaults come from ``StreakSamplerConfig`` (``STREAK_*`` environment
variables or a ``.env`` file); command-line flags override them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from streak_sampler.adjustment.registry import adjuster_registry
from streak_sampler.config import StreakSamplerConfig, resolve_config
from streak_sampler.exceptions import StreakSamplerError
from streak_sampler.factory import build_adjuster, build_random_source
from streak_sampler.randomness.registry import random_source_registry
from streak_sampler.report import run_diagnostic

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("streak_sampler")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streak-sampler",
        description="Boolean sampler with dampened success/failure streaks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s report                                  # Configured defaults
  %(prog)s report --chance 0.3 --runs 100000       # Custom chance and size
  %(prog)s report --adjuster parabola --seed 7     # Smooth curve, seeded
  %(prog)s adjusters                               # List adjusters
""",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    report = sub.add_parser("report", help="Compare adjusted and unadjusted roll sequences.")
    report.add_argument("--chance", type=float, default=None, help="Chance of success in [0, 1].")
    report.add_argument("--runs", type=int, default=None, help="Number of rolls.")
    report.add_argument("--adjuster", default=None, help="Registered adjuster name.")
    report.add_argument("--source", default=None, help="Registered random source name.")
    report.add_argument("--seed", type=int, default=None, help="Seed for seedable sources.")
    report.add_argument(
        "--max-adjustments",
        type=int,
        default=None,
        help="Cap on adjustment iterations per roll (<=0 disables).",
    )

    sub.add_parser("adjusters", help="List registered adjusters.")
    sub.add_parser("sources", help="List registered random sources.")
    return parser


def _run_report(args: argparse.Namespace, defaults: StreakSamplerConfig) -> str:
    config = resolve_config(
        defaults,
        {
            "report_chance": args.chance,
            "report_runs": args.runs,
            "adjuster_type": args.adjuster,
            "random_source_type": args.source,
            "random_seed": args.seed,
            "max_adjustments": args.max_adjustments,
        },
    )
    adjuster = build_adjuster(config)
    # Each sequence gets its own source. With a seed, both replay the same
    # draws, so the comparison is like-for-like.
    with build_random_source(config) as adjusted, build_random_source(config) as baseline:
        report = run_diagnostic(
            adjuster,
            config.report_chance,
            config.report_runs,
            adjusted_source=adjusted,
            baseline_source=baseline,
            max_adjustments=config.max_adjustments,
        )
    return report.format()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the selected command.

    Returns:
        Process exit status: 0 on success, 2 on invalid input.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.command == "report":
            output = _run_report(args, StreakSamplerConfig())
        elif args.command == "adjusters":
            output = "\n".join(adjuster_registry.names())
        else:
            output = "\n".join(random_source_registry.names())
    except (StreakSamplerError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
