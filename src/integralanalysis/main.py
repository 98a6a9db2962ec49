"""
Command-Line Interface
======================
Prints Riemann and Lebesgue estimates for a function from the catalog.

Usage:
    $ integralanalysis quadratic_peak --partitions 20 --levels 8
    $ integralanalysis step --rule left --fine
    $ integralanalysis --list
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from integralanalysis.analysis.model import IntegralModel
from integralanalysis.analysis.riemann import RiemannRule
from integralanalysis.config import Resolution
from integralanalysis.errors import IntegralAnalysisError
from integralanalysis.logging_config import setup_logging
from integralanalysis.model.functions import ALL_FUNCTIONS, FunctionKey, get_function

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="integralanalysis",
        description="Compare Riemann sums with level-set (Lebesgue) integration.",
    )
    p.add_argument("function", nargs="?", default=FunctionKey.X_SQUARED.value,
                   choices=[k.value for k in FunctionKey])
    p.add_argument("--partitions", "-n", type=int, default=10)
    p.add_argument("--levels", "-l", type=int, default=8)
    p.add_argument("--rule", choices=[r.value for r in RiemannRule], default=RiemannRule.MIDPOINT.value)
    p.add_argument("--fine", action="store_true", help="use the fine resolution in place of n -> infinity")
    p.add_argument("--plot", default=None, help="save an overview figure to this path")
    p.add_argument("--list", action="store_true", help="list the available functions and exit")
    p.add_argument("--verbose", "-v", action="count", default=0, help="-v for progress, -vv for debug detail")
    p.add_argument("--log-file", default=None, help="also write a full debug log to this path")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbosity=args.verbose, log_file=args.log_file)

    if args.list:
        for key, spec in ALL_FUNCTIONS.items():
            print(f"{key.value:<16} {spec.name:<24} {spec.description}")
        return 0

    model = IntegralModel(get_function(args.function))
    if not model.is_samplable:
        print(f"{model.spec.name}: cannot be sampled.")
        print(model.explain())
        return 2

    resolution = Resolution.FINE if args.fine else Resolution.STANDARD
    try:
        summary = model.summary(args.partitions, args.levels, RiemannRule(args.rule), resolution)
    except IntegralAnalysisError as e:
        logger.error(f"Analysis of {args.function} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(summary.name)
    print(f"  Riemann ({summary.rule}, n={summary.partitions}):  {summary.riemann_sum:.6f}")
    print(f"  Simple function ({summary.levels} bands):     {summary.simple_function_sum:.6f}")
    print(f"  Integral of mu(t):                  {summary.lebesgue_integral:.6f}")
    print(f"  Reference (adaptive quadrature):    {summary.reference_integral:.6f}")

    if args.plot:
        from integralanalysis.view.plots import save_overview
        path = save_overview(model, args.plot, args.partitions, args.levels)
        print(f"  Plot -> {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
