# src/statelab/cli.py
"""
statelab CLI

Subcommands:
  - demo          Run the narrated examples (all of them, or one with --example)
  - convergence   Observe many fresh RandomBool(p) once each and report the frequency

With no subcommand the full demo runs.

Examples:
  statelab
  statelab demo --example 4 --seed 7
  statelab convergence --p 0.5 --trials 10000 --seed 1 --json
  python -m statelab demo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from statelab import demos
from statelab.analysis.convergence import run_convergence
from statelab.core.config import ConfigError, StateLabConfig
from statelab.core.errors import StateError
from statelab.core.rng import make_source

LOG = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=_LOG_FORMAT,
    )


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run (default: STATELAB_SEED or unseeded)")
    p.add_argument("--log_level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR).")


# -----------------------------------------------------------------------------
# Subcommands
# -----------------------------------------------------------------------------

def _cmd_demo(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="statelab demo", description="Run the narrated state examples.")
    p.add_argument(
        "--example",
        type=int,
        choices=range(1, len(demos.EXAMPLES) + 1),
        default=None,
        help="Run only this example (1-based)",
    )
    _add_common(p)
    args = p.parse_args(argv)
    _configure_logging(args.log_level)

    cfg = StateLabConfig.from_env(seed=args.seed)
    rng = make_source(cfg.seed) if cfg.seed is not None else None
    LOG.info("running demo example=%s seed=%s", args.example, cfg.seed)

    if args.example is None:
        demos.run_all(rng)
    else:
        demos.EXAMPLES[args.example - 1](rng)
    return 0


def _cmd_convergence(argv: List[str]) -> int:
    p = argparse.ArgumentParser(
        prog="statelab convergence",
        description="Observe N fresh RandomBool(p) once each and compare the frequency to p.",
    )
    p.add_argument("--p", dest="prob_true", type=float, default=None, help="Probability of true (default 0.5)")
    p.add_argument("--trials", type=int, default=None, help="Number of fresh variables (default 10000)")
    p.add_argument("--tolerance", type=float, default=None, help="Allowed |frequency - p| (default 0.05)")
    p.add_argument("--delta", type=float, default=None, help="Two-sided tail for intervals (default 0.05)")
    p.add_argument("--json", action="store_true", help="Emit a single JSON object instead of text")
    _add_common(p)
    args = p.parse_args(argv)
    _configure_logging(args.log_level)

    cfg = StateLabConfig.from_env(
        seed=args.seed,
        prob_true=args.prob_true,
        trials=args.trials,
        tolerance=args.tolerance,
        delta=args.delta,
    )
    result = run_convergence(cfg.prob_true, cfg.trials, seed=cfg.seed, delta=cfg.delta)
    ok = result.within(cfg.tolerance)

    if args.json:
        payload = result.model_dump(mode="json")
        payload.update(
            frequency=result.frequency,
            abs_error=result.abs_error,
            tolerance=cfg.tolerance,
            within_tolerance=ok,
        )
        print(json.dumps(payload, sort_keys=True))
    else:
        lo, hi = result.wilson_ci
        print(f"p={result.prob_true} trials={result.trials} hits={result.hits}")
        print(f"frequency={result.frequency:.4f} |error|={result.abs_error:.4f} (tolerance {cfg.tolerance})")
        print(f"wilson CI {1 - result.delta:.0%}: [{lo:.4f}, {hi:.4f}]  hoeffding radius: {result.hoeffding_radius:.4f}")
    return 0 if ok else 1


_COMMANDS = {
    "demo": _cmd_demo,
    "convergence": _cmd_convergence,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0].startswith("-"):
        cmd, rest = "demo", args
    else:
        cmd, rest = args[0], args[1:]

    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"unknown subcommand: {cmd} (expected one of {sorted(_COMMANDS)})", file=sys.stderr)
        return 2
    try:
        return handler(rest)
    except (StateError, ConfigError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
