"""Command-line entry point that runs one benchmark kernel."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from stencilbench import (
    adi,
    convolution2d,
    convolution3d,
    fdtd2d,
    fdtd_apml,
    jacobi1d,
    jacobi2d,
    seidel2d,
    template,
)
from stencilbench.arrays import Dataset
from stencilbench.timing import DEFAULT_CACHE_SIZE_KB, Timer, TimerMode

BENCHMARKS = {
    "template": template.run,
    "adi": adi.run,
    "convolution-2d": convolution2d.run,
    "convolution-3d": convolution3d.run,
    "fdtd-2d": fdtd2d.run,
    "fdtd-apml": fdtd_apml.run,
    "jacobi-1d-imper": jacobi1d.run,
    "jacobi-2d-imper": jacobi2d.run,
    "seidel-2d": seidel2d.run,
}

_TIMER_MODES = [mode.value for mode in TimerMode if mode is not TimerMode.NONE]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stencilbench",
        description="Run a stencil benchmark kernel.",
    )
    parser.add_argument("benchmark", choices=sorted(BENCHMARKS))
    parser.add_argument(
        "--dataset",
        type=Dataset.from_name,
        default=None,
        help="problem size: mini, small, standard, large or extralarge",
    )
    parser.add_argument(
        "--timer",
        choices=_TIMER_MODES,
        default=None,
        help="report the kernel time; nothing is reported when omitted",
    )
    parser.add_argument(
        "--flops",
        type=float,
        default=0.0,
        help="floating-point operation count used by the gflops timer",
    )
    parser.add_argument(
        "--no-flush",
        action="store_true",
        help="do not flush the cache before timing",
    )
    parser.add_argument(
        "--cache-size-kb",
        type=int,
        default=DEFAULT_CACHE_SIZE_KB,
        help="size of the buffer touched to flush the cache",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="write the live-out arrays to standard error",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen benchmark and print its report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.cache_size_kb < 0:
        parser.error("--cache-size-kb must be non-negative")

    timer = None
    if args.timer is not None:
        timer = Timer(
            mode=TimerMode(args.timer),
            program_flops=args.flops,
            flush=not args.no_flush,
            cache_size_kb=args.cache_size_kb,
        )

    BENCHMARKS[args.benchmark](
        args.dataset,
        timer,
        sys.stderr if args.dump else None,
    )

    if timer is not None:
        sys.stdout.write(timer.report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())