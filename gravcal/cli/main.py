"""Command-line front end for accelerometer gravity calibration.

Run with::

    gravcal -f capture.csv -t 0.05 -n 1000

or ``python -m gravcal ...``. The capture is a header-less CSV of x, y, z
accelerations sampled at a fixed rate (30 Hz by default). On success one
correction per axis is printed to stdout; diagnostics go to stderr through
``logging``.

Exit status is 0 on success and 1 when the configuration is rejected or any
pipeline stage fails.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from gravcal.cli.formatters import format_json, format_text
from gravcal.config import (
    DEFAULT_EPOCH_SECONDS,
    DEFAULT_GRAVITY,
    DEFAULT_ITERATIONS,
    DEFAULT_SAMPLE_RATE_HZ,
    CalibrationConfig,
)
from gravcal.errors import CalibrationError, ConfigurationError
from gravcal.pipeline import run_calibration

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FORMATTERS = {"text": format_text, "json": format_json}


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``gravcal`` command."""
    parser = argparse.ArgumentParser(
        prog="gravcal",
        description="Estimate per-axis accelerometer offset and gain from a CSV capture.",
    )
    parser.add_argument("-f", "--file", default="", help="CSV file to parse.")
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=0.0,
        help="Maximum per-axis standard deviation for an epoch to be retained.",
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Number of iterations per epoch (default: {DEFAULT_ITERATIONS}).",
    )
    parser.add_argument(
        "--sample-rate",
        type=float,
        default=DEFAULT_SAMPLE_RATE_HZ,
        help=f"Sample rate of the capture in Hz (default: {DEFAULT_SAMPLE_RATE_HZ:g}).",
    )
    parser.add_argument(
        "--epoch-seconds",
        type=float,
        default=DEFAULT_EPOCH_SECONDS,
        help=f"Epoch duration in seconds (default: {DEFAULT_EPOCH_SECONDS:g}).",
    )
    parser.add_argument(
        "--gravity",
        type=float,
        default=DEFAULT_GRAVITY,
        help=f"Nominal gravitational constant in m/s² (default: {DEFAULT_GRAVITY}).",
    )
    parser.add_argument(
        "--format",
        choices=sorted(_FORMATTERS),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    return parser


def _config_from_args(args: argparse.Namespace) -> CalibrationConfig:
    return CalibrationConfig(
        source=args.file,
        threshold=args.threshold,
        iterations=args.iterations,
        sample_rate_hz=args.sample_rate,
        gravity=args.gravity,
        epoch_seconds=args.epoch_seconds,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, run the calibration, and print the corrections.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Returns:
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=_LOG_FORMAT,
    )

    try:
        config = _config_from_args(args)
    except ConfigurationError as e:
        logger.warning("%s Exiting.", e)
        parser.print_help(sys.stderr)
        return 1

    try:
        result = run_calibration(config)
    except CalibrationError as e:
        logger.error("%s", e)
        return 1

    print(_FORMATTERS[args.format](result))
    return 0
