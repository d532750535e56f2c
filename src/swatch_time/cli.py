from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from typing import List

from .beats import Algorithm
from .config import ClockConfig, debug_enabled, load_clock_config
from .format import BEATS, MICRO_BEATS
from .internet_time import new, with_algorithm, with_time

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swatch-time",
        description="Print the current Swatch Internet Time (centibeats @000.00 by default)",
    )
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument("-r", dest="raw", action="store_true", help="use raw float format @000.000000")
    layout.add_argument("-s", dest="standard", action="store_true", help="use Swatch standard format @000")
    parser.add_argument("-p", dest="precise", action="store_true", help="use a more precise calculation algorithm")
    parser.add_argument("-d", dest="date", action="store_true", help="print date as well")
    parser.add_argument("--config", default=None, help="Optional JSON config (layout, precision, date, algorithm)")
    parser.add_argument("--time", default=None, help="ISO-8601 time to convert instead of now")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def _resolve_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ClockConfig:
    if args.config:
        try:
            cfg = load_clock_config(args.config)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            parser.error(f"cannot load config {args.config}: {e}")
    else:
        cfg = ClockConfig()
    if args.raw:
        cfg.layout = MICRO_BEATS
    elif args.standard:
        cfg.layout = BEATS
    if args.precise:
        cfg.algorithm = Algorithm.TOTAL_NANOSECONDS
    if args.date:
        cfg.date = True
    return cfg


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose or debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cfg = _resolve_config(args, parser)

    options = [with_algorithm(cfg.algorithm)]
    if args.time:
        try:
            options.append(with_time(datetime.fromisoformat(args.time)))
        except ValueError as e:
            parser.error(f"invalid --time {args.time!r}: {e}")

    stamp = new(*options).format(cfg.full_layout())
    logger.debug("layout=%r algorithm=%s", cfg.full_layout(), cfg.algorithm.name)
    print(stamp)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
