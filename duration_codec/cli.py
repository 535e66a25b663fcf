"""duration-codec CLI -- format, parse and inspect compact duration strings.

Usage:
    duration-codec format 123000000000         -> 123s
    duration-codec parse 1500us                -> 1500000
    duration-codec normalize 120s              -> 2m
    duration-codec convert 2h --to minutes     -> 120
    duration-codec check --config config.yaml  Validate named durations
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from duration_codec.codec import format_duration, parse_duration
from duration_codec.config import load_config
from duration_codec.errors import DurationError
from duration_codec.units import TimeUnit

logger = logging.getLogger(__name__)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: str) -> None:
    """Configure logging for the command line."""
    logging.basicConfig(
        level=_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _ticks_arg(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer tick count: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duration-codec",
        description="Convert between nanosecond tick counts and compact duration strings",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: logging.level from config for check, else WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("format", help="Format a tick count, e.g. 1500000 -> 1500us")
    p.add_argument("ticks", type=_ticks_arg)

    p = sub.add_parser("parse", help="Parse a duration string into a tick count")
    p.add_argument("text")

    p = sub.add_parser("normalize", help="Rewrite a duration string in its coarsest exact unit")
    p.add_argument("text")

    p = sub.add_parser("convert", help="Express a duration as a whole number of another unit")
    p.add_argument("text")
    p.add_argument("--to", dest="unit", required=True, help="Target unit, e.g. ms or minutes")

    p = sub.add_parser("check", help="Validate the named durations in a config file")
    p.add_argument("--config", "-c", type=str, default=None, help="Path to config.yaml")
    p.add_argument("--env", type=str, default=None, help="Path to .env file")

    return parser


def _convert(text: str, unit_name: str) -> str:
    ticks = parse_duration(text)
    unit = TimeUnit.from_name(unit_name)
    magnitude, remainder = divmod(ticks, unit.scale)
    if remainder:
        raise DurationError(f"{text} is not a whole number of {unit_name}")
    return str(magnitude)


def _check(config_path: str | None, env_path: str | None, log_level: str | None) -> list[str]:
    config = load_config(config_path, env_path)
    if log_level is None:
        logging.getLogger().setLevel(_level(config.logging.level))
    lines = []
    for name, duration in sorted(config.durations.items()):
        normalized = duration.normalized()
        if normalized == duration:
            lines.append(f"{name}: {duration}")
        else:
            lines.append(f"{name}: {duration} (= {normalized})")
    logger.info("Checked %d named durations", len(lines))
    return lines


def run(args: argparse.Namespace) -> list[str]:
    if args.command == "format":
        return [format_duration(args.ticks)]
    if args.command == "parse":
        return [str(parse_duration(args.text))]
    if args.command == "normalize":
        return [format_duration(parse_duration(args.text))]
    if args.command == "convert":
        return [_convert(args.text, args.unit)]
    if args.command == "check":
        return _check(args.config, args.env, args.log_level)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    try:
        lines = run(args)
    except (DurationError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
