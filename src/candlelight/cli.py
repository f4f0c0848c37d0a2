from __future__ import annotations

import argparse
import logging

from candlelight import __version__
from candlelight.brightness import InvalidValue, Limits, parse_input_value
from candlelight.config import ConfigError, load
from candlelight.controller import Controller, Intent

INPUT_HELP = (
    "Sets brightness by either absolute or percentage, "
    "the valid range is between 1 to 7500 or 0%% to 100%%."
)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="candlelight",
        description="A tiny utility to get/set the brightness of a laptop backlight",
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-c", "--config", help="YAML config file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    ap.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="Previews change. Restores the previous brightness after a few seconds",
    )

    group = ap.add_mutually_exclusive_group()
    group.add_argument("INPUT", nargs="?", help=INPUT_HELP)
    group.add_argument(
        "-q",
        "--current-settings",
        dest="query",
        action="store_true",
        help="Displays current settings",
    )
    group.add_argument(
        "-m", dest="minimum", action="store_true", help="Sets brightness to minimum value"
    )
    group.add_argument(
        "-M", dest="maximum", action="store_true", help="Sets brightness to maximum value"
    )

    return ap


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _intent(ap: argparse.ArgumentParser, args: argparse.Namespace, limits: Limits) -> Intent:
    has_input = args.INPUT is not None or args.minimum or args.maximum
    if args.preview and not has_input:
        ap.error("the following arguments are required for -p/--preview: INPUT, -m or -M")

    if args.query or not has_input:
        return Intent(query=True)

    if args.INPUT is not None:
        try:
            target = parse_input_value(args.INPUT, limits)
        except InvalidValue as e:
            ap.error(str(e))
    elif args.maximum:
        target = limits.maximum
    else:
        target = limits.minimum

    return Intent(query=False, target=target, preview=args.preview)


def main(argv: list[str] | None = None) -> None:
    ap = _build_parser()
    args = ap.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        cfg = load(args.config)
    except ConfigError as e:
        ap.error(str(e))

    ctl = Controller(cfg)
    ctl.run(_intent(ap, args, ctl.limits))
