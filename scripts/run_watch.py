#!/usr/bin/env python3
"""Saigai Watch CLI: fetch recent earthquakes and write the monitoring page.

Usage:
    python scripts/run_watch.py
    python scripts/run_watch.py --lang ja --output outputs/quakes.html
    python scripts/run_watch.py --all-locales
    python scripts/run_watch.py --toggle-theme
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.defaults import (  # noqa: E402
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    OUTPUT_PATH,
    PREFERENCES_PATH,
    SUPPORTED_LOCALES,
    USGS_REQUEST_TIMEOUT,
)
from config.settings import WatchConfig  # noqa: E402


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argparse argument parser."""
    parser = argparse.ArgumentParser(
        prog="run_watch",
        description="Saigai Watch: recent seismic events around Japan",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--lang",
        type=str,
        default=DEFAULT_LOCALE,
        choices=list(SUPPORTED_LOCALES),
        help="Initial display language",
    )
    parser.add_argument(
        "--all-locales",
        action="store_true",
        default=False,
        help="Also toggle the language and write the page in the other locale, "
             "linking the two via the language button",
    )
    parser.add_argument(
        "--toggle-theme",
        action="store_true",
        default=False,
        help="Flip the saved light/dark preference before rendering",
    )
    # Unset flags fall through to WatchConfig, which applies env overrides
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=f"Destination HTML file (env SAIGAIWATCH_OUTPUT, else {OUTPUT_PATH})",
    )
    parser.add_argument(
        "--preferences",
        type=str,
        default=None,
        help=f"Path of the local theme preference file "
             f"(env SAIGAIWATCH_PREFERENCES, else {PREFERENCES_PATH})",
    )
    parser.add_argument(
        "--request-timeout",
        type=int,
        default=None,
        help=f"HTTP timeout for the feed request in seconds "
             f"(env USGS_REQUEST_TIMEOUT, else {USGS_REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--timezone",
        type=str,
        default=None,
        help="IANA time zone for the 'Last updated' clock "
             "(env SAIGAIWATCH_TIMEZONE, else the machine's local zone)",
    )
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Override the reference time for the 48-hour window (ISO 8601, UTC if naive)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging verbosity level (env LOG_LEVEL, else {DEFAULT_LOG_LEVEL})",
    )
    return parser


# CLI flag -> WatchConfig field, for flags that default to None
_OPTIONAL_FIELDS = {
    "output": "output_path",
    "preferences": "preferences_path",
    "request_timeout": "request_timeout",
    "timezone": "display_timezone",
    "log_level": "log_level",
}


def args_to_config(args: argparse.Namespace) -> WatchConfig:
    """Convert parsed CLI arguments to a WatchConfig instance.

    Only flags given on the command line are passed on; the rest keep
    WatchConfig's environment-aware defaults.
    """
    overrides = {
        field_name: getattr(args, flag)
        for flag, field_name in _OPTIONAL_FIELDS.items()
        if getattr(args, flag) is not None
    }
    return WatchConfig(locale=args.lang, **overrides)


def locale_output_path(output: str | Path, locale: str) -> Path:
    """``outputs/page.html`` -> ``outputs/page.ja.html``."""
    output = Path(output)
    return output.with_name(f"{output.stem}.{locale}{output.suffix}")


def main(argv: list | None = None) -> int:
    """CLI entrypoint: parse arguments, run a cycle, write the page."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = args_to_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    from saigaiwatch.utils.logging_utils import configure_logging

    configure_logging(log_level=config.log_level)
    logger = logging.getLogger("saigaiwatch.run_watch")

    from saigaiwatch.controller import AppController
    from saigaiwatch.utils.date_utils import parse_datetime, utc_now

    if args.now:
        try:
            fixed_now = parse_datetime(args.now)
        except ValueError as exc:
            parser.error(str(exc))
        clock = lambda: fixed_now  # noqa: E731
    else:
        clock = utc_now

    try:
        with AppController(config, clock=clock) as controller:
            if args.toggle_theme:
                controller.state.dark_mode = controller.theme_store.load()
                controller.toggle_theme()
            controller.start()

            first_path = Path(config.output_path)
            if not args.all_locales:
                if controller.export_page(first_path) is None:
                    logger.error("Page export failed")
                    return 1
                logger.info("Wrote %s", first_path)
                return 0

            first_locale = controller.locale.locale
            other_locale = next(loc for loc in SUPPORTED_LOCALES if loc != first_locale)
            second_path = locale_output_path(first_path, other_locale)
            ok = controller.export_page(first_path, alternate_href=second_path.name) is not None
            state = controller.toggle_language()
            ok = ok and controller.export_page(second_path, alternate_href=first_path.name) is not None
            if not ok:
                logger.error("Page export failed")
                return 1
            logger.info("Wrote %s (%s) and %s (%s)",
                        first_path, first_locale, second_path, state.locale)
            return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as exc:
        logger.exception("Saigai Watch failed with unhandled exception: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
