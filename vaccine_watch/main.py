"""CLI entry point for the vaccination availability watcher."""

from __future__ import annotations

import argparse
import logging
import os
import random
import time
import webbrowser
from typing import Callable, Iterable, Sequence

from rich.console import Console

from .display import render_report
from .extraction import ExtractionError
from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FetchError, PageFetcher
from .ranking import DEFAULT_ALLOWED_REGIONS
from .watcher import AvailabilityWatcher

logger = logging.getLogger(__name__)

DEFAULT_URL = os.getenv(
    "VACCINE_WATCH_URL",
    "https://www.vgregion.se/ov/vaccinationstider/bokningsbara-tider/",
)
DEFAULT_MIN_SLEEP = 50.0
DEFAULT_MAX_SLEEP = 120.0


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the CLI."""

    args = _parse_args(argv)
    _configure_logging(args.log_level)

    regions = _parse_regions(args.region)
    if args.min_sleep < 0 or args.min_sleep > args.max_sleep:
        raise SystemExit("--min-sleep must be between 0 and --max-sleep")
    if args.max_attempts < 1:
        raise SystemExit("--max-attempts must be >= 1")

    action = None if args.no_browser else webbrowser.open
    console = Console()

    logging.info(
        "Watching %s for regions %s", args.url, ", ".join(sorted(regions))
    )

    with PageFetcher(
        args.url,
        user_agent=args.user_agent,
        timeout=args.timeout,
        max_attempts=args.max_attempts,
    ) as fetcher:
        watcher = AvailabilityWatcher(fetcher, allowed_regions=regions, action=action)
        try:
            if args.once:
                return _run_cycle(watcher, console)
            _poll_forever(watcher, console, args.min_sleep, args.max_sleep)
        except KeyboardInterrupt:
            logging.info("Interrupted, stopping")
            return 130
    return 0


def _run_cycle(watcher: AvailabilityWatcher, console: Console) -> int:
    try:
        report = watcher.poll_once()
    except (FetchError, ExtractionError):
        logger.exception("Poll cycle failed")
        return 1
    render_report(report, console)
    return 0


def _poll_forever(
    watcher: AvailabilityWatcher,
    console: Console,
    min_sleep: float,
    max_sleep: float,
    *,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: int | None = None,
) -> None:
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        _run_cycle(watcher, console)
        cycles += 1

        wait = random.uniform(min_sleep, max_sleep)
        logger.debug("Sleeping %.0fs", wait)
        sleep(wait)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=DEFAULT_URL, help="Booking page to poll")
    parser.add_argument(
        "--region",
        action="append",
        default=None,
        help="Region to report (repeatable, replaces the default allow-list)",
    )
    parser.add_argument(
        "--min-sleep",
        type=float,
        default=DEFAULT_MIN_SLEEP,
        help="Minimum seconds between polls",
    )
    parser.add_argument(
        "--max-sleep",
        type=float,
        default=DEFAULT_MAX_SLEEP,
        help="Maximum seconds between polls",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header to send with HTTP requests",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=1,
        help="HTTP attempts per poll before the cycle fails",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Only print changes, never open a booking link",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Poll a single time and exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG)",
    )

    return parser.parse_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(message)s",
    )


def _parse_regions(values: Iterable[str] | None) -> frozenset[str]:
    if values is None:
        return DEFAULT_ALLOWED_REGIONS
    regions = frozenset(value.strip() for value in values if value.strip())
    if not regions:
        raise SystemExit("At least one region must be specified")
    return regions


if __name__ == "__main__":
    raise SystemExit(main())
