"""Command line tool that prints the events of the day.

Each configured calendar is downloaded and parsed independently, so a
calendar that can't be read is reported and skipped without affecting the
others.
"""

from __future__ import annotations

import argparse
import datetime
import logging
from collections.abc import Sequence

import httpx

from .config import DEFAULT_CONFIG, Config, load_config
from .event import Event, events_on, iter_events
from .exceptions import CalendarError, ConfigError
from .fetch import HEADERS, fetch_calendar

_LOGGER = logging.getLogger(__name__)

NO_EVENTS = "No Events To Show!"


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the termical CLI."""
    parser = argparse.ArgumentParser(
        prog="termical",
        description="Print the events of the day from remote iCalendar feeds",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG,
        metavar="PATH",
        help=f"Configuration file listing the calendars (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--date",
        type=datetime.date.fromisoformat,
        metavar="YYYY-MM-DD",
        help="Day to show events for (default: today)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require END lines to name the block they close",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def collect_events(config: Config, client: httpx.Client) -> list[Event]:
    """Read the events of all configured calendars."""
    events: list[Event] = []
    for source in config.calendars:
        try:
            calendar = fetch_calendar(
                source.name,
                source.url,
                client=client,
                timeout=config.timeout,
                strict=config.strict,
            )
        except CalendarError as err:
            _LOGGER.warning("Failed to read calendar %s: %s", source.name, err)
            continue
        events.extend(iter_events(calendar))
    return events


def main(argv: Sequence[str] | None = None) -> int:
    """Run the termical CLI."""
    args = _create_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
    except ConfigError as err:
        _LOGGER.error("%s", err)
        return 1
    if args.strict:
        config = config.model_copy(update={"strict": True})

    with httpx.Client(follow_redirects=True, headers=HEADERS) as client:
        events = collect_events(config, client)

    day = args.date or datetime.date.today()
    if not (todays_events := events_on(events, day)):
        print(NO_EVENTS)
        return 0
    for event in todays_events:
        print(event.format())
    return 0
