"""Events read from a parsed calendar.

This is a small read-only view of VEVENT components, with just enough date
handling to answer "what is on my calendar today". Recurrence rules are not
expanded, so only the first instance of a recurring event is seen.
"""

from __future__ import annotations

import datetime
import logging
import zoneinfo
from collections.abc import Generator, Iterable
from dataclasses import dataclass

from dateutil.parser import isoparse

from .parsing.component import Component

_LOGGER = logging.getLogger(__name__)

VEVENT = "VEVENT"
DTSTART = "DTSTART"
DTEND = "DTEND"
SUMMARY = "SUMMARY"
DESCRIPTION = "DESCRIPTION"
TZID = "TZID"
EVENT_FIELDS = [DTSTART, DTEND, SUMMARY, DESCRIPTION]

TIME_FORMAT = "%I:%M%p"


def local_timezone() -> datetime.tzinfo:
    """Get the local timezone to use for floating times."""
    if local_tz := datetime.datetime.now().astimezone().tzinfo:
        return local_tz
    return datetime.timezone.utc


def parse_datetime(
    prop: Component, tzinfo: datetime.tzinfo | None = None
) -> datetime.datetime:
    """Parse the raw value of a DATE or DATE-TIME property.

    A TZID parameter selects the timezone of the value. Floating values
    without one are interpreted in `tzinfo`, or the local timezone.
    """
    try:
        result = isoparse(prop.value)
    except ValueError as err:
        raise ValueError(
            f"Expected {prop.name} value to be a DATE-TIME: '{prop.value}'"
        ) from err
    if result.tzinfo is not None:
        return result

    timezone = tzinfo or local_timezone()
    if tzid := prop.get_parameter(TZID):
        try:
            timezone = zoneinfo.ZoneInfo(tzid)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError):
            _LOGGER.warning("Unknown TZID '%s', using %s instead", tzid, timezone)
    return result.replace(tzinfo=timezone)


@dataclass(frozen=True)
class Event:
    """A single calendar event."""

    summary: str
    description: str
    start: datetime.datetime
    end: datetime.datetime

    @classmethod
    def from_component(
        cls, component: Component, tzinfo: datetime.tzinfo | None = None
    ) -> Event | None:
        """Create an Event from a VEVENT component.

        Returns None if the component is missing a start time or summary. An
        invalid date raises a ValueError.
        """
        fields: dict[str, Component] = {}
        for prop in component.get_children(EVENT_FIELDS):
            fields.setdefault(prop.name, prop)
        if DTSTART not in fields or SUMMARY not in fields:
            return None
        start = parse_datetime(fields[DTSTART], tzinfo)
        end = parse_datetime(fields[DTEND], tzinfo) if DTEND in fields else start
        description = fields[DESCRIPTION].value if DESCRIPTION in fields else ""
        return cls(
            summary=fields[SUMMARY].value,
            description=description,
            start=start,
            end=end,
        )

    def timespan(self, tzinfo: datetime.tzinfo | None = None) -> str:
        """Return the start and end times, e.g. '09:00am - 10:30am'."""
        tzinfo = tzinfo or local_timezone()
        start = self.start.astimezone(tzinfo).strftime(TIME_FORMAT)
        end = self.end.astimezone(tzinfo).strftime(TIME_FORMAT)
        return f"{start} - {end}".lower()

    def format(self, tzinfo: datetime.tzinfo | None = None) -> str:
        """Return a one line description of the event."""
        return f"[{self.timespan(tzinfo)}]: {self.summary} - {self.description}"


def iter_events(
    calendar: Component, tzinfo: datetime.tzinfo | None = None
) -> Generator[Event, None, None]:
    """Yield the events of a calendar, skipping any that can't be read."""
    for child in calendar.children:
        if child.name != VEVENT:
            continue
        try:
            event = Event.from_component(child, tzinfo)
        except ValueError as err:
            _LOGGER.warning("Skipping event with invalid dates: %s", err)
            continue
        if event is None:
            _LOGGER.warning(
                "Skipping event without %s or %s: %s",
                DTSTART,
                SUMMARY,
                child.get_value("UID"),
            )
            continue
        yield event


def events_on(
    events: Iterable[Event],
    day: datetime.date,
    tzinfo: datetime.tzinfo | None = None,
) -> list[Event]:
    """Return the events starting on the day, ordered by start time."""
    tzinfo = tzinfo or local_timezone()
    return sorted(
        (event for event in events if event.start.astimezone(tzinfo).date() == day),
        key=lambda event: event.start,
    )
