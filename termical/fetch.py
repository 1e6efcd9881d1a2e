"""Download remote calendars and parse them into a component tree.

The parsing library performs no I/O itself. This module is a convenience
for the common case of reading a published calendar from a url:

```python
from termical.fetch import fetch_calendar

calendar = fetch_calendar("work", "https://example.com/work.ics")
for event in calendar.get_children(["VEVENT"]):
    print(event.get_value("SUMMARY"))
```
"""

from __future__ import annotations

import logging

import httpx

from .exceptions import FetchError
from .parsing.component import Component
from .parsing.parser import parse_content

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
HEADERS = {
    "Accept": "text/calendar, text/plain, */*",
}


def fetch_ics(
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the text content of the calendar at the url.

    An existing client may be passed in to share connections between
    calendars, otherwise a new client is created for this request.
    """
    if client is None:
        with httpx.Client(follow_redirects=True, headers=HEADERS) as new_client:
            return fetch_ics(url, client=new_client, timeout=timeout)
    try:
        response = client.get(url, timeout=timeout)
    except httpx.HTTPError as err:
        raise FetchError(f"Failed to retrieve calendar {url}: {err}") from err
    if response.status_code != httpx.codes.OK:
        raise FetchError(
            f"Received an invalid response code for {url}: {response.status_code}"
        )
    return response.text


def fetch_calendar(
    name: str,
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    strict: bool = False,
) -> Component:
    """Download and parse a complete calendar."""
    content = fetch_ics(url, client=client, timeout=timeout)
    _LOGGER.info("Downloaded calendar: %s", name)
    component = parse_content(content, strict=strict)
    _LOGGER.info("Parsed calendar: %s", name)
    return component
