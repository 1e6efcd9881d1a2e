"""Test fixtures."""

from collections.abc import Callable, Generator
import textwrap

import httpx
import pytest

CALENDAR_ICS = textwrap.dedent(
    """\
    BEGIN:VCALENDAR
    VERSION:2.0
    PRODID:-//example//termical//EN
    BEGIN:VEVENT
    UID:standup@example.com
    DTSTART:20230301T120000Z
    DTEND:20230301T123000Z
    SUMMARY:Standup
    DESCRIPTION:Daily sync
    END:VEVENT
    BEGIN:VEVENT
    UID:review@example.com
    DTSTART:20230301T100000Z
    DTEND:20230301T110000Z
    SUMMARY:Design review
    END:VEVENT
    BEGIN:VEVENT
    UID:tomorrow@example.com
    DTSTART:20230302T120000Z
    DTEND:20230302T130000Z
    SUMMARY:Retro
    END:VEVENT
    BEGIN:VTODO
    UID:todo@example.com
    SUMMARY:Not an event
    END:VTODO
    END:VCALENDAR
    """
)


@pytest.fixture(name="calendar_ics")
def mock_calendar_ics() -> str:
    """Fixture for the content of a small calendar."""
    return CALENDAR_ICS


@pytest.fixture(name="create_client")
def mock_create_client() -> Generator[Callable[..., httpx.Client], None, None]:
    """Fixture that creates http clients answering with a fixed response."""
    clients: list[httpx.Client] = []

    def _create(
        status_code: int = 200, text: str = CALENDAR_ICS
    ) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=text)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _create
    for client in clients:
        client.close()
