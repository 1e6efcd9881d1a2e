"""Tests for line unfolding and looking up children of a component."""

import pytest

from termical.exceptions import MalformedLineError
from termical.parsing.component import Component, unfolded_lines
from termical.parsing.parser import parse_content


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("SUMMARY:Hello\n World", ["SUMMARY:HelloWorld"]),
        ("SUMMARY:Hello\r\n World", ["SUMMARY:HelloWorld"]),
        ("SUMMARY:Hello\n\tWorld", ["SUMMARY:HelloWorld"]),
        ("SUMMARY:Hello \n World", ["SUMMARY:Hello World"]),
        ("SUMMARY:Hel\n lo\n  Wor\n ld", ["SUMMARY:HelloWorld"]),
        ("SUMMARY:Hello\n World\nUID:1", ["SUMMARY:HelloWorld", "UID:1"]),
    ],
    ids=("lf", "crlf", "tab", "inner-space", "multiple", "followed"),
)
def test_unfold(content: str, expected: list[str]) -> None:
    """Test folded continuation lines are joined to the previous line."""
    assert unfolded_lines(content) == expected


def test_unfold_no_folding() -> None:
    """Test one line is produced per physical line when nothing is folded."""
    content = "BEGIN:VCALENDAR\r\nVERSION:2.0\r\nEND:VCALENDAR\r\n"
    assert unfolded_lines(content) == ["BEGIN:VCALENDAR", "VERSION:2.0", "END:VCALENDAR"]


def test_unfold_strips_content() -> None:
    """Test leading and trailing whitespace of the document is removed."""
    assert unfolded_lines("\n\n  BEGIN:A\nEND:A\n\n") == ["BEGIN:A", "END:A"]


def test_unfold_empty() -> None:
    """Test empty content produces a single empty line."""
    assert unfolded_lines("") == [""]
    assert unfolded_lines(" \r\n ") == [""]


@pytest.fixture(name="event")
def mock_event() -> Component:
    """Fixture for an event with repeated properties."""
    return Component(
        name="VEVENT",
        is_block=True,
        children=(
            Component(name="SUMMARY", value="Lunch"),
            Component(name="ATTENDEE", value="mailto:a@example.com"),
            Component(name="DTSTART", value="20230101T120000", params={"TZID": "UTC"}),
            Component(name="ATTENDEE", value="mailto:b@example.com"),
        ),
    )


def test_get_child(event: Component) -> None:
    """Test looking up the first child with a name."""
    child = event.get_child("ATTENDEE")
    assert child is not None
    assert child.value == "mailto:a@example.com"
    assert event.get_value("SUMMARY") == "Lunch"


def test_get_child_missing(event: Component) -> None:
    """Test a lookup that does not match returns None."""
    assert event.get_child("LOCATION") is None
    assert event.get_value("LOCATION") is None
    assert event.get_child("summary") is None


def test_get_children(event: Component) -> None:
    """Test multiple names are returned in request order."""
    children = event.get_children(["DTSTART", "LOCATION", "ATTENDEE", "SUMMARY"])
    assert [(child.name, child.value) for child in children] == [
        ("DTSTART", "20230101T120000"),
        ("ATTENDEE", "mailto:a@example.com"),
        ("ATTENDEE", "mailto:b@example.com"),
        ("SUMMARY", "Lunch"),
    ]


def test_get_children_missing(event: Component) -> None:
    """Test names without a match contribute nothing."""
    assert event.get_children(["LOCATION", "RRULE"]) == []
    assert event.get_children([]) == []


def test_get_parameter(event: Component) -> None:
    """Test reading parameters of a leaf component."""
    dtstart = event.get_child("DTSTART")
    assert dtstart is not None
    assert dtstart.get_parameter("TZID") == "UTC"
    assert dtstart.get_parameter("VALUE") is None
    assert event.get_parameter("TZID") is None


def test_unfold_blank_line_crlf() -> None:
    """Test a blank CRLF line is consumed as a fold of the following line."""
    assert unfolded_lines("A:1\r\n\r\nB:2") == ["A:1", "B:2"]


def test_unfold_blank_line_lf() -> None:
    """Test a blank LF line is kept and is then a malformed line."""
    assert unfolded_lines("A:1\n\nB:2") == ["A:1", "", "B:2"]
    with pytest.raises(MalformedLineError):
        parse_content("BEGIN:X\nA:1\n\nB:2\nEND:X")
    assert parse_content("BEGIN:X\r\nA:1\r\n\r\nB:2\r\nEND:X").get_value("B") == "2"
