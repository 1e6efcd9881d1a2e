"""Library for splitting a single rfc5545 content line into its fields.

A content line is the unfolded form of a single property, or a BEGIN/END
marker of a component. This is a very simple parser that only splits the
line into a name, optional parameters and a raw value. It does not attempt
to interpret the meaning of the properties or their types.

For example, given a content line of:

  DTSTART;TZID=America/New_York:20230101T090000

This library would create a ParsedLine with this structure:

  ParsedLine(
    name='DTSTART',
    value='20230101T090000',
    params={'TZID': 'America/New_York'},
  )

The first ':' always ends the name and parameters, so everything after it,
including any further ':' characters, belongs to the value. Names, parameter
names and values are kept exactly as written (case sensitive, untrimmed).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from types import MappingProxyType
from typing import Optional

from pyparsing import (
    Group,
    ParseBaseException,
    ParserElement,
    Regex,
    Suppress,
    ZeroOrMore,
)

from termical.exceptions import MalformedLineError
from .const import NAME_SEP, PARAM_SEP, PARAM_VALUE_SEP

_LOGGER = logging.getLogger(__name__)

PARSE_NAME = "name"
PARSE_VALUE = "value"
PARSE_PARAMS = "params"
PARSE_PARAM_NAME = "param_name"
PARSE_PARAM_VALUE = "param_value"


@dataclass(frozen=True)
class ParsedLine:
    """The fields of a single content line."""

    name: str
    value: str
    params: Optional[Mapping[str, str]] = field(default=None, hash=False)
    """Parameters from ';KEY=VALUE' segments, None when the line had none."""


@cache
def create_parser() -> ParserElement:
    """Create the content line grammar.

    A parameter segment admits no ';', ':' or '=' on either side of its
    single '=', so a segment with zero or several '=' fails to match.
    """
    name = Regex(f"[^{PARAM_SEP}{NAME_SEP}]*")
    param_name = Regex(f"[^{PARAM_SEP}{NAME_SEP}{PARAM_VALUE_SEP}]*")
    param_value = Regex(f"[^{PARAM_SEP}{NAME_SEP}{PARAM_VALUE_SEP}]*")
    param = Group(
        param_name.set_results_name(PARSE_PARAM_NAME)
        + Suppress(PARAM_VALUE_SEP)
        + param_value.set_results_name(PARSE_PARAM_VALUE)
    )
    contentline = (
        name.set_results_name(PARSE_NAME)
        + Group(ZeroOrMore(Suppress(PARAM_SEP) + param)).set_results_name(
            PARSE_PARAMS
        )
        + Suppress(NAME_SEP)
        + Regex(".*").set_results_name(PARSE_VALUE)
    )
    # Whitespace is significant everywhere in a content line
    contentline.leave_whitespace()
    contentline.parse_with_tabs()
    return contentline


def parse_line(line: str) -> ParsedLine:
    """Parse a single unfolded content line.

    Raises a MalformedLineError when the line has no ':' or a parameter
    segment does not have exactly one '='.
    """
    if NAME_SEP not in line:
        raise MalformedLineError(
            f"Invalid content line, expected '{NAME_SEP}' after property name",
            detailed_error=line,
        )
    try:
        result = create_parser().parse_string(line, parse_all=True)
    except ParseBaseException as err:
        raise MalformedLineError(
            f"Invalid content line, expected '{PARAM_SEP}KEY{PARAM_VALUE_SEP}VALUE' parameters",
            detailed_error=line,
        ) from err

    params: dict[str, str] = {}
    for param in result.get(PARSE_PARAMS, []):
        params[param.get(PARSE_PARAM_NAME, "")] = param.get(PARSE_PARAM_VALUE, "")
    parsed = ParsedLine(
        name=result.get(PARSE_NAME, ""),
        value=result.get(PARSE_VALUE, ""),
        params=MappingProxyType(params) if params else None,
    )
    _LOGGER.debug("Parsed content line %s", parsed)
    return parsed
