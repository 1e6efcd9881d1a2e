"""Library for handling rfc5545 components.

An iCalendar object consists of one or more components, that may have
properties or sub-components. An example of a component might be the
calendar itself, an event, a to-do, timezone info, etc.

Components created here have no semantic meaning. A block component
(from a BEGIN/END pair) holds its children in source order, and a leaf
component holds the raw value and parameters of a single property line.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .const import FOLD, LINES

FOLD_RE = re.compile(FOLD)
LINES_RE = re.compile(LINES)


@dataclass(frozen=True)
class Component:
    """A node in a parsed rfc5545 component tree."""

    name: str
    value: str = ""
    params: Optional[Mapping[str, str]] = field(default=None, hash=False)
    children: tuple[Component, ...] = ()
    is_block: bool = False

    def __post_init__(self) -> None:
        """Keep a read-only copy of the parameters."""
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def get_child(self, name: str) -> Component | None:
        """Return the first direct child with the specified name, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def get_children(self, names: Iterable[str]) -> list[Component]:
        """Return the direct children matching each name, in request order.

        All matches for the first name come first (in child order), then all
        matches for the second name, and so on. Names without a match add
        nothing to the result.
        """
        return [
            child for name in names for child in self.children if child.name == name
        ]

    def get_value(self, name: str) -> str | None:
        """Return the raw value of the first direct child with the name."""
        if (child := self.get_child(name)) is None:
            return None
        return child.value

    def get_parameter(self, name: str) -> str | None:
        """Return the value of a parameter on this component."""
        if not self.params:
            return None
        return self.params.get(name)


def unfolded_lines(content: str) -> list[str]:
    """Read content and unfold lines.

    Folded continuation lines are joined to the previous line by removing
    the line break and the leading whitespace. The returned lines carry no
    line terminators.
    """
    content = FOLD_RE.sub("", content.strip())
    return LINES_RE.split(content)
