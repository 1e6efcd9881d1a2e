"""A parser for rfc5545 content lines into a component tree.

The parser walks the unfolded content lines with a cursor. Each call to
`ComponentParser.parse_one` consumes exactly one component: a leaf property
line, or a BEGIN line together with everything up to and including the END
line that closes it. Open blocks are kept on an explicit stack, so nesting
depth is not limited by the interpreter's recursion limit.

By default any END line closes the innermost open block, whatever block
name it carries. Pass `strict=True` to require that the END value matches
the name of the block being closed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from termical.exceptions import (
    MismatchedBlockError,
    UnexpectedEndError,
    UnterminatedBlockError,
)
from .component import Component, unfolded_lines
from .const import ATTR_BEGIN, ATTR_END
from .property import parse_line

_LOGGER = logging.getLogger(__name__)


class ComponentParser:
    """Builds a component tree from a sequence of unfolded content lines."""

    def __init__(self, lines: Sequence[str], *, strict: bool = False) -> None:
        """Initialize ComponentParser."""
        self._lines = lines
        self._strict = strict
        self._index = 0

    @property
    def index(self) -> int:
        """Return the index of the next unconsumed line."""
        return self._index

    @property
    def exhausted(self) -> bool:
        """Return True when all lines have been consumed."""
        return self._index >= len(self._lines)

    def parse_one(self) -> Component | None:
        """Parse the next component and advance the cursor past it.

        Returns None when the consumed line was an END line, which tells
        the caller that its block is finished.
        """
        # Open blocks, innermost last: (BEGIN line, block name, children)
        stack: list[tuple[str, str, list[Component]]] = []
        while True:
            if stack and self.exhausted:
                begin_line, name, _ = stack[-1]
                raise UnterminatedBlockError(
                    f"Unexpected end of content, expected {ATTR_END}:{name}",
                    detailed_error=begin_line,
                )
            line = self._lines[self._index]
            parsed = parse_line(line)
            self._index += 1

            if parsed.name == ATTR_BEGIN:
                stack.append((line, parsed.value, []))
                continue
            if parsed.name == ATTR_END:
                if not stack:
                    return None
                _, name, children = stack.pop()
                if self._strict and parsed.value != name:
                    raise MismatchedBlockError(
                        f"Unexpected '{line}', expected {ATTR_END}:{name}",
                        detailed_error=line,
                    )
                component = Component(
                    name=name, children=tuple(children), is_block=True
                )
            else:
                component = Component(
                    name=parsed.name, value=parsed.value, params=parsed.params
                )

            if not stack:
                return component
            stack[-1][2].append(component)

    def parse_root(self) -> Component:
        """Parse the next component, which may not be an END line."""
        line = self._lines[self._index]
        if (component := self.parse_one()) is None:
            raise UnexpectedEndError(
                f"Unexpected '{line}', no {ATTR_BEGIN} block is open",
                detailed_error=line,
            )
        return component


def parse_content(content: str, *, strict: bool = False) -> Component:
    """Parse calendar content into a single root component.

    This includes all necessary unfolding of long lines. Only the first
    top-level component is returned, any lines following it are ignored.
    """
    parser = ComponentParser(unfolded_lines(content), strict=strict)
    root = parser.parse_root()
    if not parser.exhausted:
        _LOGGER.debug(
            "Ignoring content after %s component starting at line %s",
            root.name,
            parser.index,
        )
    return root


def parse_stream(content: str, *, strict: bool = False) -> list[Component]:
    """Parse calendar content into all of its top-level components."""
    parser = ComponentParser(unfolded_lines(content), strict=strict)
    components = [parser.parse_root()]
    while not parser.exhausted:
        components.append(parser.parse_root())
    _LOGGER.debug("Parsed %d top-level components", len(components))
    return components
