"""Library for parsing rfc5545 content into a generic component tree.

The parsing library has no knowledge of what any component or property
means, it only turns folded text into `Component` objects.
"""

from .component import Component, unfolded_lines
from .parser import ComponentParser, parse_content, parse_stream
from .property import ParsedLine, parse_line

__all__ = [
    "Component",
    "ComponentParser",
    "ParsedLine",
    "parse_content",
    "parse_line",
    "parse_stream",
    "unfolded_lines",
]
