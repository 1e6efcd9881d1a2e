"""
.. include:: ../README.md
"""

__all__ = [
    "cli",
    "config",
    "event",
    "exceptions",
    "fetch",
    "parsing",
]
