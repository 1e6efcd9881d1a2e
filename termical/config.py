"""Configuration of the calendars to read.

The configuration is a TOML file that lists calendar names, with a table
per calendar holding its url:

```toml
calendars = ["work", "home"]

[work]
url = "https://example.com/work.ics"

[home]
url = "https://example.com/home.ics"
```

The optional top-level keys `strict` and `timeout` control END matching
in the parser and the HTTP timeout in seconds.
"""

from __future__ import annotations

import logging
import pathlib
import tomllib
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .fetch import DEFAULT_TIMEOUT

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG = "config.toml"
ATTR_CALENDARS = "calendars"
ATTR_URL = "url"


class CalendarSource(BaseModel):
    """A named remote calendar."""

    name: str
    url: str = Field(min_length=1)


class Config(BaseModel):
    """All calendars to read and how to read them."""

    calendars: list[CalendarSource] = Field(min_length=1)
    strict: bool = False
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


def config_from_dict(data: dict[str, Any]) -> Config:
    """Create a Config from the contents of a configuration file."""
    names = data.get(ATTR_CALENDARS)
    if not isinstance(names, list) or not names:
        raise ConfigError("You must provide at least 1 calendar")

    sources: list[dict[str, Any]] = []
    for name in names:
        if not isinstance(name, str):
            raise ConfigError(f"Calendar name must be a string, got {name!r}")
        table = data.get(name)
        if not isinstance(table, dict) or ATTR_URL not in table:
            raise ConfigError(f"Calendar [{name}] did not provide a valid URL value")
        sources.append({"name": name, ATTR_URL: table[ATTR_URL]})

    options = {key: data[key] for key in ("strict", "timeout") if key in data}
    try:
        return Config(calendars=sources, **options)
    except ValidationError as err:
        raise ConfigError(f"Invalid configuration: {err}") from err


def load_config(path: str | pathlib.Path = DEFAULT_CONFIG) -> Config:
    """Read and validate a configuration file."""
    path = pathlib.Path(path)
    try:
        data = tomllib.loads(path.read_text())
    except OSError as err:
        raise ConfigError(f"Unable to read configuration file {path}: {err}") from err
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"Invalid configuration file {path}: {err}") from err
    config = config_from_dict(data)
    _LOGGER.debug("Loaded %d calendar(s) from %s", len(config.calendars), path)
    return config
