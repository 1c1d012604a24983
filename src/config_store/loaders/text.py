"""
Loader for plain-text configuration files made of `key=value` lines.

Each line is split on the first `=`: the text before it is the key and everything after it,
including any further `=`, is the value. Blank lines are skipped. There is no support for
comments, quoting or escaping.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from config_store.errors import ConfigDecodeError, ConfigParseError

logger = logging.getLogger(__name__)

SEPARATOR = "="


def parse_line(line: str, *, line_number: int | None = None) -> tuple[str, str]:
    """Split a single `key=value` line into its key and value.

    Args:
        line: The line to parse. A trailing line terminator is removed.
        line_number: The 1-based position of the line in its file, used in error messages.

    Returns:
        A (key, value) tuple. The value may be empty.

    Raises:
        ConfigParseError: If the line has no `=` or the key is empty.
    """
    stripped_line: str = line.rstrip("\r\n")

    key, separator, value = stripped_line.partition(SEPARATOR)

    if not separator or not key:
        raise ConfigParseError(line=stripped_line, line_number=line_number)

    return key, value


def parse_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse `key=value` lines into a mapping. Later lines overwrite earlier ones."""
    items: dict[str, str] = {}

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        key, value = parse_line(line, line_number=line_number)

        if key in items:
            logger.warning("Duplicate configuration key, keeping the last value", extra={"key": key, "line_number": line_number})

        items[key] = value

    return items


def load_config_file(path: str | Path) -> dict[str, str]:
    """Read a configuration file and return its items.

    Args:
        path: The file to read, decoded as UTF-8. A leading byte order mark is dropped.

    Returns:
        The parsed configuration items.

    Raises:
        OSError: If the file cannot be opened or read.
        ConfigDecodeError: If the file is not valid UTF-8.
        ConfigParseError: If a non-blank line is not a `key=value` pair.
    """
    try:
        with Path(path).open(encoding="utf-8-sig") as config_file:
            items: dict[str, str] = parse_lines(config_file)
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(path=str(path), reason=e.reason) from e

    logger.debug("Loaded configuration file", extra={"path": str(path), "entries": len(items)})

    return items
