"""Low level scanning of BUFKIT text.

The station info and index blocks of a BUFKIT file are a fixed order of
``KEY = VALUE`` pairs, so the helpers here return the remaining text after a
value.  Walking the block by always passing the remaining text along keeps
the scan to a single pass.
"""

import re
from typing import Callable, Optional

from metpy.units import units

from pybufkit.exceptions import (
    InvalidNumber,
    InvalidTimestamp,
    MalformedKeyValue,
    TokenCountError,
)
from pybufkit.reference import MISSING_VALUE
from pybufkit.util import utc

TOKEN_RE = re.compile(r"\S+")
# A line without any letters or numbers followed by another one
BLANK_LINE_RE = re.compile(r"\n[^A-Za-z0-9\n]*\n")
TIMESTAMP_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})/(\d{2})(\d{2})$")


def is_missing(value) -> bool:
    """Does this value equal the BUFKIT missing value."""
    return value == MISSING_VALUE


def check_missing(value):
    """Convert the missing value to None."""
    return None if is_missing(value) else value


def to_quantity(value, unit):
    """Attach units to a value, None and unitless values pass through."""
    if value is None or unit is None:
        return value
    return units.Quantity(value, unit)


def _is_number_start(char: str) -> bool:
    """First character of a possibly negative number."""
    return char.isdigit() or char == "-"


def _is_float_end(char: str) -> bool:
    """First character after a float."""
    return not (char.isdigit() or char in ".-")


def _is_int_end(char: str) -> bool:
    """First character after an integer."""
    return not char.isdigit()


def _is_time_end(char: str) -> bool:
    """First character after a YYMMDD/HHMM value."""
    return not (char.isdigit() or char == "/")


def find_key_value(
    text: str,
    key: str,
    is_value_start: Callable[[str], bool],
    is_value_end: Callable[[str], bool],
) -> tuple[str, str]:
    """Isolate the value of a ``KEY = VALUE`` pair.

    Args:
      text (str): The text to search.
      key (str): The key to look for.
      is_value_start (callable): True for the first character of the value.
      is_value_end (callable): True for the first character after the value.

    Returns:
      (value, remaining) the trimmed value text and the text after it.
    """
    idx = text.find(key)
    if idx < 0:
        raise MalformedKeyValue(f"Failed to find key `{key}`")
    start = next(
        (
            i
            for i in range(idx + len(key), len(text))
            if is_value_start(text[i])
        ),
        None,
    )
    if start is None:
        raise MalformedKeyValue(f"Failed to find a value for key `{key}`")
    # The value may run to the end of the text
    end = next(
        (i for i in range(start + 1, len(text)) if is_value_end(text[i])),
        len(text),
    )
    return text[start:end].strip(), text[end:]


def parse_float(token: str) -> float:
    """Convert a token to a float."""
    try:
        return float(token)
    except ValueError as exp:
        raise InvalidNumber(f"Failed to convert `{token}` to float") from exp


def parse_int(token: str) -> int:
    """Convert a token to an int."""
    try:
        return int(token)
    except ValueError as exp:
        raise InvalidNumber(f"Failed to convert `{token}` to int") from exp


def parse_datetime(text: str):
    """Convert a YYMMDD/HHMM string into a UTC datetime."""
    text = text.strip()
    m = TIMESTAMP_RE.match(text)
    if m is None:
        raise InvalidTimestamp(f"`{text}` is not YYMMDD/HHMM")
    (year, month, day, hour, minute) = (int(x) for x in m.groups())
    try:
        return utc(2000 + year, month, day, hour, minute)
    except ValueError as exp:
        raise InvalidTimestamp(f"`{text}` is not a valid time") from exp


def parse_f64_kv(text: str, key: str) -> tuple[float, str]:
    """Parse a float value for the given key."""
    (val, remaining) = find_key_value(
        text, key, _is_number_start, _is_float_end
    )
    return parse_float(val), remaining


def parse_i32_kv(text: str, key: str) -> tuple[int, str]:
    """Parse an integer value for the given key."""
    (val, remaining) = find_key_value(
        text, key, _is_number_start, _is_int_end
    )
    return parse_int(val), remaining


def parse_datetime_kv(text: str, key: str):
    """Parse a YYMMDD/HHMM value for the given key."""
    (val, remaining) = find_key_value(
        text, key, str.isdigit, _is_time_end
    )
    return parse_datetime(val), remaining


def find_section_boundary(text: str, pos: int = 0) -> Optional[int]:
    """Find two newlines with no letters or numbers between them.

    Args:
      text (str): The text to search.
      pos (int): Where to start searching.

    Returns:
      The offset just past the second newline, or None when there is no
      such boundary or it is at the very end of the text.
    """
    m = BLANK_LINE_RE.search(text, pos)
    if m is None or m.end() >= len(text):
        return None
    return m.end()


def find_next_n_tokens(text: str, n: int, pos: int = 0) -> Optional[int]:
    """Find the end of the next group of ``n`` whitespace delimited tokens.

    Args:
      text (str): The text to search.
      n (int): The number of tokens in a group.
      pos (int): Where to start searching.

    Returns:
      The offset just after the n-th token, None when only whitespace
      remains.  Raises `TokenCountError` when a partial group ends the text.
    """
    count = 0
    for count, match in enumerate(TOKEN_RE.finditer(text, pos), start=1):
        if count == n:
            return match.end()
    if count == 0:
        return None
    raise TokenCountError(f"Found {count} tokens, expected {n}")
