"""
Best-effort coercion of strings into typed values.

None of these functions raise on bad input. A value that cannot be parsed
becomes the documented default (False, 0 or DEFAULT_DATETIME), so callers
must not read a default as "the input really was zero".
"""
import re
from datetime import date, datetime
from typing import Optional

from .utils.logger import get_logger

logger = get_logger("coercion")

TRUE_VALUES = frozenset(["true", "ok", "yes", "1", "да"])

# Optional surrounding whitespace, optional sign, ASCII digits only
INTEGER_PATTERN = re.compile(r'^\s*[+-]?[0-9]+\s*$')

SHORT_RANGE = (-2 ** 15, 2 ** 15 - 1)
INTEGER_RANGE = (-2 ** 31, 2 ** 31 - 1)
LONG_RANGE = (-2 ** 63, 2 ** 63 - 1)

DEFAULT_DATETIME = datetime.min

# Tried in order after ISO 8601; day-first formats win over month-first ones
DATETIME_FORMATS = (
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

# A bare time lands on the current date
TIME_FORMATS = (
    "%H:%M:%S",
    "%H:%M",
    "%I:%M:%S %p",
    "%I:%M %p",
)


def to_boolean(input: Optional[str]) -> bool:
    """Check whether the string is one of the accepted "true" tokens.

    Comparison is case-insensitive. Anything else, including None and the
    empty string, is False.
    """
    if input is None:
        return False
    return input.lower() in TRUE_VALUES


def _to_bounded_int(input: Optional[str], bounds: tuple[int, int]) -> int:
    if input is None or not INTEGER_PATTERN.match(input):
        logger.debug(f"Cannot parse {input!r} as integer, defaulting to 0")
        return 0

    value = int(input)
    low, high = bounds
    if not low <= value <= high:
        logger.debug(f"Integer {value} outside [{low}, {high}], defaulting to 0")
        return 0
    return value


def to_short(input: Optional[str]) -> int:
    """Parse a 16-bit signed integer, or return 0."""
    return _to_bounded_int(input, SHORT_RANGE)


def to_integer(input: Optional[str]) -> int:
    """Parse a 32-bit signed integer, or return 0."""
    return _to_bounded_int(input, INTEGER_RANGE)


def to_long(input: Optional[str]) -> int:
    """Parse a 64-bit signed integer, or return 0."""
    return _to_bounded_int(input, LONG_RANGE)


def to_datetime(input: Optional[str]) -> datetime:
    """
    Parse a date and/or time string

    Accepts ISO 8601 and the common day-first (21.05.2013) and month-first
    (05/21/2013) layouts. A bare time (10:30) is placed on today's date.

    Args:
        input: Text to parse

    Returns:
        The parsed datetime, or DEFAULT_DATETIME if nothing matched
    """
    if input is None or not input.strip():
        return DEFAULT_DATETIME

    text = input.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    for fmt in TIME_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return datetime.combine(date.today(), parsed.time())

    logger.debug(f"Cannot parse {input!r} as datetime, using default")
    return DEFAULT_DATETIME
