"""
Substring and case helpers
"""
from typing import Optional

from .exceptions import ValidationError


def capitalize_first_letter(input: Optional[str]) -> Optional[str]:
    """Upper-case the first character; None and "" are returned unchanged.

    Characters whose upper case is longer than one character are kept as-is.
    """
    if not input:
        return input

    first = input[0].upper()
    # Keep one character: "ß".upper() is "SS"
    if len(first) != 1:
        first = input[0]
    return first + input[1:]


def get_string_between(input: str, start_string: str, end_string: str,
                       start_from: int = 0) -> str:
    """
    Return the text between start_string and end_string

    Both markers are matched literally. The first start_string wins, then
    the first end_string found after it.

    Args:
        input: Text to search
        start_string: Left delimiter
        end_string: Right delimiter
        start_from: Index the search starts from, must be non-negative

    Returns:
        The text between the markers, or "" if either is missing
    """
    if start_from < 0:
        raise ValidationError(
            f"start_from must be non-negative, got {start_from}", code="START_FROM"
        )
    input = input[start_from:]
    if start_string not in input or end_string not in input:
        return ""

    start_position = input.index(start_string) + len(start_string)
    end_position = input.find(end_string, start_position)
    if end_position == -1:
        return ""

    return input[start_position:end_position]


def get_first_characters(input: str, count: int) -> str:
    """Return at most the first count characters."""
    if count < 0:
        raise ValidationError(f"count must be non-negative, got {count}", code="COUNT")
    return input[:count]


def get_file_extension(file_name: Optional[str]) -> str:
    """Return the lower-cased text after the last '.', or "" if there is none."""
    if file_name is None or not file_name.strip():
        return ""

    parts = file_name.split(".")
    if len(parts) == 1 or not parts[-1]:
        return ""

    return parts[-1].strip().lower()
