"""
stringext - stateless string helpers

Hashing, lenient coercion, substring extraction, Bulgarian transliteration,
username/file name sanitization, content types and byte conversion.
"""

from .coercion import DEFAULT_DATETIME, to_boolean, to_datetime, to_integer, to_long, to_short
from .content_types import DEFAULT_CONTENT_TYPE, to_content_type
from .encoding import CharsetManager, to_byte_array
from .exceptions import ConfigurationError, StringExtException, ValidationError
from .hashing import to_md5_hash
from .i18n import convert_cyrillic_to_latin_letters, convert_latin_to_cyrillic_keyboard
from .sanitize import to_valid_latin_file_name, to_valid_username
from .text import (
    capitalize_first_letter,
    get_file_extension,
    get_first_characters,
    get_string_between,
)

__version__ = "0.1.0"

__all__ = [
    'CharsetManager',
    'ConfigurationError',
    'DEFAULT_CONTENT_TYPE',
    'DEFAULT_DATETIME',
    'StringExtException',
    'ValidationError',
    'capitalize_first_letter',
    'convert_cyrillic_to_latin_letters',
    'convert_latin_to_cyrillic_keyboard',
    'get_file_extension',
    'get_first_characters',
    'get_string_between',
    'to_boolean',
    'to_byte_array',
    'to_content_type',
    'to_datetime',
    'to_integer',
    'to_long',
    'to_md5_hash',
    'to_short',
    'to_valid_latin_file_name',
    'to_valid_username',
]
