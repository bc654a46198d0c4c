"""
Usernames and file names safe for system use
"""
import re

from .i18n.translit import convert_cyrillic_to_latin_letters

USERNAME_INVALID = re.compile(r'[^A-Za-z0-9_.]+')
FILE_NAME_INVALID = re.compile(r'[^A-Za-z0-9_.\-]+')


def to_valid_username(input: str) -> str:
    """
    Transliterate and keep only ASCII letters, digits, '_' and '.'

    Hyphens and spaces are removed.
    """
    input = convert_cyrillic_to_latin_letters(input)
    return USERNAME_INVALID.sub('', input)


def to_valid_latin_file_name(input: str) -> str:
    """
    Turn spaces into hyphens, transliterate, and keep only ASCII letters,
    digits, '_', '.' and '-'
    """
    input = convert_cyrillic_to_latin_letters(input.replace(' ', '-'))
    return FILE_NAME_INVALID.sub('', input)
