"""
Transliteration between Bulgarian Cyrillic and Latin letters
"""

from .translit import convert_cyrillic_to_latin_letters, convert_latin_to_cyrillic_keyboard

__all__ = ['convert_cyrillic_to_latin_letters', 'convert_latin_to_cyrillic_keyboard']
