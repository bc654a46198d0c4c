"""Bulgarian Cyrillic <-> Latin transliteration."""
from types import MappingProxyType

from ..text import capitalize_first_letter

# Streamlined Bulgarian romanization, lowercase only.
# Uppercase pairs are derived: 'Щ' -> 'Sht'
CYRILLIC_TO_LATIN = (
    ('а', 'a'), ('б', 'b'), ('в', 'v'), ('г', 'g'), ('д', 'd'), ('е', 'e'),
    ('ж', 'j'), ('з', 'z'), ('и', 'i'), ('й', 'y'), ('к', 'k'), ('л', 'l'),
    ('м', 'm'), ('н', 'n'), ('о', 'o'), ('п', 'p'), ('р', 'r'), ('с', 's'),
    ('т', 't'), ('у', 'u'), ('ф', 'f'), ('х', 'h'), ('ц', 'c'), ('ч', 'ch'),
    ('ш', 'sh'), ('щ', 'sht'), ('ъ', 'u'), ('ь', 'i'), ('ю', 'yu'), ('я', 'ya'),
)

# Bulgarian phonetic keyboard layout, key -> letter.
# Not the inverse of CYRILLIC_TO_LATIN: 'w' types 'в', 'q' types 'я'
LATIN_TO_CYRILLIC_KEYBOARD = (
    ('a', 'а'), ('b', 'б'), ('c', 'ц'), ('d', 'д'), ('e', 'е'), ('f', 'ф'),
    ('g', 'г'), ('h', 'х'), ('i', 'и'), ('j', 'й'), ('k', 'к'), ('l', 'л'),
    ('m', 'м'), ('n', 'н'), ('o', 'о'), ('p', 'п'), ('q', 'я'), ('r', 'р'),
    ('s', 'с'), ('t', 'т'), ('u', 'у'), ('v', 'ж'), ('w', 'в'), ('x', 'ь'),
    ('y', 'ъ'), ('z', 'з'),
)


def _build_cyrillic_map() -> MappingProxyType:
    table = {}
    for cyrillic, latin in CYRILLIC_TO_LATIN:
        table[ord(cyrillic)] = latin
        table[ord(cyrillic.upper())] = capitalize_first_letter(latin)
    return MappingProxyType(table)


def _build_keyboard_map() -> MappingProxyType:
    table = {}
    for latin, cyrillic in LATIN_TO_CYRILLIC_KEYBOARD:
        table[ord(latin)] = cyrillic
        table[ord(latin.upper())] = cyrillic.upper()
    return MappingProxyType(table)


# Source and target alphabets are disjoint, so one translate() pass gives
# the same result as replacing letter by letter in table order.
_CYRILLIC_MAP = _build_cyrillic_map()
_KEYBOARD_MAP = _build_keyboard_map()


def convert_cyrillic_to_latin_letters(input: str) -> str:
    """Replace Bulgarian Cyrillic letters with their Latin representations.

    Other characters, including Cyrillic letters outside the Bulgarian
    alphabet, pass through unchanged.
    """
    return input.translate(_CYRILLIC_MAP)


def convert_latin_to_cyrillic_keyboard(input: str) -> str:
    """Replace Latin letters with the Cyrillic letters on the same phonetic keys.

    Case is mirrored letter for letter.
    """
    return input.translate(_KEYBOARD_MAP)
