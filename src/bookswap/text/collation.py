"""Turkish-aware case folding and collation.

Titles and author names are sorted the way a Turkish reader expects:
``ç`` after ``c``, ``ı`` before ``i``, ``ş`` after ``s`` and so on, with
case and accents only breaking ties.
"""

import unicodedata

# Turkish alphabet extended with q, w and x in their Latin positions
ALPHABET = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"
_LETTER_RANK = {letter: rank for rank, letter in enumerate(ALPHABET)}

# Primary groups: whitespace/punctuation < digits < letters < everything else
_SYMBOL, _DIGIT, _LETTER, _OTHER = range(4)


def turkish_lower(text: str) -> str:
    """Lowercase with Turkish dotted/dotless i rules."""
    return text.replace("I", "ı").replace("İ", "i").lower()


def _char_weights(char: str) -> tuple[tuple[int, int], int, int]:
    lowered = turkish_lower(char)
    tertiary = 0 if char == lowered else 1

    if lowered in _LETTER_RANK:
        return (_LETTER, _LETTER_RANK[lowered]), 0, tertiary

    decomposed = unicodedata.normalize("NFD", lowered)
    base, marks = decomposed[0], decomposed[1:]
    if base in _LETTER_RANK:
        secondary = sum(ord(mark) for mark in marks)
        return (_LETTER, _LETTER_RANK[base]), secondary, tertiary

    if char.isdigit():
        return (_DIGIT, ord(char)), 0, 0
    if char.isspace() or unicodedata.category(char).startswith(("P", "S")):
        return (_SYMBOL, ord(char)), 0, 0
    return (_OTHER, ord(lowered)), 0, tertiary


def collation_key(text: str) -> tuple:
    """Sort key approximating Turkish locale string comparison.

    Args:
        text: String to build a key for

    Returns:
        Tuple comparing primary letters first, then accents, then case
    """
    primary, secondary, tertiary = [], [], []
    for char in unicodedata.normalize("NFC", text):
        p, s, t = _char_weights(char)
        primary.append(p)
        secondary.append(s)
        tertiary.append(t)
    return tuple(primary), tuple(secondary), tuple(tertiary)
