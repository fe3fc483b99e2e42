# eng2p/utils/text_cleaner.py

"""
Text-level helpers for the eng2p pipeline:
- Punctuation, junk and symbol tables shared by the tokenizer and lexicon
- Word normalization before lexicon lookup (quotes, NFKC, unicode digits)
- Small character-class predicates
"""

import re
import unicodedata

SUBTOKEN_JUNKS = frozenset("',-._‘’/")
PUNCTS = frozenset(';:,.!?—…"“”')
NON_QUOTE_PUNCTS = frozenset(p for p in PUNCTS if p not in '"“”')

PUNCT_TAGS = frozenset([".", ",", "-LRB-", "-RRB-", "``", '""', "''", ":", "$", "#", "NFP"])
PUNCT_TAG_PHONEMES = {
    "-LRB-": "(",
    "-RRB-": ")",
    "``": chr(8220),
    '""': chr(8221),
    "''": chr(8221),
}

# Apostrophe, hyphen, A-Z, a-z
LEXICON_ORDS = frozenset([39, 45, *range(65, 91), *range(97, 123)])

CURRENCIES = {
    "$": ("dollar", "cent"),
    "£": ("pound", "pence"),
    "€": ("euro", "cent"),
}
ORDINALS = frozenset(["st", "nd", "rd", "th"])

ADD_SYMBOLS = {".": "dot", "/": "slash"}
SYMBOLS = {"%": "percent", "&": "and", "+": "plus", "@": "at"}

_DIGITS_RE = re.compile(r"[0-9]+")


def is_digit(text):
    return bool(_DIGITS_RE.fullmatch(text))


def is_lexicon_word(word):
    """True when every character is an apostrophe, hyphen or ASCII letter."""
    return all(ord(c) in LEXICON_ORDS for c in word)


def is_junk(text):
    return all(c in SUBTOKEN_JUNKS for c in text)


def numeric_if_needed(c):
    """Map a unicode digit (e.g. '٣') to its ASCII form."""
    if not c.isdigit():
        return c
    n = unicodedata.numeric(c)
    return str(int(n)) if n == int(n) else c


def normalize_word(word):
    """
    Normalization applied to a token before lexicon lookup:
    curly apostrophes -> "'", NFKC, unicode digits -> ASCII digits.
    """
    word = word.replace(chr(8216), "'").replace(chr(8217), "'")
    word = unicodedata.normalize("NFKC", word)
    return "".join(numeric_if_needed(c) for c in word)


if __name__ == "__main__":
    # Demo
    data = ["don’t", "１２３", "café", "٣rd"]
    for t in data:
        print("ORIG:", t, "NORM:", normalize_word(t), "LEXICON:", is_lexicon_word(normalize_word(t)))
