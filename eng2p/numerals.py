# eng2p/numerals.py

"""
Numeral and currency expansion for the lexicon:
- is_number / is_currency shape checks
- get_number: digits -> words (num2words) -> phonemes, with currency units,
  ordinal / year readings, digit-by-digit readings inside compounds, and the
  -s / -ed / -ing suffix re-applied to the whole phrase
"""

import re

from num2words import num2words

from eng2p.utils.logger import log
from eng2p.utils.text_cleaner import CURRENCIES, ORDINALS, is_digit

NUMBER_SUFFIXES = ("ing", "'d", "ed", "'s", *sorted(ORDINALS), "s")

_SUFFIX_RE = re.compile(r"[a-z']+$")
_NON_LETTERS_RE = re.compile(r"[^a-z]+")


def is_number(word, is_head):
    if all(not c.isdigit() for c in word):
        return False
    for s in NUMBER_SUFFIXES:
        if word.endswith(s):
            word = word[: -len(s)]
            break
    return all(
        c.isdigit() or c in ",." or (is_head and i == 0 and c == "-")
        for i, c in enumerate(word)
    )


def is_currency(word):
    """At most one period, followed by fewer than 3 digits or only zeros."""
    if "." not in word:
        return True
    elif word.count(".") > 1:
        return False
    cents = word.split(".")[1]
    return len(cents) < 3 or set(cents) == {"0"}


def get_number(lexicon, word, currency, is_head, num_flags=""):
    """
    Read a numeric-shaped word.

    Args:
        lexicon: Lexicon used to look up the number words
        word (str): normalized word, e.g. "204", "3.50", "1990s", "-5"
        currency (str): attached currency symbol or None
        is_head (bool): False inside a glued compound (digits read one by one)
        num_flags (str): "a" reads a leading "one" as "ə", "&" keeps "and",
            "n" glues "ən" onto the previous word
    Returns:
        (phonemes, rating), or (None, None) when nothing could be read
    """
    try:
        return _get_number(lexicon, word, currency, is_head, num_flags or "")
    except (ValueError, OverflowError, NotImplementedError) as e:
        log(f"Cannot read number '{word}': {e}", level="warning")
        return None, None


def _get_number(lexicon, word, currency, is_head, num_flags):
    match = _SUFFIX_RE.search(word)
    suffix = match.group() if match else None
    if suffix:
        word = word[: -len(suffix)]
    result = []

    def add(lookup_result):
        if lookup_result[0] is not None:
            result.append(lookup_result)

    if word.startswith("-"):
        add(lexicon.lookup("minus", None, None, None))
        word = word[1:]

    def extend_num(num, first=True, escape=False):
        text = num if escape else num2words(int(num))
        splits = [w for w in _NON_LETTERS_RE.split(text.lower()) if w]
        for i, w in enumerate(splits):
            if w != "and" or "&" in num_flags:
                if first and i == 0 and len(splits) > 1 and w == "one" and "a" in num_flags:
                    result.append(("ə", 4))
                else:
                    add(lexicon.lookup(w, None, -2 if w == "point" else None, None))
            elif "n" in num_flags and result:
                result[-1] = (result[-1][0] + "ən", result[-1][1])

    if not is_head and "." not in word:
        num = word.replace(",", "")
        if num[:1] == "0" or len(num) > 3:
            for n in num:
                extend_num(n, first=False)
        elif len(num) == 3 and not num.endswith("00"):
            extend_num(num[0])
            if num[1] == "0":
                add(lexicon.lookup("O", None, -2, None))
                extend_num(num[2], first=False)
            else:
                extend_num(num[1:], first=False)
        elif num:
            extend_num(num)
    elif word.count(".") > 1 or not is_head:
        first = True
        for num in word.replace(",", "").split("."):
            if not num:
                pass
            elif num[0] == "0" or (len(num) != 2 and any(n != "0" for n in num[1:])):
                for n in num:
                    extend_num(n, first=False)
            else:
                extend_num(num, first=first)
            first = False
    elif currency in CURRENCIES and is_currency(word):
        pairs = [
            (int(num) if num else 0, unit)
            for num, unit in zip(word.replace(",", "").split("."), CURRENCIES[currency])
        ]
        if len(pairs) > 1:
            if pairs[1][0] == 0:
                pairs = pairs[:1]
            elif pairs[0][0] == 0:
                pairs = pairs[1:]
        for i, (num, unit) in enumerate(pairs):
            if i > 0:
                add(lexicon.lookup("and", None, None, None))
            extend_num(str(num), first=i == 0)
            if abs(num) != 1 and unit != "pence":
                add(lexicon.stem_s(unit + "s", None, None, None))
            else:
                add(lexicon.lookup(unit, None, None, None))
    else:
        if is_digit(word):
            if suffix in ORDINALS:
                to = "ordinal"
            elif not result and len(word) == 4:
                to = "year"
            else:
                to = "cardinal"
            word = num2words(int(word), to=to)
        elif "." not in word:
            word = num2words(int(word.replace(",", "")), to="ordinal" if suffix in ORDINALS else "cardinal")
        else:
            word = word.replace(",", "")
            if word[0] == ".":
                word = "point " + " ".join(num2words(int(n)) for n in word[1:])
            else:
                word = num2words(float(word))
        extend_num(word, escape=True)

    if not result:
        log(f"Unreadable number: {word} {currency or ''}", level="warning")
        return None, None
    ps, rating = " ".join(p for p, _ in result), min(r for _, r in result)
    if suffix in ("s", "'s"):
        return lexicon._s(ps), rating
    elif suffix in ("ed", "'d"):
        return lexicon._ed(ps), rating
    elif suffix == "ing":
        return lexicon._ing(ps), rating
    return ps, rating
