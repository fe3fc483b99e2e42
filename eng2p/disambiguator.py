# eng2p/disambiguator.py

"""
Context rules for short function words, symbols and initials whose reading
depends on the part-of-speech tag or the following word.

Rules are an ordered list of (predicate, handler) pairs; the first predicate
that matches decides. Handlers return (phonemes, rating) and may return
(None, None) to let the normal lookup continue.
"""

import re

from eng2p.token import TokenContext
from eng2p.utils.phoneme_utils import SECONDARY_STRESS
from eng2p.utils.text_cleaner import ADD_SYMBOLS, SYMBOLS

_VS_RE = re.compile(r"(?i)vs\.?$")


def get_parent_tag(tag):
    """Collapse fine-grained tags: VB* -> VERB, NN* -> NOUN, RB* -> ADV, JJ* -> ADJ."""
    if tag is None:
        return tag
    elif tag.startswith("VB"):
        return "VERB"
    elif tag.startswith("NN"):
        return "NOUN"
    elif tag.startswith("ADV") or tag.startswith("RB"):
        return "ADV"
    elif tag.startswith("ADJ") or tag.startswith("JJ"):
        return "ADJ"
    return tag


def _is_initials(word):
    return (
        "." in word.strip(".")
        and word.replace(".", "").isalpha()
        and len(max(word.split("."), key=len)) < 3
    )


def _am(lex, word, tag, stress, ctx):
    if (tag or "").startswith("NN"):
        return lex.get_NNP(word)
    elif ctx.future_vowel is None or word != "am" or (stress and stress > 0):
        am = lex.golds.get("am")
        if isinstance(am, str):
            return am, 4
    return "ɐm", 4


def _an(lex, word, tag, stress, ctx):
    if word == "AN" and (tag or "").startswith("NN"):
        return lex.get_NNP(word)
    return "ɐn", 4


def _to(lex, word, tag, stress, ctx):
    if ctx.future_vowel is not None:
        return ("tʊ" if ctx.future_vowel else "tə"), 4
    to = lex.golds.get("to")
    # tag-indexed "to" entries go through the normal lookup
    return (to, 4) if isinstance(to, str) else (None, None)


def _used(lex, word, tag, stress, ctx):
    used = lex.golds.get("used")
    if not isinstance(used, dict):
        return None, None
    if tag in ("VBD", "JJ") and ctx.future_to and used.get("VBD"):
        return used["VBD"], 4
    return (used["DEFAULT"], 4) if used.get("DEFAULT") else (None, None)


# ==== Rule table (order matters) ====
SPECIAL_CASES = [
    (
        lambda word, tag, stress, ctx: tag == "ADD" and word in ADD_SYMBOLS,
        lambda lex, word, tag, stress, ctx: lex.lookup(ADD_SYMBOLS[word], None, -0.5, ctx),
    ),
    (
        lambda word, tag, stress, ctx: word in SYMBOLS,
        lambda lex, word, tag, stress, ctx: lex.lookup(SYMBOLS[word], None, None, ctx),
    ),
    (
        lambda word, tag, stress, ctx: _is_initials(word),
        lambda lex, word, tag, stress, ctx: lex.get_NNP(word),
    ),
    (
        lambda word, tag, stress, ctx: word == "a" or (word == "A" and tag == "DT"),
        lambda lex, word, tag, stress, ctx: ("ɐ", 4),
    ),
    (lambda word, tag, stress, ctx: word in ("am", "Am", "AM"), _am),
    (lambda word, tag, stress, ctx: word in ("an", "An", "AN"), _an),
    (
        lambda word, tag, stress, ctx: word == "I" and tag == "PRP",
        lambda lex, word, tag, stress, ctx: (SECONDARY_STRESS + "I", 4),
    ),
    (
        lambda word, tag, stress, ctx: word in ("by", "By", "BY") and get_parent_tag(tag) == "ADV",
        lambda lex, word, tag, stress, ctx: ("bˈI", 4),
    ),
    (
        lambda word, tag, stress, ctx: word in ("to", "To") or (word == "TO" and tag in ("TO", "IN")),
        _to,
    ),
    (
        lambda word, tag, stress, ctx: word in ("the", "The") or (word == "THE" and tag == "DT"),
        lambda lex, word, tag, stress, ctx: ("ði" if ctx.future_vowel is True else "ðə", 4),
    ),
    (
        lambda word, tag, stress, ctx: tag == "IN" and bool(_VS_RE.match(word)),
        lambda lex, word, tag, stress, ctx: lex.lookup("versus", None, None, ctx),
    ),
    (lambda word, tag, stress, ctx: word in ("used", "Used", "USED"), _used),
]


def disambiguate(lexicon, word, tag, stress, ctx=None):
    """
    Apply the first matching special-case rule.
    Returns (phonemes, rating), or (None, None) when no rule matches.
    """
    if ctx is None:
        ctx = TokenContext()
    for predicate, handler in SPECIAL_CASES:
        if predicate(word, tag, stress, ctx):
            return handler(lexicon, word, tag, stress, ctx)
    return None, None
