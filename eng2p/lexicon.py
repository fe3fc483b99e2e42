# eng2p/lexicon.py

"""
Dictionary-based resolver for English words.

Lookup order for one token:
1. Special cases (eng2p.disambiguator)
2. Gold tier (rating 4), then silver tier (rating 3)
3. Morphological stems: -s / -ed / -ing re-suffixed with the right allomorph
4. Numerals and currency amounts (eng2p.numerals)
5. Lowercased retry for casing variants
"""

import re

from eng2p.data.loader import load_lexicon_json, load_user_lexicon
from eng2p.disambiguator import disambiguate, get_parent_tag
from eng2p.numerals import get_number, is_number
from eng2p.token import TokenContext
from eng2p.utils.logger import log
from eng2p.utils.phoneme_utils import (
    PRIMARY_STRESS,
    SECONDARY_STRESS,
    US_TAUS,
    apply_stress,
)
from eng2p.utils.text_cleaner import (
    CURRENCIES,
    LEXICON_ORDS,
    SYMBOLS,
    is_lexicon_word,
    normalize_word,
)

_DOUBLED_ING_RE = re.compile(r"([bcdgklmnprstvxz])\1ing$|cking$")


class Lexicon:
    """
    Gold / silver pronunciation dictionaries plus the rules around them.

    Args:
        golds (dict): gold tier, already case-expanded
        silvers (dict): silver tier, already case-expanded
        british (bool): GB allomorphs instead of US ones
    """
    def __init__(self, golds, silvers=None, british=False):
        self.british = british
        self.golds = golds
        self.silvers = silvers or {}
        # Stress for Capitalized / ALL-CAPS words
        self.cap_stresses = (0.5, 2)

    @classmethod
    def from_files(cls, gold_path, silver_path=None, british=False, user_lexicon_path=None):
        golds = load_lexicon_json(gold_path, british=british)
        silvers = load_lexicon_json(silver_path, british=british) if silver_path else {}
        if user_lexicon_path:
            user = load_user_lexicon(user_lexicon_path, british=british)
            log(f"User lexicon: {len(user)} entries from {user_lexicon_path}", level="debug")
            golds = {**golds, **user}
        log(f"Lexicon loaded: {len(golds)} gold, {len(silvers)} silver entries", level="debug")
        return cls(golds, silvers, british=british)

    # ==== Spelling ====
    def get_NNP(self, word):
        """Spell a word letter by letter, last letter carrying primary stress."""
        ps = [self.golds.get(c.upper()) for c in word if c.isalpha()]
        if not ps or None in ps:
            return None, None
        ps = apply_stress("".join(ps), 0)
        ps = ps.rsplit(SECONDARY_STRESS, 1)
        return PRIMARY_STRESS.join(ps), 3

    def is_known(self, word, tag=None):
        if word in self.golds or word in SYMBOLS or word in self.silvers:
            return True
        elif not word.isalpha() or not all(ord(c) in LEXICON_ORDS for c in word):
            return False
        elif len(word) == 1:
            return True
        elif word == word.upper() and word.lower() in self.golds:
            return True
        return word[1:] == word[1:].upper()

    def lookup(self, word, tag, stress, ctx):
        is_NNP = None
        if word == word.upper() and word not in self.golds:
            word = word.lower()
            is_NNP = tag == "NNP"
        ps, rating = self.golds.get(word), 4
        if ps is None and not is_NNP:
            ps, rating = self.silvers.get(word), 3
        if isinstance(ps, dict):
            if ctx and ctx.future_vowel is None and "None" in ps:
                tag = "None"
            elif tag not in ps:
                tag = get_parent_tag(tag)
            ps = ps.get(tag, ps["DEFAULT"])
        if is_NNP and (ps is None or PRIMARY_STRESS not in ps):
            return self.get_NNP(word)
        if ps is None:
            return None, None
        return apply_stress(ps, stress), rating

    # ==== Morphology ====
    def _s(self, stem):
        if not stem:
            return None
        elif stem[-1] in "ptkfθ":
            return stem + "s"
        elif stem[-1] in "szʃʒʧʤ":
            return stem + ("ɪ" if self.british else "ᵻ") + "z"
        return stem + "z"

    def stem_s(self, word, tag, stress, ctx):
        if len(word) < 3 or not word.endswith("s"):
            return None, None
        if not word.endswith("ss") and self.is_known(word[:-1], tag):
            stem = word[:-1]
        elif (word.endswith("'s") or (len(word) > 4 and word.endswith("es") and not word.endswith("ies"))) and self.is_known(word[:-2], tag):
            stem = word[:-2]
        elif len(word) > 4 and word.endswith("ies") and self.is_known(word[:-3] + "y", tag):
            stem = word[:-3] + "y"
        else:
            return None, None
        stem, rating = self.lookup(stem, tag, stress, ctx)
        return self._s(stem), rating

    def _ed(self, stem):
        if not stem:
            return None
        elif stem[-1] in "pkfθʃsʧ":
            return stem + "t"
        elif stem[-1] == "d":
            return stem + ("ɪ" if self.british else "ᵻ") + "d"
        elif stem[-1] != "t":
            return stem + "d"
        elif self.british or len(stem) < 2:
            return stem + "ɪd"
        elif stem[-2] in US_TAUS:
            return stem[:-1] + "ɾᵻd"
        return stem + "ᵻd"

    def stem_ed(self, word, tag, stress, ctx):
        if len(word) < 4 or not word.endswith("d"):
            return None, None
        if not word.endswith("dd") and self.is_known(word[:-1], tag):
            stem = word[:-1]
        elif len(word) > 4 and word.endswith("ed") and not word.endswith("eed") and self.is_known(word[:-2], tag):
            stem = word[:-2]
        else:
            return None, None
        stem, rating = self.lookup(stem, tag, stress, ctx)
        return self._ed(stem), rating

    def _ing(self, stem):
        if not stem:
            return None
        elif self.british:
            if stem[-1] in "əː":
                return None
        elif len(stem) > 1 and stem[-1] == "t" and stem[-2] in US_TAUS:
            return stem[:-1] + "ɾɪŋ"
        return stem + "ɪŋ"

    def stem_ing(self, word, tag, stress, ctx):
        if len(word) < 5 or not word.endswith("ing"):
            return None, None
        if len(word) > 5 and self.is_known(word[:-3], tag):
            stem = word[:-3]
        elif self.is_known(word[:-3] + "e", tag):
            stem = word[:-3] + "e"
        elif len(word) > 5 and _DOUBLED_ING_RE.search(word) and self.is_known(word[:-4], tag):
            stem = word[:-4]
        else:
            return None, None
        stem, rating = self.lookup(stem, tag, stress, ctx)
        return self._ing(stem), rating

    # ==== Words ====
    def get_word(self, word, tag, stress, ctx):
        ps, rating = disambiguate(self, word, tag, stress, ctx)
        if ps is not None:
            return ps, rating
        wl = word.lower()
        if (
            len(word) > 1
            and word.replace("'", "").isalpha()
            and word != wl
            and (tag != "NNP" or len(word) > 7)
            and word not in self.golds
            and word not in self.silvers
            and (word == word.upper() or word[1:] == word[1:].lower())
            and (
                wl in self.golds
                or wl in self.silvers
                or any(
                    fn(wl, tag, stress, ctx)[0]
                    for fn in (self.stem_s, self.stem_ed, self.stem_ing)
                )
            )
        ):
            word = wl
        if self.is_known(word, tag):
            return self.lookup(word, tag, stress, ctx)
        elif word.endswith("s'") and self.is_known(word[:-2] + "'s", tag):
            return self.lookup(word[:-2] + "'s", tag, stress, ctx)
        elif word.endswith("'") and self.is_known(word[:-1], tag):
            return self.lookup(word[:-1], tag, stress, ctx)
        _s, rating = self.stem_s(word, tag, stress, ctx)
        if _s is not None:
            return _s, rating
        _ed, rating = self.stem_ed(word, tag, stress, ctx)
        if _ed is not None:
            return _ed, rating
        _ing, rating = self.stem_ing(word, tag, 0.5 if stress is None else stress, ctx)
        if _ing is not None:
            return _ing, rating
        return None, None

    def append_currency(self, ps, currency):
        if not currency:
            return ps
        currency = CURRENCIES.get(currency)
        currency = self.stem_s(currency[0] + "s", None, None, None)[0] if currency else None
        return f"{ps} {currency}" if currency else ps

    def __call__(self, tk, ctx=None):
        """
        Resolve one token. Returns (phonemes, rating); (None, None) when
        the word is unknown to every tier and rule.
        """
        if ctx is None:
            ctx = TokenContext()
        word = normalize_word(tk.text if tk.alias is None else tk.alias)
        stress = None if word == word.lower() else self.cap_stresses[int(word == word.upper())]
        ps, rating = self.get_word(word, tk.tag, stress, ctx)
        if ps is not None:
            return apply_stress(self.append_currency(ps, tk.currency), tk.stress), rating
        elif is_number(word, tk.is_head):
            ps, rating = get_number(self, word, tk.currency, tk.is_head, tk.num_flags)
            if ps is None:
                return None, None
            return apply_stress(ps, tk.stress), rating
        elif not is_lexicon_word(word):
            return None, None
        if word != word.lower() and (word == word.upper() or word[1:] == word[1:].lower()):
            ps, rating = self.get_word(word.lower(), tk.tag, stress, ctx)
            if ps is not None:
                return apply_stress(self.append_currency(ps, tk.currency), tk.stress), rating
        return None, None
