# eng2p/token.py

"""
Token types flowing through the pipeline.

MToken fields and their invariants:
- text       : surface string (changes when tokens are split or merged)
- tag        : coarse part-of-speech tag from the tagger, may be None
- whitespace : text up to the next token; "" means glued to the next token
- is_head    : False means "fold into the previous token"
- alias      : string looked up instead of `text`
- phonemes   : None = unresolved, "" = intentionally silent
- stress     : stress override from a [word](N) annotation
- currency   : currency symbol attached by the retokenizer
- num_flags  : characters controlling numeral reading ("a", "&", "n")
- prespace   : insert a visible space before this token when merging
- rating     : 2 fallback, 3 heuristic/silver, 4 gold/rule, 5 user override

Tokens are mutated in the order fold -> retokenize -> resolve -> merge.
"""

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass
class MToken:
    text: str
    tag: Optional[str] = None
    whitespace: str = ""
    phonemes: Optional[str] = None
    is_head: bool = True
    alias: Optional[str] = None
    stress: Optional[Union[int, float]] = None
    currency: Optional[str] = None
    num_flags: str = ""
    prespace: bool = False
    rating: Optional[int] = None

    def is_to(self):
        return self.text in ("to", "To") or (self.text == "TO" and self.tag in ("TO", "IN"))

    def debug_row(self):
        """[text, tag, glued?, phonemes, rating] for debug tables."""
        if self.phonemes is None:
            ps = "❓"
        else:
            ps = self.phonemes or "🥷"
        return [self.text, self.tag, not self.whitespace, ps, self.rating]


@dataclass
class TokenContext:
    # None: unknown / punctuation follows
    future_vowel: Optional[bool] = None
    future_to: bool = False


def _case_score(tk):
    return sum(1 if c == c.lower() else 2 for c in tk.text)


def merge_tokens(tokens: List[MToken], unk: Optional[str] = None) -> MToken:
    """
    Merge a run of tokens into a single token.
    Phonemes are only concatenated when `unk` is given (placeholder for
    unresolved members); otherwise the merged token is unresolved.
    """
    stress = {tk.stress for tk in tokens if tk.stress is not None}
    currency = {tk.currency for tk in tokens if tk.currency is not None}
    rating = [tk.rating for tk in tokens]
    if unk is None:
        phonemes = None
    else:
        phonemes = ""
        for tk in tokens:
            if tk.prespace and phonemes and not phonemes[-1].isspace() and tk.phonemes:
                phonemes += " "
            phonemes += unk if tk.phonemes is None else tk.phonemes
    return MToken(
        text="".join(tk.text + tk.whitespace for tk in tokens[:-1]) + tokens[-1].text,
        tag=max(tokens, key=_case_score).tag,
        whitespace=tokens[-1].whitespace,
        phonemes=phonemes,
        is_head=tokens[0].is_head,
        alias=None,
        stress=next(iter(stress)) if len(stress) == 1 else None,
        currency=max(currency) if currency else None,
        num_flags="".join(sorted({c for tk in tokens for c in tk.num_flags})),
        prespace=tokens[0].prespace,
        rating=None if None in rating else min(rating),
    )
