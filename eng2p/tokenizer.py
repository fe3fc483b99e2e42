# eng2p/tokenizer.py

"""
Text -> tokens:
- preprocess: strip `[display](directive)` annotations into per-token features
- tokenize: tagger output -> MTokens, features applied
- fold_left: merge non-head tokens into their predecessor
- subtokenize / retokenize: split words into sub-words, mark punctuation and
  currency, and group glued sub-words for compound lookup
"""

import re
from typing import Dict, List, Tuple, Union

import regex

from eng2p.token import MToken, merge_tokens
from eng2p.utils.text_cleaner import (
    CURRENCIES,
    PUNCT_TAG_PHONEMES,
    PUNCT_TAGS,
    PUNCTS,
    is_digit,
)

LINK_REGEX = re.compile(r"\[([^\]]+)\]\(([^\)]*)\)")

SUBTOKEN_REGEX = regex.compile(
    r"^['‘’]+|\p{Lu}(?=\p{Lu}\p{Ll})|(?:^-)?(?:\d?[,.]?\d)+|[-_]+|['‘’]{2,}"
    r"|\p{L}*?(?:['‘’]\p{L})*?\p{Ll}(?=\p{Lu})|\p{L}+(?:['‘’]\p{L})*|[^-_\p{L}'‘’\d]|['‘’]+$"
)

Feature = Union[int, float, str]


# ==== Annotations ====
def parse_directive(feature):
    """
    "2" / "-1" -> int, "0.5" / "-0.5" -> float,
    "/phonemes/" -> "/phonemes", "#flags#" -> "#flags", anything else -> None
    """
    if is_digit(feature[1 if feature[:1] in ("-", "+") else 0:]):
        return int(feature)
    elif feature in ("0.5", "+0.5"):
        return 0.5
    elif feature == "-0.5":
        return -0.5
    elif len(feature) > 1 and feature[0] == "/" and feature[-1] == "/":
        return feature[0] + feature[1:].rstrip("/")
    elif len(feature) > 1 and feature[0] == "#" and feature[-1] == "#":
        return feature[0] + feature[1:].rstrip("#")
    return None


def preprocess(text: str) -> Tuple[str, List[str], Dict[int, Feature]]:
    """
    Returns (text without annotation markup, surface tokens, features),
    features keyed by the index of the annotated surface token.
    """
    result = ""
    tokens = []
    features = {}
    last_end = 0
    text = text.lstrip()
    for m in LINK_REGEX.finditer(text):
        result += text[last_end:m.start()]
        tokens.extend(text[last_end:m.start()].split())
        f = parse_directive(m.group(2))
        if f is not None:
            features[len(tokens)] = f
        result += m.group(1)
        tokens.append(m.group(1))
        last_end = m.end()
    if last_end < len(text):
        result += text[last_end:]
        tokens.extend(text[last_end:].split())
    return result, tokens, features


# ==== Tagging ====
def _spans(text, words):
    spans = []
    pos = 0
    for w in words:
        start = text.find(w, pos)
        if start < 0:
            start = pos
        spans.append((start, start + len(w)))
        pos = start + len(w)
    return spans


def tokenize(tagged, text, tokens, features) -> List[MToken]:
    """
    Convert tagger records to MTokens and apply annotation features.
    A feature covers every tagger token starting inside its surface token.
    """
    mutable_tokens = [MToken(text=t.text, tag=t.tag, whitespace=t.whitespace) for t in tagged]
    if not features:
        return mutable_tokens
    surface_spans = _spans(text, tokens)
    tagged_starts = [s for s, _ in _spans(text, [tk.text for tk in mutable_tokens])]
    for k, value in features.items():
        if k >= len(surface_spans):
            continue
        start, end = surface_spans[k]
        covered = [j for j, s in enumerate(tagged_starts) if start <= s < end]
        for i, j in enumerate(covered):
            tk = mutable_tokens[j]
            if isinstance(value, str):
                if value.startswith("/"):
                    tk.is_head = i == 0
                    tk.phonemes = value.lstrip("/") if i == 0 else ""
                    tk.rating = 5
                elif value.startswith("#"):
                    tk.num_flags = value.lstrip("#")
            else:
                tk.stress = value
    return mutable_tokens


def fold_left(tokens, unk=None):
    result = []
    for tk in tokens:
        if result and not tk.is_head:
            tk = merge_tokens([result.pop(), tk], unk=unk)
        result.append(tk)
    return result


# ==== Sub-words ====
def subtokenize(word):
    return SUBTOKEN_REGEX.findall(word)


def _is_to_digit(subtokens, j):
    """A "2" squeezed between letters, as in "B2B" or "peer2peer"."""
    if not 0 < j < len(subtokens) - 1 or subtokens[j].text != "2":
        return False
    prev, nxt = subtokens[j - 1].text, subtokens[j + 1].text
    return bool(prev) and bool(nxt) and (prev[-1] + nxt[0]).isalpha()


def retokenize(tokens: List[MToken]) -> List[Union[MToken, List[MToken]]]:
    """
    Split tokens into sub-words and group them.
    Returns standalone tokens and lists of glued, unresolved sub-words.
    """
    words = []
    currency = None
    for token in tokens:
        if token.alias is None and token.phonemes is None:
            ts = [
                MToken(
                    text=t,
                    tag=token.tag,
                    whitespace="",
                    is_head=True,
                    stress=token.stress,
                    num_flags=token.num_flags,
                )
                for t in subtokenize(token.text)
            ]
        else:
            ts = [token]
        if not ts:
            ts = [token]
        ts[-1].whitespace = token.whitespace
        for j, t in enumerate(ts):
            if t.alias is not None or t.phonemes is not None:
                pass
            elif t.tag == "$" and t.text in CURRENCIES:
                currency = t.text
                t.phonemes = ""
                t.rating = 4
            elif t.tag == ":" and t.text in ("-", "–"):
                t.phonemes = "—"
                t.rating = 3
            elif t.tag in PUNCT_TAGS:
                t.phonemes = PUNCT_TAG_PHONEMES.get(t.tag, "".join(c for c in t.text if c in PUNCTS))
                t.rating = 4
            elif currency is not None:
                if t.tag != "CD":
                    currency = None
                elif j + 1 == len(ts):
                    t.currency = currency
            elif _is_to_digit(ts, j):
                t.alias = "to"

            if t.alias is not None or t.phonemes is not None:
                words.append(t)
            elif words and isinstance(words[-1], list) and not words[-1][-1].whitespace:
                t.is_head = False
                words[-1].append(t)
            else:
                words.append(t if t.whitespace else [t])
    return [w[0] if isinstance(w, list) and len(w) == 1 else w for w in words]
