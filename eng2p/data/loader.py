# eng2p/data/loader.py

"""
Lexicon file loading:
- Gold / silver JSON dictionaries (word -> phonemes, or word -> {tag: phonemes})
- Case expansion of dictionary keys (grow_dictionary)
- Validation against the dialect phoneme alphabet
- Optional user lexicon CSV (columns: word, phonemes)

Any load failure is fatal: the pipeline must not run on a broken lexicon.
"""

import json
import os

import pandas as pd

from eng2p.utils.phoneme_utils import get_vocab


def grow_dictionary(d):
    """
    Add the sibling casing of every key with length >= 2:
    "hello" -> "Hello", "Hello" -> "hello". Original keys win.
    """
    e = {}
    for k, v in d.items():
        if len(k) < 2:
            continue
        if k == k.lower():
            if k != k.capitalize():
                e[k.capitalize()] = v
        elif k == k.lower().capitalize():
            e[k.lower()] = v
    return {**e, **d}


def _check_phonemes(ps, vocab, word, path):
    bad = sorted({c for c in ps if c not in vocab})
    if bad:
        raise ValueError(f"Invalid phonemes {bad} for '{word}' in {path}: {ps}")


def validate_lexicon(lexicon, british=False, path="<memory>"):
    """
    Check every entry against the dialect alphabet.
    Tag-indexed entries must carry a DEFAULT key; their values may be null.
    """
    vocab = get_vocab(british)
    for word, entry in lexicon.items():
        if isinstance(entry, str):
            _check_phonemes(entry, vocab, word, path)
        elif isinstance(entry, dict):
            if "DEFAULT" not in entry:
                raise ValueError(f"Missing DEFAULT for '{word}' in {path}: {entry}")
            for ps in entry.values():
                if ps is not None:
                    _check_phonemes(ps, vocab, word, path)
        else:
            raise ValueError(f"Unsupported entry for '{word}' in {path}: {entry!r}")
    return lexicon


def load_lexicon_json(path, british=False, validate=True):
    """
    Load one lexicon tier from JSON and case-expand it.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed lexicon JSON {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Lexicon {path} must be a JSON object")
    if validate:
        validate_lexicon(data, british=british, path=path)
    return grow_dictionary(data)


def load_user_lexicon(path, british=False):
    """
    User pronunciation overrides from CSV with columns 'word' and 'phonemes'.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"User lexicon not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if "word" not in df.columns or "phonemes" not in df.columns:
        raise ValueError(f"User lexicon {path} must have 'word' and 'phonemes' columns")
    lexicon = {}
    for _, row in df.iterrows():
        word = row["word"].strip()
        if word:
            lexicon[word] = row["phonemes"].strip()
    validate_lexicon(lexicon, british=british, path=path)
    return grow_dictionary(lexicon)
