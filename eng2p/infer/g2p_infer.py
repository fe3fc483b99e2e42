# eng2p/infer/g2p_infer.py

import os

import pandas as pd
import yaml
from tqdm import tqdm

from eng2p.fallback import EspeakFallback
from eng2p.lexicon import Lexicon
from eng2p.tagger import SpacyTagger
from eng2p.token import TokenContext, merge_tokens
from eng2p.tokenizer import fold_left, preprocess as preprocess_text, retokenize, tokenize
from eng2p.utils.logger import log, setup_logger
from eng2p.utils.phoneme_utils import (
    CONSONANTS,
    PRIMARY_STRESS,
    VOWELS,
    apply_stress,
    stress_weight,
)
from eng2p.utils.text_cleaner import NON_QUOTE_PUNCTS, SUBTOKEN_JUNKS, is_digit, is_junk

DEFAULT_CONFIG = {
    "lexicon": {
        "british": False,
        "gold_path": "data/lexicon/us_gold.json",
        "silver_path": "data/lexicon/us_silver.json",
        "user_lexicon_path": None,
    },
    "tagger": {"model": "en_core_web_sm"},
    "fallback": {"enabled": True},
    "pipeline": {"unk": "❓"},
    "logging": {"log_file": None},
}


def load_config(config_path):
    """Read the YAML config; missing sections take their default values."""
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config not found: {config_path}")
    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    return {k: {**v, **(cfg.get(k) or {})} for k, v in DEFAULT_CONFIG.items()}


def _dialect_path(path, british):
    # us_gold.json -> gb_gold.json next to it
    if not path or not british:
        return path
    head, name = os.path.split(path)
    if name.startswith("us_"):
        return os.path.join(head, "gb_" + name[3:])
    return path


# ==== Context / group helpers ====

def token_context(ctx, ps, token):
    """
    Context seen by the token to the left: does the next sound start with a
    vowel (None after punctuation), and is the next word "to".
    """
    vowel = ctx.future_vowel
    if ps:
        for c in ps:
            if c in NON_QUOTE_PUNCTS:
                vowel = None
                break
            elif c in VOWELS:
                vowel = True
                break
            elif c in CONSONANTS:
                vowel = False
                break
    return TokenContext(future_vowel=vowel, future_to=token.is_to())


def resolve_tokens(tokens):
    """
    Finish a glued group that compound lookup could not resolve as a whole:
    silence junk, keep trailing punctuation, and demote competing primary
    stresses inside tightly joined groups.
    """
    text = "".join(tk.text + tk.whitespace for tk in tokens[:-1]) + tokens[-1].text
    prespace = (
        " " in text
        or "/" in text
        or len({0 if c.isalpha() else (1 if is_digit(c) else 2) for c in text if c not in SUBTOKEN_JUNKS}) > 1
    )
    for i, tk in enumerate(tokens):
        if tk.phonemes is None:
            if i == len(tokens) - 1 and any(c in NON_QUOTE_PUNCTS for c in tk.text):
                tk.phonemes = tk.text
                tk.rating = 3
            elif is_junk(tk.text):
                tk.phonemes = ""
                tk.rating = 3
        elif i > 0:
            tk.prespace = prespace
    if prespace:
        return
    indices = [(PRIMARY_STRESS in tk.phonemes, stress_weight(tk.phonemes), i) for i, tk in enumerate(tokens) if tk.phonemes is not None]
    if len(indices) == 2 and len(tokens[indices[0][2]].text) == 1:
        i = indices[1][2]
        tokens[i].phonemes = apply_stress(tokens[i].phonemes, -0.5)
        return
    elif len(indices) < 2 or sum(b for b, _, _ in indices) <= (len(indices) + 1) // 2:
        return
    indices = sorted(indices, key=lambda x: (x[1], x[2]))[: len(indices) // 2]
    for _, _, i in indices:
        tokens[i].phonemes = apply_stress(tokens[i].phonemes, -0.5)


def tokens_to_frame(tokens):
    """Debug table of resolved tokens."""
    return pd.DataFrame(
        [tk.debug_row() for tk in tokens],
        columns=["text", "tag", "glued", "phonemes", "rating"],
    )


# ==== End-to-end pipeline ====

class G2PPipeline:
    """
    English text -> phonemes.

    Keyword arguments override the matching config values. `fallback=False`
    disables the espeak fallback; any callable `fallback(token)` replaces it.
    """
    def __init__(self,
                 config_path="config/config.yaml",
                 british=None,
                 gold_path=None,
                 silver_path=None,
                 user_lexicon_path=None,
                 tagger=None,
                 fallback=None,
                 unk=None):
        self.config = load_config(config_path) if config_path else {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
        lex_cfg = self.config["lexicon"]
        if self.config["logging"]["log_file"]:
            setup_logger(self.config["logging"]["log_file"])

        self.british = lex_cfg["british"] if british is None else british
        self.unk = self.config["pipeline"]["unk"] if unk is None else unk
        self.lexicon = Lexicon.from_files(
            gold_path or _dialect_path(lex_cfg["gold_path"], self.british),
            silver_path or _dialect_path(lex_cfg["silver_path"], self.british),
            british=self.british,
            user_lexicon_path=user_lexicon_path or lex_cfg["user_lexicon_path"],
        )
        self.tagger = tagger or SpacyTagger(self.config["tagger"]["model"])
        if fallback is None and self.config["fallback"]["enabled"]:
            fallback = EspeakFallback(british=self.british)
        self.fallback = fallback or None
        log(f"G2PPipeline ready ({'GB' if self.british else 'US'} English, fallback: {self.fallback is not None})")

    def _resolve_group(self, word, ctx):
        left, right = 0, len(word)
        should_fallback = False
        while left < right:
            if any(tk.alias is not None or tk.phonemes is not None for tk in word[left:right]):
                tk = None
            else:
                tk = merge_tokens(word[left:right])
            ps, rating = (None, None) if tk is None else self.lexicon(tk, ctx)
            if ps is not None:
                word[left].phonemes = ps
                word[left].rating = rating
                for x in word[left + 1:right]:
                    x.phonemes = ""
                    x.rating = rating
                ctx = token_context(ctx, ps, tk)
                right = left
                left = 0
            elif left + 1 < right:
                left += 1
            else:
                right -= 1
                tk = word[right]
                if tk.phonemes is None:
                    if is_junk(tk.text):
                        tk.phonemes = ""
                        tk.rating = 3
                    elif self.fallback is not None:
                        should_fallback = True
                        break
                left = 0
        if should_fallback:
            tk = merge_tokens(word)
            word[0].phonemes, word[0].rating = self.fallback(tk)
            for x in word[1:]:
                x.phonemes = ""
                x.rating = word[0].rating
        else:
            resolve_tokens(word)
        return ctx

    def __call__(self, text, preprocess=True):
        """
        Returns (phoneme string, tokens). `preprocess` may be False (no
        annotation parsing) or a callable replacing the default preprocessor.
        """
        if preprocess is True:
            preprocess = preprocess_text
        text, tokens, features = preprocess(text) if preprocess else (text, [], {})
        tokens = tokenize(self.tagger(text), text, tokens, features)
        tokens = fold_left(tokens, unk=self.unk)
        words = retokenize(tokens)
        ctx = TokenContext()
        for w in reversed(words):
            if not isinstance(w, list):
                if w.phonemes is None:
                    w.phonemes, w.rating = self.lexicon(w, ctx)
                if w.phonemes is None and self.fallback is not None:
                    w.phonemes, w.rating = self.fallback(w)
                ctx = token_context(ctx, w.phonemes, w)
            else:
                ctx = self._resolve_group(w, ctx)
        tokens = [merge_tokens(w, unk=self.unk) if isinstance(w, list) else w for w in words]
        for tk in tokens:
            if tk.phonemes is None:
                log(f"Unresolved token: {tk.text}", level="debug")
                tk.phonemes = self.unk
        return "".join(tk.phonemes + tk.whitespace for tk in tokens), tokens

    def g2p_batch(self, texts, return_tokens=False):
        results = []
        for t in tqdm(texts, desc="G2P"):
            ps, tokens = self(t)
            results.append((ps, tokens) if return_tokens else ps)
        return results


# === Convenience functions for scripts/CLI ===

_pipeline = None

def load_infer_pipeline(config_path="config/config.yaml", **kwargs):
    global _pipeline
    _pipeline = G2PPipeline(config_path, **kwargs)
    return _pipeline

def g2p_infer(text):
    """
    One-shot G2P for a text; loads the default pipeline on first use.
    """
    global _pipeline
    if _pipeline is None:
        _pipeline = load_infer_pipeline()
    return _pipeline(text)[0]

def batch_g2p_predict(texts, return_tokens=False):
    """
    G2P over a list of texts, with a progress bar.
    """
    global _pipeline
    if _pipeline is None:
        _pipeline = load_infer_pipeline()
    return _pipeline.g2p_batch(texts, return_tokens=return_tokens)


# ===== Demo/debug =====

if __name__ == "__main__":
    pipeline = load_infer_pipeline()
    ps, tokens = pipeline("[Misaki](/misˈɑki/) costs $3.50 in 2024, it's well-known.")
    print(ps)
    print(tokens_to_frame(tokens).to_string(index=False))
    print("Batch:", batch_g2p_predict(["Hello world!", "The end."]))
