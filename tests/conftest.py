# tests/conftest.py

import json
import os
import re
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import yaml

from eng2p.lexicon import Lexicon
from eng2p.tagger import TaggedWord

# Minimal US lexicon (gold tier)
GOLD = {
    # letters
    "A": "ˈA", "B": "bˈi", "C": "sˈi", "D": "dˈi", "E": "ˈi", "F": "ˈɛf",
    "H": "ˈAʧ", "I": "ˈI", "J": "ʤˈA", "K": "kˈA", "L": "ˈɛl", "M": "ˈɛm",
    "N": "ˈɛn", "O": "ˈO", "P": "pˈi", "Q": "kjˈu", "R": "ˈɑɹ", "S": "ˈɛs",
    "T": "tˈi", "U": "jˈu", "V": "vˈi", "X": "ˈɛks", "Y": "wˈI", "Z": "zˈi",
    # numbers
    "zero": "zˈɪɹO", "one": "wˈʌn", "two": "tˈu", "three": "θɹˈi", "four": "fˈɔɹ",
    "five": "fˈIv", "six": "sˈɪks", "seven": "sˈɛvən", "eight": "ˈAt", "nine": "nˈIn",
    "ten": "tˈɛn", "fifty": "fˈɪfti", "twenty": "twˈɛnti", "hundred": "hˈʌndɹəd",
    "thousand": "θˈWzənd", "nineteen": "nˌIntˈin", "ninety": "nˈInti",
    "third": "θˈɜɹd", "point": "pˈYnt", "minus": "mˈInəs",
    # currency
    "dollar": "dˈɑləɹ", "cent": "sˈɛnt", "pound": "pˈWnd", "pence": "pˈɛns", "euro": "jˈʊɹO",
    # symbols
    "percent": "pəɹsˈɛnt", "and": "ænd", "plus": "plˈʌs", "at": "æt", "dot": "dˈɑt",
    "slash": "slˈæʃ", "versus": "vˈɜɹsəs",
    # function words
    "the": "ðə", "to": "tˈu", "am": "ˈæm", "it": "ɪt",
    "used": {"DEFAULT": "jˈuzd", "VBD": "jˈust"},
    "read": {"DEFAULT": "ɹˈid", "VBD": "ɹˈɛd", "VERB": "ɹˈid", "None": "ɹˈid"},
    "lead": {"DEFAULT": "lˈid", "NOUN": "lˈɛd", "VBD": None},
    # content words
    "cost": "kˈɔst", "walk": "wˈɔk", "want": "wˈɑnt", "need": "nˈid", "wait": "wˈAt",
    "hope": "hˈOp", "run": "ɹˈʌn", "box": "bˈɑks", "city": "sˈɪti", "kiss": "kˈɪs",
    "apple": "ˈæpᵊl", "tomato": "təmˈAtO", "well-known": "wˈɛlnˈOn",
    "McDonald": "məkdˈɑnəld",
}

SILVER = {
    "misaki": "misˈɑki",
    "kokoro": "kˈOkəɹO",
}

GB_GOLD = {
    "wait": "wˈAt",
    "car": "kˈɑː",
    "the": "ðə",
    "to": "tˈuː",
}

USER_LEXICON_CSV = "word,phonemes\ntomato,təmˈɑtO\nkokoro,kəkˈɔɹO\n"

# Penn tags for the fake tagger
TAGS = {
    "it": "PRP", "i": "PRP", "costs": "VBZ", "walked": "VBD", "is": "VBZ",
    "the": "DT", "a": "DT", "an": "DT", "to": "TO", "and": "CC",
    "$": "$", "£": "$", "€": "$", ".": ".", ",": ",", "!": ".", "?": ".",
    "(": "-LRB-", ")": "-RRB-", "-": ":",
}

_WORD_RE = re.compile(r"\d+(?:[.,]\d+)*|[A-Za-z]+(?:['’-][A-Za-z]+)*|\S")


class FakeTagger:
    """Regex tokenizer + lookup-table tagger standing in for spaCy."""
    def __call__(self, text):
        matches = list(_WORD_RE.finditer(text))
        words = []
        for i, m in enumerate(matches):
            w = m.group()
            if w.lower() in TAGS:
                tag = TAGS[w.lower()]
            elif w[0].isdigit():
                tag = "CD"
            elif w[0].isupper():
                tag = "NNP"
            else:
                tag = "NN"
            ws = text[m.end():matches[i + 1].start()] if i + 1 < len(matches) else " "
            words.append(TaggedWord(w, tag, ws))
        return words


class FakeFallback:
    """Records the texts it was asked for and answers with fixed phonemes."""
    def __init__(self, phonemes="fˈAk"):
        self.phonemes = phonemes
        self.calls = []

    def __call__(self, token):
        self.calls.append(token.text)
        return self.phonemes, 2


def write_json(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)


def build_dummy_assets(tmpdir):
    tmpdir = str(tmpdir)
    write_json(os.path.join(tmpdir, "us_gold.json"), GOLD)
    write_json(os.path.join(tmpdir, "us_silver.json"), SILVER)
    write_json(os.path.join(tmpdir, "gb_gold.json"), GB_GOLD)
    write_json(os.path.join(tmpdir, "gb_silver.json"), {})
    with open(os.path.join(tmpdir, "user_lexicon.csv"), "w", encoding="utf-8") as f:
        f.write(USER_LEXICON_CSV)
    config = {
        "lexicon": {
            "british": False,
            "gold_path": os.path.join(tmpdir, "us_gold.json"),
            "silver_path": os.path.join(tmpdir, "us_silver.json"),
            "user_lexicon_path": None,
        },
        "tagger": {"model": "en_core_web_sm"},
        "fallback": {"enabled": False},
        "pipeline": {"unk": "❓"},
        "logging": {"log_file": None},
    }
    config_path = os.path.join(tmpdir, "config.yaml")
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, allow_unicode=True)
    return config_path


@pytest.fixture
def config_path(tmp_path):
    return build_dummy_assets(tmp_path)


@pytest.fixture
def lexicon(config_path):
    tmpdir = os.path.dirname(config_path)
    return Lexicon.from_files(
        os.path.join(tmpdir, "us_gold.json"),
        os.path.join(tmpdir, "us_silver.json"),
    )


@pytest.fixture
def gb_lexicon(config_path):
    tmpdir = os.path.dirname(config_path)
    return Lexicon.from_files(
        os.path.join(tmpdir, "gb_gold.json"),
        os.path.join(tmpdir, "gb_silver.json"),
        british=True,
    )


@pytest.fixture
def tagger():
    return FakeTagger()
