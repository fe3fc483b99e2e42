# tests/test_data.py

import json

import pytest

from eng2p.data.loader import (
    grow_dictionary,
    load_lexicon_json,
    load_user_lexicon,
    validate_lexicon,
)


def test_grow_dictionary():
    grown = grow_dictionary({"hello": "hˈɛlO", "Paris": "pˈɛɹɪs", "NASA": "nˈæsə", "a": "ɐ"})
    assert grown["Hello"] == "hˈɛlO"
    assert grown["paris"] == "pˈɛɹɪs"
    # ALL-CAPS and one-letter keys are not expanded
    assert "nasa" not in grown and "Nasa" not in grown
    assert "A" not in grown


def test_grow_dictionary_original_keys_win():
    grown = grow_dictionary({"polish": "pˈɑlɪʃ", "Polish": "pˈOlɪʃ"})
    assert grown["polish"] == "pˈɑlɪʃ"
    assert grown["Polish"] == "pˈOlɪʃ"


def test_validate_lexicon():
    validate_lexicon({"cat": "kˈæt", "read": {"DEFAULT": "ɹˈid", "VBD": None}})
    with pytest.raises(ValueError):
        validate_lexicon({"cat": "kˈæt!"})
    with pytest.raises(ValueError):
        validate_lexicon({"read": {"VBD": "ɹˈɛd"}})
    with pytest.raises(ValueError):
        validate_lexicon({"cat": ["kˈæt"]})


def test_validate_dialect_alphabet():
    validate_lexicon({"car": "kˈɑː"}, british=True)
    with pytest.raises(ValueError):
        validate_lexicon({"car": "kˈɑː"}, british=False)


def test_load_lexicon_json(tmp_path):
    path = tmp_path / "gold.json"
    path.write_text(json.dumps({"cat": "kˈæt"}, ensure_ascii=False), encoding="utf-8")
    lexicon = load_lexicon_json(str(path))
    assert lexicon == {"cat": "kˈæt", "Cat": "kˈæt"}


def test_load_lexicon_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon_json(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon_json(str(broken))

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon_json(str(listed))


def test_load_without_validation(tmp_path):
    path = tmp_path / "gold.json"
    path.write_text(json.dumps({"cat": "kˈæt!"}), encoding="utf-8")
    assert load_lexicon_json(str(path), validate=False)["cat"] == "kˈæt!"


def test_load_user_lexicon(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("word,phonemes\n misaki ,misˈɑki\n,\n", encoding="utf-8")
    lexicon = load_user_lexicon(str(path))
    assert lexicon == {"misaki": "misˈɑki", "Misaki": "misˈɑki"}


def test_user_lexicon_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_user_lexicon(str(tmp_path / "missing.csv"))

    wrong = tmp_path / "wrong.csv"
    wrong.write_text("word,ipa\ncat,kˈæt\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_user_lexicon(str(wrong))

    bad = tmp_path / "bad.csv"
    bad.write_text("word,phonemes\ncat,k@t\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_user_lexicon(str(bad))
