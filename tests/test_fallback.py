# tests/test_fallback.py

import pytest
from phonemizer.punctuation import Punctuation
from phonemizer.separator import Separator

import eng2p.fallback.espeak as espeak_module
from eng2p.fallback import EspeakFallback, espeak_to_lexicon
from eng2p.token import MToken


# ==== IPA -> lexicon alphabet ====

@pytest.mark.parametrize("ipa,expected", [
    ("həlo^ʊ", "həlO"),
    ("ɹˈe^ɪn", "ɹˈAn"),
    ("bˈɜːd", "bˈɜɹd"),
    ("bˈʌʔn\u0329", "bˈʌtn"),
    ("mˈɪdl\u0329", "mˈɪdᵊl"),
    ("ba^ɪt", "bIt"),
    ("t^ʃˈɜːt^ʃ", "ʧˈɜɹʧ"),
    ("bˈɛtɚ", "bˈɛtəɹ"),
])
def test_espeak_to_lexicon_us(ipa, expected):
    assert espeak_to_lexicon(ipa) == expected


def test_espeak_to_lexicon_gb():
    assert espeak_to_lexicon("həlˈə^ʊ", british=True) == "həlˈQ"
    # length marks stay in GB
    assert espeak_to_lexicon("kˈɑː", british=True) == "kˈɑː"
    assert espeak_to_lexicon("kˈɑː") == "kˈɑ"


# ==== Fallback object ====

class FakeBackend:
    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.seen = []

    def phonemize(self, texts):
        self.seen.extend(texts)
        if self.error:
            raise self.error
        return self.output


def test_fallback_maps_backend_output():
    backend = FakeBackend(["həlo^ʊ "])
    fallback = EspeakFallback(backend=backend)
    assert fallback(MToken("hello")) == ("həlO", 2)
    assert backend.seen == ["hello"]


def test_fallback_backend_error():
    fallback = EspeakFallback(backend=FakeBackend(error=RuntimeError("espeak died")))
    assert fallback(MToken("hello")) == (None, None)


def test_fallback_empty_output():
    assert EspeakFallback(backend=FakeBackend([""]))(MToken("...")) == (None, None)
    assert EspeakFallback(backend=FakeBackend([]))(MToken("...")) == (None, None)


def test_backend_created_lazily(monkeypatch):
    created = []

    class RecordingBackend(FakeBackend):
        def __init__(self, **kwargs):
            super().__init__(["kˈɑː"])
            created.append(kwargs)

    monkeypatch.setattr(espeak_module, "EspeakBackend", RecordingBackend)
    fallback = EspeakFallback(british=True)
    assert created == []
    assert fallback(MToken("car")) == ("kˈɑː", 2)
    assert fallback(MToken("car")) == ("kˈɑː", 2)
    assert len(created) == 1
    kwargs = created[0]
    assert kwargs["language"] == "en-gb"
    assert kwargs["preserve_punctuation"] is True
    assert kwargs["with_stress"] is True
    assert kwargs["tie"] == "^"
    assert kwargs["punctuation_marks"] == Punctuation.default_marks()


def test_punctuation_marks_removed():
    assert Punctuation().remove("Hello, world!") == "Hello world"


def test_punctuation_round_trip():
    text = "Hello, world! How are you?"
    punct = Punctuation()
    parts, marks = punct.preserve(text)
    assert parts == ["Hello", "world", "How are you"]
    assert [m.position for m in marks] == ["I", "I", "E"]
    restored = Punctuation.restore(parts, marks, Separator(phone="", word=" "), strip=True)
    assert restored == [text]
