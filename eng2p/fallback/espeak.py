# eng2p/fallback/espeak.py

"""
espeak-ng fallback for words the lexicon cannot resolve.

The phonemizer backend keeps punctuation runs out of the text sent to
espeak (phonemizer.punctuation.Punctuation, position-tagged marks) and puts
them back afterwards. Its IPA output is then mapped onto the lexicon's
phoneme alphabet.
"""

import re

from phonemizer.backend import EspeakBackend
from phonemizer.punctuation import Punctuation

from eng2p.utils.logger import log

# espeak IPA -> lexicon alphabet, longest keys first
E2M = sorted({
    "ʔˌn\u0329": "tn",
    "ʔn\u0329": "tn",
    "ʔn": "tn",
    "ʔ": "t",
    "a^ɪ": "I",
    "a^ʊ": "W",
    "d^ʒ": "ʤ",
    "e": "A",
    "e^ɪ": "A",
    "r": "ɹ",
    "t^ʃ": "ʧ",
    "x": "k",
    "ç": "k",
    "ɐ": "ə",
    "ɔ^ɪ": "Y",
    "ə^l": "ᵊl",
    "ɚ": "əɹ",
    "ɬ": "l",
    "ʲ": "",
    "ʲo": "jo",
    "ʲə": "jə",
    "\u0303": "",
}.items(), key=lambda kv: -len(kv[0]))

GB_REPLACEMENTS = [("e^ə", "ɛː"), ("iə", "ɪə"), ("ə^ʊ", "Q")]
US_REPLACEMENTS = [("o^ʊ", "O"), ("ɜːɹ", "ɜɹ"), ("ɜː", "ɜɹ"), ("ɪə", "iə"), ("ː", "")]

_SYLLABIC_RE = re.compile(r"(\S)\u0329")


def espeak_to_lexicon(ps, british=False):
    """Map raw espeak IPA (tie '^') to the lexicon alphabet."""
    for old, new in E2M:
        ps = ps.replace(old, new)
    ps = _SYLLABIC_RE.sub(r"ᵊ\1", ps).replace(chr(809), "")
    for old, new in GB_REPLACEMENTS if british else US_REPLACEMENTS:
        ps = ps.replace(old, new)
    # Older espeak releases emit "o" for "ɔ"
    return ps.replace("o", "ɔ").replace("^", "")


class EspeakFallback:
    """
    fallback(token) -> (phonemes, 2), or (None, None) on failure.

    Args:
        british (bool): en-gb voice and GB alphabet
        backend: object with `phonemize(list_of_text) -> list_of_ipa`;
            an espeak-ng EspeakBackend is created on first use when omitted
    """
    def __init__(self, british=False, backend=None):
        self.british = british
        self._backend = backend

    @property
    def backend(self):
        if self._backend is None:
            language = "en-gb" if self.british else "en-us"
            log(f"Starting espeak-ng backend ({language})", level="debug")
            self._backend = EspeakBackend(
                language=language,
                punctuation_marks=Punctuation.default_marks(),
                preserve_punctuation=True,
                with_stress=True,
                tie="^",
            )
        return self._backend

    def __call__(self, token):
        try:
            ps = self.backend.phonemize([token.text])
        except RuntimeError as e:
            log(f"espeak failed on '{token.text}': {e}", level="warning")
            return None, None
        if not ps or not ps[0].strip():
            return None, None
        return espeak_to_lexicon(ps[0].strip(), self.british), 2
