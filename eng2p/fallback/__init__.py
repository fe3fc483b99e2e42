# eng2p/fallback/__init__.py

from .espeak import E2M, EspeakFallback, espeak_to_lexicon

__all__ = ["E2M", "EspeakFallback", "espeak_to_lexicon"]
