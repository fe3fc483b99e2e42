# eng2p/__init__.py

"""
eng2p: rule-based English grapheme-to-phoneme conversion.

Public API:
- G2PPipeline: end-to-end text -> phonemes
- Lexicon: gold/silver dictionary resolver with morphology and numerals
- MToken, TokenContext, merge_tokens: token model
- EspeakFallback: espeak-ng fallback for unknown words
- apply_stress, stress_weight: stress helpers
"""

from .infer.g2p_infer import G2PPipeline
from .lexicon import Lexicon
from .token import MToken, TokenContext, merge_tokens
from .fallback import EspeakFallback
from .utils.phoneme_utils import apply_stress, stress_weight

__all__ = [
    "G2PPipeline",
    "Lexicon",
    "MToken",
    "TokenContext",
    "merge_tokens",
    "EspeakFallback",
    "apply_stress",
    "stress_weight",
]
