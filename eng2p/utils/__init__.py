# eng2p/utils/__init__.py

"""
eng2p.utils
===========

Utility submodules for eng2p:
- Phoneme alphabet and stress helpers
- Project logging
- Character tables and word normalization

Importable from the utils package:
    from eng2p.utils import (
        apply_stress, stress_weight, get_vocab,
        setup_logger, log, normalize_word
    )
"""

from .phoneme_utils import (
    PRIMARY_STRESS,
    SECONDARY_STRESS,
    apply_stress,
    get_vocab,
    is_valid_phoneme_seq,
    stress_weight,
)

from .logger import (
    Eng2PLogger,
    setup_logger,
    log,
)

from .text_cleaner import (
    is_junk,
    is_lexicon_word,
    normalize_word,
)

__all__ = [
    # phoneme utils
    "PRIMARY_STRESS",
    "SECONDARY_STRESS",
    "apply_stress",
    "get_vocab",
    "is_valid_phoneme_seq",
    "stress_weight",
    # logger
    "Eng2PLogger",
    "setup_logger",
    "log",
    # text cleaning
    "is_junk",
    "is_lexicon_word",
    "normalize_word",
]
