# eng2p/data/__init__.py

"""
eng2p.data
==========

Lexicon data loading for eng2p:
- Gold / silver JSON tiers with case expansion
- Phoneme alphabet validation
- User lexicon CSV (pandas)
"""

from .loader import (
    grow_dictionary,
    validate_lexicon,
    load_lexicon_json,
    load_user_lexicon,
)

__all__ = [
    "grow_dictionary",
    "validate_lexicon",
    "load_lexicon_json",
    "load_user_lexicon",
]
