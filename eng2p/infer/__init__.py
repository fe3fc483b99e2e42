# eng2p/infer/__init__.py

"""
eng2p.infer
===========

Entry point for the eng2p inference pipeline:
- G2PPipeline : text -> (phonemes, tokens)
- g2p_infer / batch_g2p_predict : single and batch helpers
- Config-driven loading of lexicon, tagger and espeak fallback

Usage:
    from eng2p.infer import (
        G2PPipeline,
        g2p_infer,
        batch_g2p_predict,
        load_infer_pipeline
    )
"""

from .g2p_infer import (
    G2PPipeline,
    g2p_infer,
    batch_g2p_predict,
    load_infer_pipeline,
    resolve_tokens,
    token_context,
    tokens_to_frame,
)

__all__ = [
    "G2PPipeline",
    "g2p_infer",
    "batch_g2p_predict",
    "load_infer_pipeline",
    "resolve_tokens",
    "token_context",
    "tokens_to_frame",
]
