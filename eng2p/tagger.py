# eng2p/tagger.py

"""
Part-of-speech tagger wrapper.

Any callable `tagger(text) -> List[TaggedWord]` can drive the pipeline;
SpacyTagger is the default one, backed by a spaCy English model.
"""

from collections import namedtuple

import spacy

from eng2p.utils.logger import log

TaggedWord = namedtuple("TaggedWord", ["text", "tag", "whitespace"])


class SpacyTagger:
    """
    Penn Treebank tags from spaCy (`token.tag_`).
    The model is loaded on first use.
    """
    def __init__(self, model="en_core_web_sm"):
        self.model = model
        self._nlp = None

    @property
    def nlp(self):
        if self._nlp is None:
            log(f"Loading spaCy model: {self.model}")
            try:
                self._nlp = spacy.load(self.model, disable=["parser", "ner", "lemmatizer"])
            except OSError as e:
                raise OSError(
                    f"spaCy model '{self.model}' is not installed "
                    f"(python -m spacy download {self.model})"
                ) from e
        return self._nlp

    def __call__(self, text):
        words = [TaggedWord(tk.text, tk.tag_, tk.whitespace_) for tk in self.nlp(text)]
        if words:
            # The last word always carries a trailing space
            words[-1] = words[-1]._replace(whitespace=" ")
        return words
