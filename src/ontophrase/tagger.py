"""
Part-of-speech tagging used by the canonical phrase rules.

Any object with `tag(tokens) -> tags` works as a tagger, as long as it
produces Penn Treebank tags (NN, NNS, VBZ, VBN, JJ, ...).
"""

from typing import List, Optional, Protocol, Sequence

import nltk

from .config import get_logger

logger = get_logger(__name__)

NOUN_TAGS = frozenset(["NN", "NNS", "NNP", "NNPS"])
PRESENT_VERB_TAGS = frozenset(["VBP", "VBZ", "VBD"])
PARTICIPLE_ADJ_TAGS = frozenset(["VBN", "VBG", "JJ", "JJR"])
IS_PASSIVE_TAGS = frozenset(["VBN", "JJ", "JJR"])

# newer nltk releases ship the perceptron model under the _eng name
_TAGGER_RESOURCES = (
    ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
    ("taggers/averaged_perceptron_tagger", "averaged_perceptron_tagger"),
)


class PosTagger(Protocol):
    def tag(self, tokens: Sequence[str]) -> List[str]:
        ...


class NltkTagger:
    """Default tagger, backed by nltk's averaged perceptron model."""

    def __init__(self, download: bool = True):
        self._download = download
        self._ready = False

    def _ensure_model(self):
        if self._ready:
            return
        for path, _ in _TAGGER_RESOURCES:
            try:
                nltk.data.find(path)
                self._ready = True
                return
            except LookupError:
                continue
        if not self._download:
            raise LookupError("nltk perceptron tagger model is not installed")
        for _, package in _TAGGER_RESOURCES:
            logger.info("Downloading nltk resource %s", package)
            nltk.download(package, quiet=True)
        self._ready = True

    def tag(self, tokens: Sequence[str]) -> List[str]:
        tokens = list(tokens)
        if not tokens:
            return []
        self._ensure_model()
        return [tag for _, tag in nltk.pos_tag(tokens)]


class DictTagger:
    """
    Lexicon lookup tagger; words missing from the lexicon get `default`.

    Useful where the tags must not depend on a statistical model.
    """

    def __init__(self, lexicon: dict, default: str = "NN", fallback: Optional[PosTagger] = None):
        self.lexicon = {k.lower(): v for k, v in lexicon.items()}
        self.default = default
        self.fallback = fallback

    def tag(self, tokens: Sequence[str]) -> List[str]:
        tokens = list(tokens)
        if self.fallback is not None and any(t.lower() not in self.lexicon for t in tokens):
            guessed = self.fallback.tag(tokens)
            return [self.lexicon.get(t.lower(), g) for t, g in zip(tokens, guessed)]
        return [self.lexicon.get(t.lower(), self.default) for t in tokens]


def is_noun(tag: str) -> bool:
    return tag in NOUN_TAGS
