"""
Synthesize canonical phrase templates for a property.

    synth = CanonicalPhraseSynthesizer(config, tagger)
    synth.synthesize("servesCuisine", semantic_types.String)
      -> {"verb": ["serves # cuisine"], "base": ["cuisine"]}

Every candidate phrase (external labels, or the identifier split into words)
is placed under one grammatical role:

  "<x> content" on a measure  -> verb "contains #", base "<x> content", "<x>", "<x> amount"
  "has <x>"                   -> base "<x>"
  "is <x> ... of" / "is <noun>" -> reverse_property
  "is <participle|adj> ..."   -> passive_verb
  "<verb> <noun>"             -> verb "<verb> # <noun>", base "<noun>"
  "<verb> ..."                -> verb
  "... of"                    -> reverse_property
  "<participle|adj> ... <non-noun>" -> passive_verb
  anything else               -> base

`#` stands for the property value.
"""

import re
from typing import Iterable, List, Optional

import inflect

from . import semantic_types as st
from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .model import PLACEHOLDER, CanonicalRecord
from .tagger import (
    IS_PASSIVE_TAGS,
    PARTICIPLE_ADJ_TAGS,
    PRESENT_VERB_TAGS,
    NltkTagger,
    PosTagger,
    is_noun,
)

logger = get_logger(__name__)

_inflect = inflect.engine()

LETTERS_ONLY_RE = re.compile(r"^[a-z ]+$")


def clean_name(name: str) -> str:
    """sameAs -> "same as", ratingValue -> "rating", addressCountry -> "address country"."""
    name = re.sub(r"[_\-]", " ", name)
    name = re.sub(r"([^A-Z ])([A-Z])", r"\1 \2", name).lower()
    if name.endswith(" value"):
        name = name[:-len(" value")]
    return name


def pluralize(phrase: str) -> str:
    """
    Pluralize the final word only ("cuisine type" -> "cuisine types").
    Words that are plural already ("keywords") are kept.
    """
    words = phrase.split(" ")
    if _inflect.singular_noun(words[-1]):
        return phrase
    plural = _inflect.plural_noun(words[-1])
    if plural:
        words[-1] = plural
    return " ".join(words)


def _dedupe(items: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            out.append(item)
            seen.add(item)
    return out


class CanonicalPhraseSynthesizer:

    def __init__(self, config: ResolverConfig = DEFAULT_CONFIG, tagger: Optional[PosTagger] = None):
        self.config = config
        self.tagger = tagger if tagger is not None else NltkTagger()

    def _tag(self, phrase: str) -> List[str]:
        return self.tagger.tag(phrase.split(" "))

    def synthesize(self, name: str, semantic_type=None, labels: Optional[Iterable[str]] = None) -> CanonicalRecord:
        if name in self.config.canonical_overrides:
            return CanonicalRecord(self.config.canonical_overrides[name])
        if self.config.manual and name in self.config.manual_canonical_overrides:
            return CanonicalRecord(self.config.manual_canonical_overrides[name])

        if labels is None and self.config.label_source and name in self.config.label_source:
            labels = self.config.label_source[name]
        candidates = _dedupe(labels) if labels is not None else [clean_name(name)]

        canonical = CanonicalRecord()
        for candidate in candidates:
            self.add_candidate(canonical, candidate, semantic_type)

        if not canonical and self.config.always_base_canonical:
            canonical.add("base", name)
        return canonical

    def add_candidate(self, canonical: CanonicalRecord, phrase: str, semantic_type=None):
        """Classify one phrase and add it to `canonical` (in place)."""
        phrase = phrase.lower()
        # only plain words
        if not LETTERS_ONLY_RE.match(phrase):
            logger.debug("Skipping canonical candidate %r", phrase)
            return

        if st.is_array(semantic_type):
            phrase = pluralize(phrase)

        if phrase.endswith(" content") and st.is_measure(semantic_type):
            stem = phrase[:-len(" content")]
            canonical.add("verb", f"contains {PLACEHOLDER}")
            canonical.extend("base", [stem + " content", stem, stem + " amount"])
        elif phrase.startswith("has "):
            canonical.add("base", phrase[len("has "):])
        elif phrase.startswith("is "):
            phrase = phrase[len("is "):]
            tags = self._tag(phrase)
            if is_noun(tags[-1]) or phrase.endswith(" of"):
                canonical.add("reverse_property", phrase)
            elif tags[0] in IS_PASSIVE_TAGS:
                canonical.add("passive_verb", phrase)
        else:
            tags = self._tag(phrase)
            words = phrase.split(" ")
            if tags[0] in PRESENT_VERB_TAGS:
                if len(tags) == 2 and is_noun(tags[1]):
                    canonical.add("verb", phrase.replace(" ", f" {PLACEHOLDER} ", 1))
                    canonical.add("base", words[1])
                else:
                    canonical.add("verb", phrase)
            elif phrase.endswith(" of"):
                canonical.add("reverse_property", phrase)
            elif tags[0] in PARTICIPLE_ADJ_TAGS and not is_noun(tags[-1]):
                # non-words also come out as JJ (issn, dateline, funder)
                canonical.add("passive_verb", phrase)
            else:
                canonical.add("base", phrase)
