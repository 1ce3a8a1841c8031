"""
Pick one value type per property.

Candidate ranges are scored, best first:

    5  enumeration
    4  builtin scalar / measure (Number, Date, Distance, ...)
    3  struct-representable class
    2  the generic text type, when listed explicitly
    1  any other known class (becomes an entity reference)
   -1  unknown type

and the winner is turned into a SemanticType, possibly wrapped in an Array.
"""

import re
from typing import Optional, Tuple

from . import semantic_types as st
from .compound import CompoundTypeBuilder
from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .model import OntologyGraph, PropertyDef, ResolvedProperty

logger = get_logger(__name__)

INDEFINITE_ARTICLE_RE = re.compile(r"^an? ", re.IGNORECASE)


def score_candidate(type_name: str, graph: OntologyGraph, config: ResolverConfig) -> int:
    node = graph.get(type_name)
    if node is not None and node.is_enum:
        return 5
    if type_name == config.generic_text_type:
        return 2
    if config.is_builtin(type_name):
        return 4
    if node is None:
        return -1
    if node.represent_as_struct:
        return 3
    return 1


def best_candidate(prop: PropertyDef, graph: OntologyGraph, config: ResolverConfig) -> Optional[str]:
    """Highest scoring candidate (first one on ties), or None if nothing usable."""
    best, best_score = None, None
    for type_name in prop.candidate_types:
        score = score_candidate(type_name, graph, config)
        if best_score is None or score > best_score:
            best, best_score = type_name, score
    if best_score is None or best_score < 0:
        return None
    return best


def guess_array(name: str, prop: PropertyDef, graph: OntologyGraph, config: ResolverConfig) -> bool:
    """
    Whether a property may hold several values.

    A list-wrapper candidate or a comment starting with "A"/"An" says yes
    ("The ..." comments usually describe a single value). The static
    force-array list is applied next and force-not-array last, so the latter
    always wins.
    """
    is_array = any(graph.get(t) is not None and graph[t].is_list_wrapper for t in prop.candidate_types)
    if INDEFINITE_ARTICLE_RE.match(prop.comment or ""):
        is_array = True
    if name in config.force_array:
        is_array = True
    if name in config.force_not_array:
        is_array = False
    return is_array


class PropertyTypeResolver:
    """Resolves properties against a classified graph."""

    def __init__(self, graph: OntologyGraph, config: ResolverConfig = DEFAULT_CONFIG, synthesizer=None):
        self.graph = graph
        self.config = config
        self.synthesizer = synthesizer
        self.compounds = CompoundTypeBuilder(self)

    def to_semantic_type(self, type_name: str, has_geo: bool = False):
        if self.config.is_builtin(type_name):
            return self.config.builtin_types[type_name]

        node = self.graph[type_name]
        if node.is_list_wrapper:
            return st.Array(self.to_semantic_type(node.element_type, has_geo))
        if node.is_enum and node.enum_values:
            return st.Enum(node.enum_values)
        if node.represent_as_struct:
            return self.compounds.build_compound(type_name, has_geo)
        return st.EntityRef(self.config.entity_prefix + type_name)

    def _numeric_from_name(self, name: str):
        lowered = name.lower()
        for hint, semantic_type in self.config.numeric_name_hints:
            if hint in lowered:
                return semantic_type
        logger.warning("Cannot guess the correct type of %s of type %s, assuming Number",
                       name, self.config.ambiguous_numeric_type)
        return st.Number

    def resolve_type(self, name: str, prop: PropertyDef, has_geo: bool = False) -> Tuple[Optional[str], object]:
        """
        Returns (chosen candidate type, SemanticType), or (None, None) if the
        property is block-listed or none of its candidates can be used.
        """
        if name in self.config.blocked_properties:
            return None, None

        is_array = guess_array(name, prop, self.graph, self.config)
        best = best_candidate(prop, self.graph, self.config)
        if best is None:
            return None, None

        if name in self.config.type_overrides:
            return best, self.config.type_overrides[name]

        best_node = self.graph.get(best)
        if best_node is not None and best_node.is_list_wrapper:
            is_array = False

        if best == self.config.ambiguous_numeric_type:
            return best, self._numeric_from_name(name)

        semantic_type = self.to_semantic_type(best, has_geo)

        # an array of booleans or enums does not make much sense
        if st.is_boolean(semantic_type) or st.is_enum(semantic_type):
            is_array = False

        if is_array:
            semantic_type = st.Array(semantic_type)
        return best, semantic_type

    def resolve_property(self, name: str, prop: PropertyDef, has_geo: bool = False,
                         inside_compound: bool = False) -> Optional[ResolvedProperty]:
        """Resolve type, canonical and annotations; None if the property is dropped."""
        source_type, semantic_type = self.resolve_type(name, prop, has_geo)
        if semantic_type is None:
            return None

        canonical = self.synthesizer.synthesize(name, semantic_type)
        filterable = name not in self.config.no_filter_properties
        drop = False
        if inside_compound and has_geo and name in self.config.drop_with_geo_properties:
            filterable = False
            drop = True

        return ResolvedProperty(
            name=name,
            semantic_type=semantic_type,
            canonical=canonical,
            filterable=filterable,
            source_type=source_type,
            drop=drop,
            comment=prop.comment if self.config.keep_annotation else None,
        )
