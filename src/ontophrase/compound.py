"""Inline struct-representable types as Compound values."""

from typing import Dict

from . import semantic_types as st
from .config import ResolverConfig, get_logger
from .errors import EmptyCompoundError
from .model import OntologyGraph, PropertyDef

logger = get_logger(__name__)


def collect_properties(graph: OntologyGraph, start: str, config: ResolverConfig) -> Dict[str, PropertyDef]:
    """
    All properties of `start`, including inherited ones, most specific first.

    Ancestors outside the struct lineage contribute nothing (a type that is a
    subclass of both a struct and a non-struct keeps only the struct side), and
    the walk stops after the struct roots so root (Thing) properties stay out.
    Types in `struct_include_root_properties` lift both limits.
    """
    include_root = start in config.struct_include_root_properties
    collected: Dict[str, PropertyDef] = {}
    visited = set()

    def visit(type_name):
        node = graph.get(type_name)
        if node is None or type_name in visited:
            return
        visited.add(type_name)
        if not include_root and not node.is_struct_lineage:
            return
        for prop_name, prop in node.properties.items():
            if prop_name not in collected:
                collected[prop_name] = prop
        if not include_root and type_name in config.struct_roots:
            return
        for parent in node.parents:
            visit(parent)

    visit(start)
    return collected


class CompoundTypeBuilder:
    """
    Builds Compound types on behalf of a PropertyTypeResolver.

    The graph is immutable once classified, so compounds are cached per
    (type, has_geo).
    """

    def __init__(self, resolver):
        self.resolver = resolver
        self._cache = {}

    def build_compound(self, type_name: str, has_geo: bool = False) -> st.Compound:
        key = (type_name, has_geo)
        if key in self._cache:
            return self._cache[key]

        graph = self.resolver.graph
        properties = collect_properties(graph, type_name, self.resolver.config)

        fields = []
        for prop_name, prop in properties.items():
            field = self.resolver.resolve_property(prop_name, prop, has_geo, inside_compound=True)
            if field is None:
                logger.debug("Dropping %s.%s: no usable type", type_name, prop_name)
                continue
            fields.append(field)

        if not fields:
            raise EmptyCompoundError(type_name)

        compound = st.Compound(type_name, tuple(fields))
        self._cache[key] = compound
        return compound
