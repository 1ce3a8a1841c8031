"""
Order the entity types and turn each into a TypeDefinition.

Only types that are neither actions, enumerations nor structs get a
definition of their own; structs and enums show up as field types. Parents
always come before their children.
"""

from dataclasses import replace
from typing import List

from . import semantic_types as st
from .canonical import clean_name
from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .model import CanonicalRecord, OntologyGraph, ResolvedProperty, TypeDefinition

logger = get_logger(__name__)


def topological_order(graph: OntologyGraph, config: ResolverConfig = DEFAULT_CONFIG) -> List[str]:
    """DFS order over entity types, parents first, ties by declaration order."""
    order = {}
    visiting = set()

    def visit(type_name):
        node = graph[type_name]
        if node.is_action or node.is_enum or node.represent_as_struct:
            return
        if type_name in order or type_name in visiting:
            return
        visiting.add(type_name)
        for parent in node.parents:
            if parent in graph:
                visit(parent)
        visiting.discard(type_name)
        order[type_name] = None

    for type_name in graph.names():
        visit(type_name)
    return list(order)


def _escape(name: str, config: ResolverConfig) -> str:
    return "_" + name if name in config.keywords else name


def _with_elem(semantic_type, fn):
    """Apply fn to the innermost element type, keeping the Array wrappers."""
    if isinstance(semantic_type, st.Array):
        return st.Array(_with_elem(semantic_type.elem, fn))
    return fn(semantic_type)


def add_string_values(field: ResolvedProperty, file_id: str, config: ResolverConfig) -> ResolvedProperty:
    """Point string and entity fields (also inside compounds) at their value dataset."""
    elem = st.element_type(field.semantic_type)
    overrides = config.string_file_overrides

    if st.is_entity(elem):
        if file_id in overrides:
            return replace(field, string_values=overrides[file_id])
        return field
    if st.is_string(elem):
        return replace(field, string_values=overrides.get(file_id, file_id))
    if st.is_compound(elem):
        def annotate(compound):
            fields = tuple(add_string_values(f, f"{file_id}_{f.name}", config) for f in compound.fields)
            return st.Compound(compound.name, fields)
        return replace(field, semantic_type=_with_elem(field.semantic_type, annotate))
    return field


class Emitter:
    """Builds the ordered TypeDefinitions using a PropertyTypeResolver."""

    def __init__(self, resolver):
        self.resolver = resolver
        self.graph = resolver.graph
        self.config = resolver.config

    def _id_field(self, type_name: str) -> ResolvedProperty:
        return ResolvedProperty(
            name="id",
            semantic_type=st.EntityRef(self.config.entity_prefix + type_name),
            canonical=CanonicalRecord(),
            filterable=False,
            unique=True,
        )

    def _name_field(self) -> ResolvedProperty:
        # kept per type so each table can carry its own string_values
        return ResolvedProperty(
            name="name",
            semantic_type=st.String,
            canonical=CanonicalRecord(),
            filterable=False,
            source_type=self.config.generic_text_type,
        )

    def build_definition(self, type_name: str) -> TypeDefinition:
        node = self.graph[type_name]
        prefix = self.config.entity_prefix
        has_geo = self.config.geo_property in node.properties

        fields = [add_string_values(self._id_field(type_name), f"{prefix}{type_name}_name", self.config)]
        if type_name != self.config.root_type:
            fields.append(add_string_values(self._name_field(), f"{prefix}{type_name}_name", self.config))

        for prop_name, prop in node.properties.items():
            field = self.resolver.resolve_property(prop_name, prop, has_geo)
            if field is None:
                continue
            escaped = _escape(prop_name, self.config)
            field = replace(field, name=escaped)
            fields.append(add_string_values(field, f"{prefix}{type_name}_{escaped}", self.config))

        return TypeDefinition(
            name=_escape(type_name, self.config),
            parents=tuple(node.parents),
            fields=tuple(fields),
            canonical=clean_name(type_name),
            comment=node.comment if self.config.keep_annotation else None,
        )

    def emit(self) -> List[TypeDefinition]:
        definitions = []
        for type_name in topological_order(self.graph, self.config):
            node = self.graph[type_name]
            # collections only exist as Array(...) field types
            if type_name == self.config.collection_root or node.is_list_wrapper:
                continue
            definitions.append(self.build_definition(type_name))
        logger.info("Emitted %d type definitions", len(definitions))
        return definitions
