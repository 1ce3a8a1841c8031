"""Resolver configuration: every block-list, override table and switch in one value."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from . import tables


def _frozen(mapping):
    return field(default_factory=lambda: MappingProxyType(dict(mapping)))


@dataclass(frozen=True)
class ResolverConfig:
    """
    Immutable configuration shared by the builder, classifier, resolver,
    synthesizer and emitter.

    Tables default to the schema.org ones in `ontophrase.config.tables`.
    Use `with_options(...)` to derive a variant.
    """

    # hierarchy roots
    root_type: str = tables.ROOT_TYPE
    action_root: str = tables.ACTION_ROOT
    enum_root: str = tables.ENUM_ROOT
    collection_root: str = tables.COLLECTION_ROOT
    generic_text_type: str = tables.GENERIC_TEXT_TYPE
    ambiguous_numeric_type: str = tables.AMBIGUOUS_NUMERIC_TYPE
    collection_suffixes: Tuple[str, ...] = tables.COLLECTION_SUFFIXES
    struct_roots: Tuple[str, ...] = tables.STRUCT_ROOTS

    # type tables
    builtin_types: Mapping = _frozen(tables.BUILTIN_TYPEMAP)
    numeric_name_hints: Tuple = tables.NUMERIC_NAME_HINTS
    blocked_types: frozenset = tables.BLOCKED_TYPES
    blocked_properties: frozenset = tables.BLOCKED_PROPERTIES
    non_struct_types: frozenset = tables.NON_STRUCT_TYPES
    struct_include_root_properties: frozenset = tables.STRUCT_INCLUDE_ROOT_PROPERTIES

    # property tables
    force_array: frozenset = tables.PROPERTY_FORCE_ARRAY
    force_not_array: frozenset = tables.PROPERTY_FORCE_NOT_ARRAY
    type_overrides: Mapping = _frozen(tables.PROPERTY_TYPE_OVERRIDE)
    canonical_overrides: Mapping = _frozen(tables.PROPERTY_CANONICAL_OVERRIDE)
    manual_canonical_overrides: Mapping = _frozen(tables.MANUAL_PROPERTY_CANONICAL_OVERRIDE)
    no_filter_properties: frozenset = tables.PROPERTIES_NO_FILTER
    drop_with_geo_properties: frozenset = tables.PROPERTIES_DROP_WITH_GEO
    keywords: frozenset = tables.KEYWORDS
    string_file_overrides: Mapping = _frozen(tables.STRING_FILE_OVERRIDES)

    # switches
    class_name: str = tables.DEFAULT_CLASS_NAME
    manual: bool = False
    always_base_canonical: bool = True
    keep_annotation: bool = False
    geo_property: str = "geo"
    whitelist: Tuple[str, ...] = ()
    label_source: Optional[Mapping] = None

    @property
    def entity_prefix(self) -> str:
        return f"{self.class_name}:"

    def is_builtin(self, type_name: str) -> bool:
        return type_name in self.builtin_types

    def with_options(self, **changes) -> "ResolverConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = ResolverConfig()
