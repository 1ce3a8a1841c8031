"""ontophrase: resolve an ontology into typed definitions with canonical phrases."""

from .canonical import CanonicalPhraseSynthesizer
from .classifier import classify
from .config import DEFAULT_CONFIG, ResolverConfig
from .emitter import Emitter, topological_order
from .errors import EmptyCompoundError, MalformedStatementError, OntologyError
from .graph_builder import GraphBuilder, build_graph
from .model import (
    CanonicalRecord,
    ClassDefinition,
    ClassStatement,
    EnumMemberStatement,
    OntologyGraph,
    PropertyStatement,
    ResolvedProperty,
    TypeDefinition,
)
from .pipeline import OntologyProcessor
from .property_resolver import PropertyTypeResolver

__version__ = "0.1.0"

__all__ = [
    "CanonicalPhraseSynthesizer",
    "CanonicalRecord",
    "ClassDefinition",
    "ClassStatement",
    "DEFAULT_CONFIG",
    "Emitter",
    "EmptyCompoundError",
    "EnumMemberStatement",
    "GraphBuilder",
    "MalformedStatementError",
    "OntologyError",
    "OntologyGraph",
    "OntologyProcessor",
    "PropertyStatement",
    "PropertyTypeResolver",
    "ResolvedProperty",
    "ResolverConfig",
    "TypeDefinition",
    "build_graph",
    "classify",
    "topological_order",
]
