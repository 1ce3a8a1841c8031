"""
In-memory records for the ontology arena and its resolved output.

Input side:   ClassStatement, PropertyStatement, EnumMemberStatement
Arena:        OntologyGraph (name -> TypeNode, enum type -> instances)
Output side:  ResolvedProperty, CanonicalRecord, TypeDefinition, ClassDefinition

TypeNode and PropertyDef are frozen; phases build new records with
dataclasses.replace() instead of mutating the arena they were given.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .semantic_types import SemanticType

# placeholder standing for the property value inside a template
PLACEHOLDER = "#"

CANONICAL_ROLES = ("base", "verb", "passive_verb", "adjective", "property", "reverse_property")


# --------------------
# Statements
# --------------------
@dataclass(frozen=True)
class ClassStatement:
    name: str
    parents: Tuple[str, ...] = ()
    comment: str = ""


@dataclass(frozen=True)
class PropertyStatement:
    name: str
    domains: Tuple[str, ...] = ()
    ranges: Tuple[str, ...] = ()
    comment: str = ""
    superseded: bool = False


@dataclass(frozen=True)
class EnumMemberStatement:
    """`name` is a declared instance of the enumeration `enum_type`."""
    name: str
    enum_type: str


Statement = Union[ClassStatement, PropertyStatement, EnumMemberStatement]


# --------------------
# Arena
# --------------------
@dataclass(frozen=True)
class PropertyDef:
    candidate_types: Tuple[str, ...]
    comment: str = ""


@dataclass(frozen=True)
class EnumRepr:
    values: Tuple[str, ...]


@dataclass(frozen=True)
class ListWrapperRepr:
    element_type: str


@dataclass(frozen=True)
class StructRepr:
    name: str


@dataclass(frozen=True)
class EntityRepr:
    name: str


Representation = Union[EnumRepr, ListWrapperRepr, StructRepr, EntityRepr]


@dataclass(frozen=True)
class TypeNode:
    name: str
    parents: Tuple[str, ...] = ()
    properties: Mapping[str, PropertyDef] = field(default_factory=dict)
    comment: str = ""

    # set by the classifier
    is_action: bool = False
    is_enum: bool = False
    enum_values: Tuple[str, ...] = ()
    is_list_wrapper: bool = False
    element_type: Optional[str] = None
    represent_as_struct: bool = False
    is_struct_lineage: bool = False

    @property
    def representation(self) -> Representation:
        if self.is_list_wrapper:
            return ListWrapperRepr(self.element_type)
        if self.is_enum and self.enum_values:
            return EnumRepr(self.enum_values)
        if self.represent_as_struct:
            return StructRepr(self.name)
        return EntityRepr(self.name)


@dataclass(frozen=True)
class OntologyGraph:
    """The arena: every phase takes one of these and hands back a new one."""
    nodes: Mapping[str, TypeNode]
    instances: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __contains__(self, name) -> bool:
        return name in self.nodes

    def __getitem__(self, name) -> TypeNode:
        return self.nodes[name]

    def get(self, name) -> Optional[TypeNode]:
        return self.nodes.get(name)

    def names(self) -> List[str]:
        return list(self.nodes)

    def with_nodes(self, nodes: Mapping[str, TypeNode]) -> "OntologyGraph":
        return replace(self, nodes=dict(nodes))

    def is_subclass(self, name: str, ancestor: str) -> bool:
        """True iff `name` transitively extends `ancestor` (not reflexive)."""
        seen = set()
        stack = list(self.nodes[name].parents) if name in self.nodes else []
        while stack:
            cur = stack.pop()
            if cur == ancestor:
                return True
            if cur in seen or cur not in self.nodes:
                continue
            seen.add(cur)
            stack.extend(self.nodes[cur].parents)
        return False


# --------------------
# Output
# --------------------
class CanonicalRecord:
    """Role -> ordered templates. A role never lists the same template twice."""

    def __init__(self, entries: Optional[Mapping[str, List[str]]] = None):
        self._entries: Dict[str, List[str]] = {}
        for role, templates in (entries or {}).items():
            self.extend(role, templates)

    def add(self, role: str, template: str):
        if role not in CANONICAL_ROLES:
            raise ValueError(f"Unknown canonical role {role!r}")
        bucket = self._entries.setdefault(role, [])
        if template not in bucket:
            bucket.append(template)

    def extend(self, role: str, templates):
        for t in templates:
            self.add(role, t)

    def get(self, role: str) -> List[str]:
        return list(self._entries.get(role, []))

    def __contains__(self, role) -> bool:
        return role in self._entries

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other) -> bool:
        if isinstance(other, CanonicalRecord):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == {k: list(v) for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"CanonicalRecord({self._entries!r})"

    def to_dict(self) -> Dict[str, List[str]]:
        return {role: list(templates) for role, templates in self._entries.items()}


@dataclass(frozen=True)
class ResolvedProperty:
    name: str
    semantic_type: SemanticType
    canonical: CanonicalRecord
    filterable: bool = True
    source_type: Optional[str] = None
    unique: bool = False
    drop: bool = False
    string_values: Optional[str] = None
    comment: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "name": self.name,
            "type": self.semantic_type.to_dict(),
            "canonical": self.canonical.to_dict(),
            "filterable": self.filterable,
        }
        if self.source_type is not None:
            out["source_type"] = self.source_type
        if self.unique:
            out["unique"] = True
        if self.drop:
            out["drop"] = True
        if self.string_values is not None:
            out["string_values"] = self.string_values
        if self.comment is not None:
            out["comment"] = self.comment
        return out


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    parents: Tuple[str, ...]
    fields: Tuple[ResolvedProperty, ...]
    canonical: str = ""
    comment: Optional[str] = None

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def to_dict(self) -> dict:
        out = {
            "name": self.name,
            "parents": list(self.parents),
            "canonical": self.canonical,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.comment is not None:
            out["comment"] = self.comment
        return out


@dataclass(frozen=True)
class ClassDefinition:
    kind: str
    types: Tuple[TypeDefinition, ...]
    whitelist: Tuple[str, ...] = ()
    name: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "whitelist": list(self.whitelist),
            "types": [t.to_dict() for t in self.types],
        }
