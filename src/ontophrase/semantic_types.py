"""
Semantic value types assigned to resolved properties.

The set is closed: every property ends up as one of

    Scalar(kind)      String, Number, Boolean, Date, Time, Any, Location, Currency
    Measure(unit)     a measurement in a base unit ("kg", "m", "ms", ...)
    EntityRef(name)   a reference to an entity, e.g. "org.schema:Person"
    Enum(values)      one of a fixed set of values
    Compound(name, fields)   an inlined structured value
    Array(elem)       a list of any of the above

`str(t)` renders a compact, stable form ("Array(Entity(org.schema:Person))")
that is also used when comparing outputs across runs.
"""

from dataclasses import dataclass
from typing import Tuple, Union

SCALAR_KINDS = ("String", "Number", "Boolean", "Date", "Time", "Any", "Location", "Currency")


@dataclass(frozen=True)
class Scalar:
    kind: str

    def __post_init__(self):
        if self.kind not in SCALAR_KINDS:
            raise ValueError(f"Unknown scalar kind {self.kind!r}")

    def __str__(self) -> str:
        return self.kind

    def to_dict(self) -> dict:
        return {"type": self.kind}


@dataclass(frozen=True)
class Measure:
    unit: str

    def __str__(self) -> str:
        return f"Measure({self.unit})"

    def to_dict(self) -> dict:
        return {"type": "Measure", "unit": self.unit}


@dataclass(frozen=True)
class EntityRef:
    name: str

    def __str__(self) -> str:
        return f"Entity({self.name})"

    def to_dict(self) -> dict:
        return {"type": "Entity", "name": self.name}


@dataclass(frozen=True)
class Enum:
    values: Tuple[str, ...]

    def __str__(self) -> str:
        return f"Enum({','.join(self.values)})"

    def to_dict(self) -> dict:
        return {"type": "Enum", "values": list(self.values)}


@dataclass(frozen=True)
class Compound:
    # fields are ontophrase.model.ResolvedProperty records
    name: str
    fields: tuple

    def __str__(self) -> str:
        return f"Compound({self.name})"

    def field_names(self):
        return [f.name for f in self.fields]

    def to_dict(self) -> dict:
        return {"type": "Compound", "name": self.name, "fields": [f.to_dict() for f in self.fields]}


@dataclass(frozen=True)
class Array:
    elem: "SemanticType"

    def __str__(self) -> str:
        return f"Array({self.elem})"

    def to_dict(self) -> dict:
        return {"type": "Array", "elem": self.elem.to_dict()}


SemanticType = Union[Scalar, Measure, EntityRef, Enum, Compound, Array]

String = Scalar("String")
Number = Scalar("Number")
Boolean = Scalar("Boolean")
Date = Scalar("Date")
Time = Scalar("Time")
Any = Scalar("Any")
Location = Scalar("Location")
Currency = Scalar("Currency")


def is_array(t) -> bool:
    return isinstance(t, Array)


def is_boolean(t) -> bool:
    return t == Boolean


def is_string(t) -> bool:
    return t == String


def is_enum(t) -> bool:
    return isinstance(t, Enum)


def is_measure(t) -> bool:
    return isinstance(t, Measure)


def is_entity(t) -> bool:
    return isinstance(t, EntityRef)


def is_compound(t) -> bool:
    return isinstance(t, Compound)


def element_type(t):
    """Strip any number of Array wrappers."""
    while isinstance(t, Array):
        t = t.elem
    return t
