"""Exceptions raised while building and resolving an ontology graph."""


class OntologyError(ValueError):
    """Base class for fatal ontology processing errors."""


class MalformedStatementError(OntologyError):
    """A statement (or RDF subject) has a shape the builder does not understand."""

    def __init__(self, statement, reason: str = "unrecognized statement"):
        self.statement = statement
        super().__init__(f"{reason}: {statement!r}")


class EmptyCompoundError(OntologyError):
    """A struct-representable type resolved to zero fields."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Struct type {type_name} has no fields")
