"""
Turn class / property / enum-member statements into an OntologyGraph arena.

    from ontophrase.graph_builder import build_graph
    graph = build_graph(statements, config)

Statements about builtin or block-listed types are skipped, block-listed and
superseded properties are skipped, and repeated declarations are merged.
"""

from typing import Dict, Iterable, List

from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .errors import MalformedStatementError
from .model import (
    ClassStatement,
    EnumMemberStatement,
    OntologyGraph,
    PropertyDef,
    PropertyStatement,
    Statement,
    TypeNode,
)

logger = get_logger(__name__)


def _union_preserve_order(first, second) -> tuple:
    seen = set()
    out = []
    for item in list(first) + list(second):
        if item not in seen:
            out.append(item)
            seen.add(item)
    return tuple(out)


def _check_statement(stmt):
    """Raise MalformedStatementError unless every name field holds non-empty strings."""
    names = [stmt.name]
    for seq in ("parents", "domains", "ranges"):
        values = getattr(stmt, seq, ())
        if values is None or isinstance(values, str):
            raise MalformedStatementError(stmt, f"statement {seq} must be a sequence of names")
        names.extend(values)
    if isinstance(stmt, EnumMemberStatement):
        names.append(stmt.enum_type)
    for n in names:
        if not isinstance(n, str) or not n:
            raise MalformedStatementError(stmt, "statement has an empty or non-string name")


class GraphBuilder:
    """Accumulates statements; `build()` returns the frozen arena."""

    def __init__(self, config: ResolverConfig = DEFAULT_CONFIG):
        self.config = config
        # name -> {"parents": [...], "properties": {name: PropertyDef}, "comment": str}
        self._types: Dict[str, dict] = {}
        self._instances: Dict[str, List[str]] = {}

    def _skipped_type(self, name: str) -> bool:
        return self.config.is_builtin(name) or name in self.config.blocked_types

    def _ensure_type(self, name: str) -> dict:
        if name not in self._types:
            self._types[name] = {"parents": [], "properties": {}, "comment": "", "declared": False}
        return self._types[name]

    def add(self, stmt: Statement):
        if isinstance(stmt, ClassStatement):
            self._add_class(stmt)
        elif isinstance(stmt, PropertyStatement):
            self._add_property(stmt)
        elif isinstance(stmt, EnumMemberStatement):
            self._add_enum_member(stmt)
        else:
            raise MalformedStatementError(stmt)

    def add_all(self, statements: Iterable[Statement]):
        for stmt in statements:
            self.add(stmt)
        return self

    def _add_enum_member(self, stmt: EnumMemberStatement):
        _check_statement(stmt)
        if self._skipped_type(stmt.name):
            return
        members = self._instances.setdefault(stmt.enum_type, [])
        if stmt.name not in members:
            members.append(stmt.name)

    def _add_property(self, stmt: PropertyStatement):
        _check_statement(stmt)
        if self._skipped_type(stmt.name):
            return
        if stmt.superseded or stmt.name in self.config.blocked_properties:
            return

        for domain in stmt.domains:
            if self._skipped_type(domain):
                continue
            typedef = self._ensure_type(domain)
            existing = typedef["properties"].get(stmt.name)
            if existing is None:
                typedef["properties"][stmt.name] = PropertyDef(tuple(stmt.ranges), stmt.comment or "")
            else:
                typedef["properties"][stmt.name] = PropertyDef(
                    _union_preserve_order(existing.candidate_types, stmt.ranges),
                    existing.comment or stmt.comment or "",
                )

    def _add_class(self, stmt: ClassStatement):
        _check_statement(stmt)
        if self._skipped_type(stmt.name):
            return
        typedef = self._ensure_type(stmt.name)
        parents = [p for p in stmt.parents if p not in self.config.blocked_types]
        typedef["parents"] = list(_union_preserve_order(typedef["parents"], parents))
        if not typedef["comment"]:
            typedef["comment"] = stmt.comment or ""
        typedef["declared"] = True

    def build(self) -> OntologyGraph:
        root = self.config.root_type
        nodes = {}
        for name, typedef in self._types.items():
            parents = tuple(typedef["parents"])
            if not typedef["declared"]:
                logger.debug("Type %s only appears as a property domain", name)
            elif not parents and name != root:
                parents = (root,)
            nodes[name] = TypeNode(
                name=name,
                parents=parents,
                properties=dict(typedef["properties"]),
                comment=typedef["comment"],
            )
        instances = {k: tuple(v) for k, v in self._instances.items()}
        logger.info("Built graph with %d types and %d enumerations", len(nodes), len(instances))
        return OntologyGraph(nodes=nodes, instances=instances)


def build_graph(statements: Iterable, config: ResolverConfig = DEFAULT_CONFIG) -> OntologyGraph:
    return GraphBuilder(config).add_all(statements).build()
