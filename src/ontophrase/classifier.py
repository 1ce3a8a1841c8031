"""
Classify every type of the arena into a representation strategy.

Pass 1 sets the hierarchy flags (action, enumeration, list wrapper, struct
lineage). Pass 2 demotes struct types that would contain themselves through
their fields. Pass 3 makes every ancestor of a non-struct type non-struct too,
so no struct type has a non-struct descendant. Passes 2 and 3 repeat until
no type is demoted.
"""

from dataclasses import replace
from typing import Dict, Iterator

from .compound import collect_properties
from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .model import OntologyGraph, TypeNode
from .property_resolver import best_candidate

logger = get_logger(__name__)


def item_type(type_name: str, graph: OntologyGraph, config: ResolverConfig) -> str:
    """Element type of a list wrapper, by naming convention (RatingList -> Rating)."""
    for suffix in config.collection_suffixes:
        if type_name.endswith(suffix):
            item_name = type_name[:-len(suffix)]
            if item_name in graph:
                return item_name
            logger.warning("Element type %s of %s is not a known type, using %s",
                           item_name, type_name, config.root_type)
            return config.root_type

    logger.warning("%s subclass %s does not have a recognized suffix", config.collection_root, type_name)
    return config.root_type


def _hierarchy_flags(node: TypeNode, graph: OntologyGraph, config: ResolverConfig) -> TypeNode:
    name = node.name
    is_enum = name in graph.instances or graph.is_subclass(name, config.enum_root)
    is_list_wrapper = graph.is_subclass(name, config.collection_root)
    lineage = name in config.struct_roots or any(graph.is_subclass(name, root) for root in config.struct_roots)
    if name in config.non_struct_types:
        lineage = False

    return replace(
        node,
        is_action=graph.is_subclass(name, config.action_root),
        is_enum=is_enum,
        enum_values=tuple(graph.instances.get(name, ())) if is_enum else (),
        is_list_wrapper=is_list_wrapper,
        element_type=item_type(name, graph, config) if is_list_wrapper else None,
        represent_as_struct=lineage,
        is_struct_lineage=lineage,
    )


def struct_edges(graph: OntologyGraph, type_name: str, config: ResolverConfig) -> Iterator[str]:
    """Struct types that `type_name` would inline as (possibly list-valued) fields."""
    for prop_name, prop in collect_properties(graph, type_name, config).items():
        if prop_name in config.type_overrides or prop_name in config.blocked_properties:
            continue
        target = best_candidate(prop, graph, config)
        seen = set()
        while target is not None and target not in seen and not config.is_builtin(target):
            seen.add(target)
            node = graph.get(target)
            if node is None:
                break
            if node.is_list_wrapper:
                target = node.element_type
                continue
            if node.represent_as_struct and not (node.is_enum and node.enum_values):
                yield target
            break


def find_cycle(graph: OntologyGraph, type_name: str, lookfor: str, visited: set,
               config: ResolverConfig, path=None) -> bool:
    path = [] if path is None else path
    if type_name in visited:
        if type_name == lookfor:
            logger.debug("Cycle through %s", " -> ".join(path + [type_name]))
        return type_name == lookfor
    visited.add(type_name)

    path.append(type_name)
    for target in struct_edges(graph, type_name, config):
        if find_cycle(graph, target, lookfor, visited, config, path):
            return True
    path.pop()
    return False


def _break_cycles(working: Dict[str, TypeNode], view: OntologyGraph, config: ResolverConfig) -> bool:
    """Demote struct types that reach themselves; True if any was demoted."""
    demoted = False
    for name in list(working):
        node = working[name]
        if node.is_enum or not node.represent_as_struct:
            continue
        if find_cycle(view, name, name, set(), config):
            logger.warning("Found representation cycle for %s, representing it as an entity", name)
            working[name] = replace(node, represent_as_struct=False)
            demoted = True
    return demoted


def _propagate_non_struct(working: Dict[str, TypeNode]) -> bool:
    """Demote every ancestor of a non-struct type; True if any was demoted."""
    done = set()
    demoted = False

    def make_non_struct(type_name):
        nonlocal demoted
        if type_name in done or type_name not in working:
            return
        done.add(type_name)
        if working[type_name].represent_as_struct:
            logger.debug("%s is an ancestor of a non-struct type, demoting", type_name)
            working[type_name] = replace(working[type_name], represent_as_struct=False)
            demoted = True
        for parent in working[type_name].parents:
            make_non_struct(parent)

    for name in list(working):
        node = working[name]
        if node.is_enum or node.represent_as_struct:
            continue
        make_non_struct(name)
    return demoted


def classify(graph: OntologyGraph, config: ResolverConfig = DEFAULT_CONFIG) -> OntologyGraph:
    """Return a new arena with every classification flag set."""
    working: Dict[str, TypeNode] = {
        name: _hierarchy_flags(node, graph, config) for name, node in graph.nodes.items()
    }
    # shares `working`, so flag updates below are visible to scoring
    view = OntologyGraph(nodes=working, instances=graph.instances)

    # a demotion can move a property's best candidate onto another struct
    # type, so repeat until the flags are stable
    rounds = 0
    while True:
        rounds += 1
        cycles = _break_cycles(working, view, config)
        ancestors = _propagate_non_struct(working)
        if not (cycles or ancestors):
            break
    logger.debug("Struct classification settled after %d rounds", rounds)

    counts = {
        "struct": sum(1 for n in working.values() if n.represent_as_struct),
        "enum": sum(1 for n in working.values() if n.is_enum),
        "list": sum(1 for n in working.values() if n.is_list_wrapper),
        "action": sum(1 for n in working.values() if n.is_action),
    }
    logger.info("Classified %d types: %s", len(working), counts)
    return graph.with_nodes(working)
