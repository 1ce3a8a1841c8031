"""Tests for type classification, cycle breaking and non-struct propagation."""

import logging

from ontophrase.classifier import classify, item_type, struct_edges
from ontophrase.graph_builder import build_graph
from ontophrase.model import (
    ClassStatement,
    EntityRepr,
    EnumRepr,
    ListWrapperRepr,
    PropertyStatement,
    StructRepr,
)

from conftest import small_schema


def _struct_pair():
    return [
        ClassStatement("Thing"),
        ClassStatement("Intangible", ("Thing",)),
        ClassStatement("StructuredValue", ("Intangible",)),
        ClassStatement("A", ("StructuredValue",)),
        ClassStatement("B", ("StructuredValue",)),
        PropertyStatement("toB", ("A",), ("B",), "The b of a."),
        PropertyStatement("toA", ("B",), ("A",), "The a of b."),
    ]


def test_hierarchy_flags(graph):
    assert graph["SearchAction"].is_action
    assert not graph["Action"].is_action

    diet = graph["RestrictedDiet"]
    assert diet.is_enum
    assert diet.enum_values == ("GlutenFreeDiet", "VeganDiet")
    assert diet.representation == EnumRepr(("GlutenFreeDiet", "VeganDiet"))

    assert graph["Person"].representation == EntityRepr("Person")
    assert graph["PostalAddress"].representation == StructRepr("PostalAddress")


def test_list_wrapper_element_type(graph):
    # RatingList collapses to a list of Rating
    ratings = graph["RatingList"]
    assert ratings.is_list_wrapper
    assert ratings.element_type == "Rating"
    assert ratings.representation == ListWrapperRepr("Rating")

    rating = graph["Rating"]
    assert rating.is_struct_lineage
    assert rating.represent_as_struct


def test_unknown_list_element_falls_back_to_root(graph, config, caplog):
    with caplog.at_level(logging.WARNING, logger="ontophrase"):
        assert item_type("ReviewList", graph, config) == "Thing"
        assert item_type("Breadcrumbs", graph, config) == "Thing"
    assert "Review" in caplog.text
    assert "recognized suffix" in caplog.text


def test_struct_lineage(graph):
    for name in ("StructuredValue", "ContactPoint", "PostalAddress", "Rating", "AggregateRating"):
        assert graph[name].represent_as_struct, name
        assert graph[name].is_struct_lineage, name
    for name in ("Thing", "Intangible", "Organization", "ItemList"):
        assert not graph[name].represent_as_struct, name


def test_non_struct_override(config):
    cfg = config.with_options(non_struct_types=frozenset({"PostalAddress"}))
    graph = classify(build_graph(small_schema(), cfg), cfg)
    assert not graph["PostalAddress"].represent_as_struct
    assert not graph["PostalAddress"].is_struct_lineage
    # ancestors of a non-struct type are non-struct as well
    assert not graph["ContactPoint"].represent_as_struct
    assert not graph["StructuredValue"].represent_as_struct
    assert graph["Rating"].represent_as_struct


def test_mutual_cycle_demotes_first_visited(config, caplog):
    with caplog.at_level(logging.WARNING, logger="ontophrase"):
        graph = classify(build_graph(_struct_pair(), config), config)
    assert not graph["A"].represent_as_struct
    assert graph["A"].is_struct_lineage
    assert graph["B"].represent_as_struct
    # propagation to the ancestors of A
    assert not graph["StructuredValue"].represent_as_struct
    assert "cycle" in caplog.text


def test_self_reference_is_demoted(config):
    statements = [
        ClassStatement("Thing"),
        ClassStatement("StructuredValue", ("Thing",)),
        ClassStatement("Node", ("StructuredValue",)),
        PropertyStatement("next", ("Node",), ("Node",), "The following node."),
        ClassStatement("Leaf", ("StructuredValue",)),
        PropertyStatement("weightValue", ("Leaf",), ("Number",), "The value."),
    ]
    graph = classify(build_graph(statements, config), config)
    assert not graph["Node"].represent_as_struct
    assert graph["Leaf"].represent_as_struct


def test_inherited_property_cycle_is_demoted(config):
    statements = [
        ClassStatement("Thing"),
        ClassStatement("StructuredValue", ("Thing",)),
        ClassStatement("Base", ("StructuredValue",)),
        PropertyStatement("child", ("Base",), ("Derived",), "The child."),
        ClassStatement("Derived", ("Base",)),
        PropertyStatement("label", ("Derived",), ("Text",), "The label."),
    ]
    graph = classify(build_graph(statements, config), config)
    # Derived inherits `child`, so it would contain itself
    assert not graph["Derived"].represent_as_struct
    # and Base is its ancestor
    assert not graph["Base"].represent_as_struct
    assert graph["Base"].is_struct_lineage


def _shifting_cycle():
    # demoting A makes B the best range of `parts`, which closes N -> B -> N
    return small_schema() + [
        ClassStatement("N", ("StructuredValue",)),
        ClassStatement("B", ("StructuredValue",)),
        ClassStatement("A", ("StructuredValue",)),
        PropertyStatement("parts", ("N",), ("A", "B")),
        PropertyStatement("owner", ("B",), ("N",)),
        PropertyStatement("selfRef", ("A",), ("A",)),
        PropertyStatement("holding", ("Person",), ("N",)),
    ]


def _assert_no_struct_reaches_itself(graph, config):
    for name, node in graph.nodes.items():
        if not node.represent_as_struct:
            continue
        seen, stack = set(), list(struct_edges(graph, name, config))
        while stack:
            cur = stack.pop()
            assert cur != name
            if cur not in seen:
                seen.add(cur)
                stack.extend(struct_edges(graph, cur, config))


def test_no_struct_reaches_itself(graph, config):
    _assert_no_struct_reaches_itself(graph, config)


def test_cycle_opened_by_a_demotion_is_broken(config):
    graph = classify(build_graph(_shifting_cycle(), config), config)
    assert not graph["A"].represent_as_struct
    assert not graph["N"].represent_as_struct
    assert graph["B"].represent_as_struct
    _assert_no_struct_reaches_itself(graph, config)


def test_classify_does_not_touch_input(config):
    raw = build_graph(_struct_pair(), config)
    classify(raw, config)
    assert not raw["A"].represent_as_struct
    assert not raw["A"].is_struct_lineage
