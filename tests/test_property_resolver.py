"""Tests for candidate scoring, array heuristics and type overrides."""

import logging

import pytest

from ontophrase import semantic_types as st
from ontophrase.model import PropertyDef
from ontophrase.property_resolver import PropertyTypeResolver, best_candidate, score_candidate


def test_scores(graph, config):
    assert score_candidate("RestrictedDiet", graph, config) == 5
    assert score_candidate("Number", graph, config) == 4
    assert score_candidate("PostalAddress", graph, config) == 3
    assert score_candidate("Text", graph, config) == 2
    assert score_candidate("Person", graph, config) == 1
    assert score_candidate("Spaceship", graph, config) == -1


def test_best_candidate_prefers_first_on_ties(graph, config):
    assert best_candidate(PropertyDef(("Person", "Organization")), graph, config) == "Person"
    assert best_candidate(PropertyDef(("Text", "RestrictedDiet", "Number")), graph, config) == "RestrictedDiet"
    assert best_candidate(PropertyDef(("Spaceship",)), graph, config) is None
    assert best_candidate(PropertyDef(()), graph, config) is None


def test_unknown_types_drop_the_property(resolver):
    assert resolver.resolve_type("warpDrive", PropertyDef(("Spaceship",), "The drive.")) == (None, None)


def test_blocked_property_resolves_to_nothing(resolver):
    assert resolver.resolve_type("sameAs", PropertyDef(("URL",), "URL of a reference page.")) == (None, None)


def test_entity_reference(resolver):
    source, semantic_type = resolver.resolve_type("employee", PropertyDef(("Person",), "Someone working here."))
    assert source == "Person"
    assert semantic_type == st.EntityRef("org.schema:Person")


def test_indefinite_article_comment_makes_array(resolver):
    _, semantic_type = resolver.resolve_type("member", PropertyDef(("Person",), "A member of an organization."))
    assert semantic_type == st.Array(st.EntityRef("org.schema:Person"))

    _, semantic_type = resolver.resolve_type("founder", PropertyDef(("Person",), "an early founder."))
    assert semantic_type == st.Array(st.EntityRef("org.schema:Person"))

    _, semantic_type = resolver.resolve_type("leader", PropertyDef(("Person",), "The leader."))
    assert semantic_type == st.EntityRef("org.schema:Person")


def test_force_array(resolver):
    # Organizations that the person works for.
    _, semantic_type = resolver.resolve_type(
        "worksFor", PropertyDef(("Organization",), "Organizations that the person works for."))
    assert semantic_type == st.Array(st.EntityRef("org.schema:Organization"))


def test_force_not_array_wins(graph, config, synthesizer):
    cfg = config.with_options(
        force_array=frozenset({"member"}),
        force_not_array=frozenset({"member"}),
    )
    resolver = PropertyTypeResolver(graph, cfg, synthesizer)
    _, semantic_type = resolver.resolve_type("member", PropertyDef(("Person", "RatingList"), "A member."))
    assert semantic_type == st.EntityRef("org.schema:Person")


def test_list_wrapper_candidate_is_not_wrapped_twice(resolver):
    source, semantic_type = resolver.resolve_type("ratings", PropertyDef(("RatingList",), "A list of ratings."))
    assert source == "RatingList"
    assert isinstance(semantic_type, st.Array)
    assert isinstance(semantic_type.elem, st.Compound)
    assert semantic_type.elem.name == "Rating"


def test_list_wrapper_candidate_makes_other_winner_an_array(resolver):
    _, semantic_type = resolver.resolve_type("reviewer", PropertyDef(("RatingList", "Text"), "The reviewer."))
    assert semantic_type == st.Array(st.String)


def test_type_override_replaces_computed_type(resolver):
    source, semantic_type = resolver.resolve_type("telephone", PropertyDef(("Text",), "A telephone number."))
    assert source == "Text"
    assert semantic_type == st.EntityRef("tt:phone_number")


def test_override_still_needs_a_usable_candidate(resolver):
    assert resolver.resolve_type("telephone", PropertyDef(("Spaceship",))) == (None, None)


@pytest.mark.parametrize("name,expected", [
    ("numberOfRooms", st.Number),
    ("floorLevel", st.Number),
    ("eligibleQuantity", st.Number),
    ("loanDuration", st.Measure("ms")),
])
def test_ambiguous_numeric_type_uses_name_hints(resolver, name, expected):
    assert resolver.resolve_type(name, PropertyDef(("QuantitativeValue",), "The value.")) == \
        ("QuantitativeValue", expected)


def test_ambiguous_numeric_type_defaults_to_number(resolver, caplog):
    with caplog.at_level(logging.WARNING, logger="ontophrase"):
        result = resolver.resolve_type("height", PropertyDef(("QuantitativeValue",), "The height."))
    assert result == ("QuantitativeValue", st.Number)
    assert "height" in caplog.text


def test_booleans_and_enums_are_never_arrays(resolver):
    _, semantic_type = resolver.resolve_type("isAccessible", PropertyDef(("Boolean",), "A flag."))
    assert semantic_type == st.Boolean

    _, semantic_type = resolver.resolve_type("suitableForDiet", PropertyDef(("RestrictedDiet",), "A diet."))
    assert semantic_type == st.Enum(("GlutenFreeDiet", "VeganDiet"))


def test_struct_candidate_becomes_compound(resolver):
    _, semantic_type = resolver.resolve_type("address", PropertyDef(("PostalAddress", "Text"), "Physical address."))
    assert isinstance(semantic_type, st.Compound)
    assert semantic_type.field_names() == ["streetAddress", "addressLocality", "telephone"]


def test_resolve_property_annotations(resolver):
    field = resolver.resolve_property("name", PropertyDef(("Text",), "The name."))
    assert field.semantic_type == st.String
    assert field.source_type == "Text"
    assert not field.filterable
    assert field.canonical == {"base": ["name"], "passive_verb": ["called"]}
    assert field.comment is None
