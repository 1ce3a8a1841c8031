"""Shared fixtures: a small schema.org-like vocabulary and a lexicon tagger."""

import logging

import pytest

from ontophrase.canonical import CanonicalPhraseSynthesizer
from ontophrase.classifier import classify
from ontophrase.config import DEFAULT_CONFIG
from ontophrase.graph_builder import build_graph
from ontophrase.model import ClassStatement, EnumMemberStatement, PropertyStatement
from ontophrase.property_resolver import PropertyTypeResolver
from ontophrase.tagger import DictTagger

LEXICON = {
    "serves": "VBZ",
    "works": "VBZ",
    "contains": "VBZ",
    "for": "IN",
    "at": "IN",
    "in": "IN",
    "of": "IN",
    "available": "JJ",
    "accessible": "JJ",
    "published": "VBN",
    "contained": "VBN",
    "cuisine": "NN",
    "date": "NN",
    "member": "NN",
    "subject": "NN",
}


def small_schema():
    C, P, E = ClassStatement, PropertyStatement, EnumMemberStatement
    return [
        C("Thing", (), "The most generic type of item."),
        P("name", ("Thing",), ("Text",), "The name of the item."),
        P("description", ("Thing",), ("Text",), "A description of the item."),
        P("url", ("Thing",), ("URL",), "URL of the item."),
        C("Intangible", ("Thing",)),
        C("StructuredValue", ("Intangible",)),
        C("Rating", ("Intangible",)),
        P("ratingValue", ("Rating",), ("Number", "Text"), "The rating for the content."),
        C("AggregateRating", ("Rating",)),
        P("reviewCount", ("AggregateRating",), ("Integer",), "The count of total number of reviews."),
        C("ItemList", ("Intangible",)),
        C("RatingList", ("ItemList",)),
        C("Enumeration", ("Intangible",)),
        C("RestrictedDiet", ("Enumeration",)),
        E("GlutenFreeDiet", "RestrictedDiet"),
        E("VeganDiet", "RestrictedDiet"),
        C("ContactPoint", ("StructuredValue",)),
        P("telephone", ("ContactPoint", "Organization"), ("Text",), "The telephone number."),
        C("PostalAddress", ("ContactPoint",)),
        P("streetAddress", ("PostalAddress",), ("Text",), "The street address."),
        P("addressLocality", ("PostalAddress",), ("Text",), "The locality."),
        C("Organization", ("Thing",)),
        P("address", ("Organization", "Place"), ("PostalAddress", "Text"), "Physical address of the item."),
        P("aggregateRating", ("Organization",), ("AggregateRating",), "The overall rating."),
        P("ratings", ("Organization",), ("RatingList",), "Ratings of the organization."),
        P("employee", ("Organization",), ("Person",), "Someone working for this organization."),
        C("Person", ("Thing",)),
        P("worksFor", ("Person",), ("Organization",), "Organizations that the person works for."),
        P("suitableForDiet", ("Person",), ("RestrictedDiet",), "A diet restricted to certain foods."),
        C("Action", ("Thing",)),
        C("SearchAction", ("Action",)),
        P("agent", ("Action",), ("Person",), "The direct performer of the action."),
        C("Place", ("Thing",)),
        P("geo", ("Place",), ("GeoCoordinates",), "The geo coordinates of the place."),
        C("LocalBusiness", ("Organization", "Place")),
        P("new", ("LocalBusiness",), ("Boolean",), "Whether the business is new."),
    ]


@pytest.fixture
def tagger():
    return DictTagger(LEXICON)


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def graph(config):
    return classify(build_graph(small_schema(), config), config)


@pytest.fixture
def synthesizer(config, tagger):
    return CanonicalPhraseSynthesizer(config, tagger)


@pytest.fixture
def resolver(graph, config, synthesizer):
    return PropertyTypeResolver(graph, config, synthesizer)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("ontophrase")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
