"""
Read the inputs of a run: the vocabulary (any RDF format rdflib understands,
typically schema.org JSON-LD or Turtle) and an optional label file.

How to use
==========

from ontophrase.loaders import load_vocabulary, statements_from_rdf

g = load_vocabulary("./schema.jsonld", url="https://schema.org/version/3.9/schema.jsonld")
statements = statements_from_rdf(g)

Notes
-----
- Only subjects inside the vocabulary namespace are considered.
- rdfs:Class subjects become ClassStatements, rdf:Property subjects become
  PropertyStatements (schema:domainIncludes / schema:rangeIncludes), and
  subjects typed with a vocabulary class become enumeration members.
- RDF graphs are unordered, so subjects and parent lists are sorted by IRI;
  the same file always yields the same statement order.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from rdflib import Graph, Literal, Namespace, RDF, RDFS, URIRef
from rdflib.util import guess_format

from .config import get_logger
from .config.tables import DEFAULT_VOCABULARY_URL, SCHEMA_NAMESPACE
from .errors import MalformedStatementError
from .model import ClassStatement, EnumMemberStatement, PropertyStatement, Statement

logger = get_logger(__name__)


def _text(value) -> str:
    if isinstance(value, Literal):
        return str(value)
    return ""


def statements_from_rdf(g: Graph, namespace: str = SCHEMA_NAMESPACE) -> List[Statement]:
    """Convert an rdflib graph describing a vocabulary into builder statements."""
    schema = Namespace(namespace)

    def in_ns(u) -> bool:
        return isinstance(u, URIRef) and str(u).startswith(namespace)

    def local(u) -> str:
        return str(u)[len(namespace):]

    def local_names(subject, predicate) -> Tuple[str, ...]:
        return tuple(sorted(local(o) for o in g.objects(subject, predicate) if in_ns(o)))

    statements = []
    subjects = sorted({s for s in g.subjects(RDF.type, None) if in_ns(s)}, key=str)
    for s in subjects:
        types = set(g.objects(s, RDF.type))
        comment = _text(g.value(s, RDFS.comment))

        if RDFS.Class in types:
            statements.append(ClassStatement(
                name=local(s),
                parents=local_names(s, RDFS.subClassOf),
                comment=comment,
            ))
        elif RDF.Property in types:
            statements.append(PropertyStatement(
                name=local(s),
                domains=local_names(s, schema.domainIncludes),
                ranges=local_names(s, schema.rangeIncludes),
                comment=comment,
                superseded=(s, schema.supersededBy, None) in g,
            ))
        else:
            enum_types = sorted(local(t) for t in types if in_ns(t))
            if not enum_types:
                raise MalformedStatementError(
                    str(s), f"don't know how to handle a subject of type {sorted(str(t) for t in types)}")
            for enum_type in enum_types:
                statements.append(EnumMemberStatement(name=local(s), enum_type=enum_type))

    logger.info("Read %d statements from %d triples", len(statements), len(g))
    return statements


def load_vocabulary(
    cache_file: Union[str, Path],
    url: str = DEFAULT_VOCABULARY_URL,
    rdf_format: Optional[str] = None,
) -> Graph:
    """
    Parse the vocabulary from `cache_file`, fetching it from `url` (and
    writing the cache) when the file does not exist yet.
    """
    cache_path = Path(cache_file)
    fmt = rdf_format or guess_format(cache_path.as_posix()) or "json-ld"

    g = Graph()
    if cache_path.exists():
        g.parse(cache_path.as_posix(), format=fmt)
        return g

    logger.info("Fetching vocabulary from %s", url)
    g.parse(url, format=rdf_format or guess_format(url) or "json-ld")
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    g.serialize(destination=cache_path.as_posix(), format=fmt)
    logger.info("Cached vocabulary in %s", cache_path)
    return g


def load_label_source(path: Union[str, Path]) -> Dict[str, Tuple[str, ...]]:
    """
    Read external canonical label candidates, e.g. wikidata property labels.

    Accepts {"worksFor": {"labels": ["employer", "works for"]}} or the
    shorter {"worksFor": ["employer", "works for"]}.
    """
    with open(path, encoding="utf-8") as fp:
        raw = json.load(fp)
    if not isinstance(raw, dict):
        raise ValueError(f"Label file {path} must contain a JSON object")

    labels = {}
    for name, entry in raw.items():
        values = entry.get("labels", []) if isinstance(entry, dict) else entry
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"Labels for {name} in {path} must be a list of strings")
        labels[name] = tuple(values)
    return labels
